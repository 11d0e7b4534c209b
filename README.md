# poisson3d

Building blocks for solving the Poisson problem on a three-dimensional cube
with the Jacobi method, using NumPy arrays:

- `poisson3d.grid`
  - `allocate_cube(m, n, k)` returns a zero-filled `(m, n, k)` float64 array.
    It raises `ValueError` if any dimension is not positive.
  - `init_radiator(edge_point_count, edge_width)` returns `(f, u, u_next)`
    for the radiator heating problem:
    - `u` is 20 on the walls x=min, x=max, y=max, z=min and z=max, and 0
      elsewhere.
    - `u_next` is all zeros.
    - `f` is 200 inside the radiator region and 0 elsewhere.
- `poisson3d.jacobi`
  - `jacobi(f, u, u_next, edge_point_count, delta)` writes one Jacobi sweep
    of `u` into the interior of `u_next` and returns `u_next`. The boundary
    is left untouched.
- `poisson3d.norm`
  - `norm_fro(a, dim)` is the Frobenius norm of the leading `dim`-cube of `a`.
  - `wrapper_norm(m1, m2, dim)` is the same norm of `m1 - m2`.
  - Both raise `ValueError` for `None` input, for `dim < 1`, or for arrays
    too small for `dim`.
- `poisson3d.output`
  - `write_binary(fname, u)` dumps the cube as raw native-endian doubles in
    row-major order.
  - `write_vtk(fname, u)` writes a binary legacy VTK `STRUCTURED_POINTS` file
    with big-endian doubles. It raises `ValueError` unless `u` is a cube.
- `poisson3d.sintest`
  - `sin_test(size=258, iterations=1000)` runs Jacobi sweeps with the source
    term `3π²·sin(πx)·sin(πy)·sin(πz)` on `[-1, 1]³`, starting from zero.
  - It returns a `SinTestResult` with the `wall_time` of the sweeps and the
    `norm`, the Frobenius norm of the difference between the last two
    iterates.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from poisson3d.grid import allocate_cube
from poisson3d.norm import norm_fro

cube = allocate_cube(3, 3, 3)
cube[:] = 1.0
cube[0, 0, 0] = 2.0
print(round(norm_fro(cube, 3), 2))   # 5.48
```

```python
from poisson3d.sintest import sin_test

result = sin_test(size=32, iterations=200)
print(result.wall_time, result.norm)
```

## Command line

```
poisson3d N ITER_MAX TOLERANCE START_T [OUTPUT_TYPE] [--sin-size S] [--sin-iterations I]
```

The command does the following:

1. It allocates an `N`³ grid. If `N` is not positive, it reports the failure
   and exits with status 1.
2. It runs `sin_test` with `--sin-size` (default 258) and `--sin-iterations`
   (default 1000).
3. It prints the wall time and the norm of the last update.
4. It handles `OUTPUT_TYPE` as follows:
   - `0`: no output. This is the default.
   - `3`: writes a binary dump to `poisson_res_<N>.bin`.
   - `4`: writes a VTK file to `poisson_res_<N>.vtk`.
   - Any other value is reported as not supported.

## What the package does not do

The command does not solve the radiator problem. `ITER_MAX`, `TOLERANCE` and
`START_T` are parsed but not used. The grid written for output types 3 and 4
is the freshly allocated `N`³ grid of zeros, not a computed temperature field.
There is no iteration loop that stops on a tolerance. There is no
Gauss–Seidel solver either. To solve a problem, combine `init_radiator`,
`jacobi` and `wrapper_norm` yourself.