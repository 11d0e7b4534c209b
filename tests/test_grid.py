import numpy as np
import pytest

from poisson3d.grid import allocate_cube, init_radiator


def test_allocate_cube_shape_and_zeros():
    cube = allocate_cube(2, 3, 4)
    assert cube.shape == (2, 3, 4)
    assert cube.dtype == np.float64
    assert not cube.any()


@pytest.mark.parametrize("dims", [(0, 1, 1), (1, 0, 1), (1, 1, 0), (-2, 3, 3)])
def test_allocate_cube_rejects_non_positive(dims):
    with pytest.raises(ValueError):
        allocate_cube(*dims)


def test_init_radiator_walls():
    f, u, u_next = init_radiator(5, 2.0)
    assert u.shape == (5, 5, 5)
    assert u[0, 2, 2] == 20.0
    assert u[4, 2, 2] == 20.0
    assert u[2, 4, 2] == 20.0
    assert u[2, 2, 0] == 20.0
    assert u[2, 2, 4] == 20.0
    # y == min is not a heated wall
    assert u[2, 0, 2] == 0.0
    assert u[2, 2, 2] == 0.0


def test_init_radiator_u_next_zero():
    _, _, u_next = init_radiator(6, 2.0)
    assert not u_next.any()


def test_init_radiator_f_region():
    f, _, _ = init_radiator(5, 2.0)
    assert f[0, 0, 0] == 200.0
    assert f[1, 1, 1] == 200.0
    assert f[2, 0, 0] == 0.0
    assert f[0, 2, 0] == 0.0
    assert f[0, 0, 2] == 0.0
    assert set(np.unique(f)) <= {0.0, 200.0}
    assert int((f == 200.0).sum()) == 8