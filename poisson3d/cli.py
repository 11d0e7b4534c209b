"""Command line entry point for the 3D Poisson solver."""

from __future__ import annotations

import argparse
import sys

from poisson3d.grid import allocate_cube
from poisson3d.output import write_binary, write_vtk
from poisson3d.sintest import sin_test

OUTPUT_PREFIX = "poisson_res"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="poisson3d", description="3D Poisson problem")
    parser.add_argument("n", type=int, help="grid size")
    parser.add_argument("iter_max", type=int, help="maximum number of iterations")
    parser.add_argument("tolerance", type=float, help="tolerance")
    parser.add_argument("start_t", type=float, help="start temperature of inner points")
    parser.add_argument(
        "output_type", type=int, nargs="?", default=0,
        help="0: none, 3: binary dump, 4: VTK file",
    )
    parser.add_argument("--sin-size", type=int, default=258, help="cube size of the sine test")
    parser.add_argument(
        "--sin-iterations", type=int, default=1000, help="iterations of the sine test"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the sine test and optionally dump the grid."""
    args = _parser().parse_args(argv)

    try:
        u = allocate_cube(args.n, args.n, args.n)
    except ValueError as exc:
        print(f"array u: allocation failed: {exc}", file=sys.stderr)
        return 1

    result = sin_test(args.sin_size, args.sin_iterations)
    print(f"Wall time {result.wall_time:f} ")
    print(f"Norm of last update: {result.norm:e}")

    if args.output_type == 0:
        pass
    elif args.output_type == 3:
        filename = f"{OUTPUT_PREFIX}_{args.n}.bin"
        print(f"Write binary dump to {filename}: ", end="", file=sys.stderr)
        write_binary(filename, u)
    elif args.output_type == 4:
        filename = f"{OUTPUT_PREFIX}_{args.n}.vtk"
        print(f"Write VTK file to {filename}: ", end="", file=sys.stderr)
        write_vtk(filename, u)
    else:
        print("Non-supported output type!", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())