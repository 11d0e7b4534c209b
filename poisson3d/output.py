"""Writers for result cubes: raw binary and legacy VTK."""

from __future__ import annotations

import os

import numpy as np


def write_binary(fname: str | os.PathLike, u) -> None:
    """Dump ``u`` as raw native-endian doubles in C order."""
    data = np.ascontiguousarray(u, dtype=np.float64)
    with open(fname, "wb") as stream:
        stream.write(data.tobytes())


def write_vtk(fname: str | os.PathLike, u) -> None:
    """Write a cube as a binary legacy VTK structured-points file."""
    data = np.ascontiguousarray(u, dtype=np.float64)
    if data.ndim != 3 or len(set(data.shape)) != 1:
        raise ValueError(f"expected a cube, got shape {data.shape}")
    n = data.shape[0]
    header = (
        "# vtk DataFile Version 3.0\n"
        "saved from function print_vtk.\n"
        "BINARY\n"
        "DATASET STRUCTURED_POINTS\n"
        f"DIMENSIONS {n} {n} {n}\n"
        "ORIGIN 0 0 0\n"
        "SPACING 1 1 1\n"
        f"POINT_DATA {data.size}\n"
        "SCALARS gray double 1\n"
        "LOOKUP_TABLE default\n"
    )
    with open(fname, "wb") as stream:
        stream.write(header.encode("ascii"))
        stream.write(data.astype(">f8").tobytes())