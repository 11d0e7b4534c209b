"""Frobenius norm of cubes."""

from __future__ import annotations

import math

import numpy as np


def norm_fro(a, dim: int) -> float:
    """Return the Frobenius norm of the leading ``dim``-cube of ``a``.

    Raises ValueError when ``a`` is None or ``dim`` is illegal.
    """
    if a is None:
        raise ValueError("norm_fro: received None as input")
    if dim < 1:
        raise ValueError("norm_fro: dimension mismatch error")
    cube = np.asarray(a, dtype=np.float64)
    if cube.ndim != 3 or any(size < dim for size in cube.shape):
        raise ValueError("norm_fro: dimension mismatch error")
    block = cube[:dim, :dim, :dim]
    return math.sqrt(float(np.sum(block * block)))


def wrapper_norm(m1, m2, dim: int) -> float:
    """Return the Frobenius norm of ``m1 - m2`` over the leading ``dim``-cube."""
    if m1 is None or m2 is None:
        raise ValueError("wrapper_norm: received None as input")
    if dim < 1:
        raise ValueError("wrapper_norm: dimension mismatch error")
    a = np.asarray(m1, dtype=np.float64)
    b = np.asarray(m2, dtype=np.float64)
    for cube in (a, b):
        if cube.ndim != 3 or any(size < dim for size in cube.shape):
            raise ValueError("wrapper_norm: dimension mismatch error")
    diff = a[:dim, :dim, :dim] - b[:dim, :dim, :dim]
    return norm_fro(diff, dim)