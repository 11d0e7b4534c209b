"""Jacobi iteration step for the 3D Poisson problem."""

from __future__ import annotations

import numpy as np


def jacobi(
    f: np.ndarray,
    u: np.ndarray,
    u_next: np.ndarray,
    edge_point_count: int,
    delta: float,
) -> np.ndarray:
    """Write one Jacobi sweep of ``u`` into the interior of ``u_next``.

    The boundary of ``u_next`` is left untouched. Returns ``u_next``.
    """
    n = edge_point_count
    if n < 3:
        return u_next
    inner = slice(1, n - 1)
    lower = slice(0, n - 2)
    upper = slice(2, n)
    u_next[inner, inner, inner] = (1.0 / 6.0) * (
        u[lower, inner, inner]
        + u[upper, inner, inner]
        + u[inner, lower, inner]
        + u[inner, upper, inner]
        + u[inner, inner, lower]
        + u[inner, inner, upper]
        + delta * delta * f[inner, inner, inner]
    )
    return u_next