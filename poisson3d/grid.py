"""Grid allocation and initial conditions for the 3D Poisson problem."""

from __future__ import annotations

import math

import numpy as np

WALL_TEMPERATURE = 20.0
RADIATOR_VALUE = 200.0


def allocate_cube(m: int, n: int, k: int) -> np.ndarray:
    """Return a zero-filled ``(m, n, k)`` array of doubles.

    Raises ValueError when any dimension is not positive.
    """
    if m <= 0 or n <= 0 or k <= 0:
        raise ValueError(f"illegal cube dimensions: {m} x {n} x {k}")
    return np.zeros((m, n, k), dtype=np.float64)


def init_radiator(
    edge_point_count: int, edge_width: float
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Build ``(f, u, u_next)`` for the radiator problem.

    ``u`` holds 20 degrees on the walls x=min, x=max, y=max, z=min and
    z=max and 0 elsewhere; ``u_next`` is all zeros; ``f`` is 200 inside
    the radiator region and 0 elsewhere.
    """
    n = edge_point_count
    f = allocate_cube(n, n, n)
    u = allocate_cube(n, n, n)
    u_next = allocate_cube(n, n, n)

    max_point = n - 1
    u[0, :, :] = WALL_TEMPERATURE
    u[max_point, :, :] = WALL_TEMPERATURE
    u[:, max_point, :] = WALL_TEMPERATURE
    u[:, :, 0] = WALL_TEMPERATURE
    u[:, :, max_point] = WALL_TEMPERATURE

    x_max = math.floor((-3.0 / 8.0 + 1.0) / edge_width * max_point)
    y_max = math.floor((-1.0 / 2.0 + 1.0) / edge_width * max_point)
    z_min = math.ceil((-2.0 / 3.0 + 1.0) / edge_width * max_point)
    z_limit = min(z_min, max_point)

    if x_max >= 0 and y_max >= 0 and z_limit >= 0:
        f[: x_max + 1, : y_max + 1, : z_limit + 1] = RADIATOR_VALUE

    return f, u, u_next