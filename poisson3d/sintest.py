"""Convergence check of the Jacobi solver against a sine source term."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass

import numpy as np

from poisson3d.grid import allocate_cube
from poisson3d.jacobi import jacobi
from poisson3d.norm import wrapper_norm


@dataclass(frozen=True)
class SinTestResult:
    """Timing and final update norm of a sine test run."""

    wall_time: float
    norm: float


def _axis_points(size: int) -> np.ndarray:
    spacing = 2.0 / (size - 1)
    steps = np.full(size, spacing)
    steps[0] = -1.0
    points = np.cumsum(steps)
    points[-1] = 1.0
    return points


def sin_test(size: int = 258, iterations: int = 1000) -> SinTestResult:
    """Run Jacobi sweeps for f = 3*pi^2 * sin(pi x) sin(pi y) sin(pi z).

    Returns the wall time of the sweeps and the Frobenius norm of the
    difference between the last two iterates.
    """
    if size < 2:
        raise ValueError("size must be at least 2")
    if iterations < 0:
        raise ValueError("iterations must not be negative")

    points = _axis_points(size)
    s = np.sin(math.pi * points)
    exact = s[:, None, None] * s[None, :, None] * s[None, None, :]
    f = 3.0 * (math.pi * math.pi) * exact
    u = allocate_cube(size, size, size)
    u_next = allocate_cube(size, size, size)
    delta = 2.0 / (size - 1)

    start = time.perf_counter()
    for _ in range(iterations):
        jacobi(f, u, u_next, size, delta)
        u, u_next = u_next, u
    wall_time = time.perf_counter() - start

    return SinTestResult(wall_time=wall_time, norm=wrapper_norm(u, u_next, size))