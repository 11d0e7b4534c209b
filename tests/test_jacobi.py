import numpy as np
import pytest

from poisson3d.jacobi import jacobi


def test_single_interior_point_from_source_term():
    f = np.ones((3, 3, 3))
    u = np.zeros((3, 3, 3))
    u_next = np.zeros((3, 3, 3))
    jacobi(f, u, u_next, 3, 1.0)
    assert u_next[1, 1, 1] == pytest.approx(1.0 / 6.0)


def test_boundary_untouched():
    n = 5
    f = np.ones((n, n, n))
    u = np.ones((n, n, n))
    u_next = np.full((n, n, n), -7.0)
    jacobi(f, u, u_next, n, 0.5)
    assert (u_next[0] == -7.0).all()
    assert (u_next[-1] == -7.0).all()
    assert (u_next[:, 0] == -7.0).all()
    assert (u_next[:, :, -1] == -7.0).all()
    assert (u_next[1:-1, 1:-1, 1:-1] != -7.0).all()


def test_linear_field_is_fixed_point():
    n = 6
    idx = np.arange(n, dtype=float)
    u = idx[:, None, None] + 2 * idx[None, :, None] - idx[None, None, :]
    u = np.broadcast_to(u, (n, n, n)).copy()
    f = np.zeros((n, n, n))
    u_next = np.zeros((n, n, n))
    jacobi(f, u, u_next, n, 0.1)
    assert np.allclose(u_next[1:-1, 1:-1, 1:-1], u[1:-1, 1:-1, 1:-1])


def test_returns_u_next_and_leaves_u_alone():
    n = 4
    rng = np.random.default_rng(1)
    u = rng.random((n, n, n))
    before = u.copy()
    u_next = np.zeros((n, n, n))
    result = jacobi(np.zeros((n, n, n)), u, u_next, n, 1.0)
    assert result is u_next
    assert np.array_equal(u, before)