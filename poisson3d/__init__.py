"""Jacobi sweeps, Frobenius norms, grid setup and output writers for the 3D Poisson problem."""

__version__ = "0.1.0"
__all__ = ["grid", "norm", "jacobi", "output", "sintest", "cli"]