"""Inverse Laplace transform with concentrated matrix-exponential functions: coefficient tables, inversion and a table-building command."""

__version__ = "0.2.2"
__all__ = ["coefficients", "inversion", "cli"]