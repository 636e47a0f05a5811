"""Modular counting: combinatorics, NTT polynomial arithmetic and problem solvers."""

__version__ = "0.1.0"