"""Exact phases, cyclotomic scalars, parity expressions and F2 matrices for ZX-calculus work."""

__version__ = "0.2.0"
__all__ = ["cyclotomic", "jsonphase", "linalg", "params", "phase", "scalar", "util"]