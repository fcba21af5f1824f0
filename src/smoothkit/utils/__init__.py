"""Utility functions for SmoothKit package."""

from .linalg import (
    orthonormal_polynomial_basis,
    projection_weights,
)
from .validate import (
    InvalidPolynomialOrderError,
    InvalidWindowSizeError,
)

__all__ = [
    "orthonormal_polynomial_basis",
    "projection_weights",
    "InvalidWindowSizeError",
    "InvalidPolynomialOrderError",
]
