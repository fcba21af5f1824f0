"""Validation utilities for SmoothKit."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "InvalidWindowSizeError",
    "InvalidPolynomialOrderError",
    "validate_signal",
    "validate_half_window_size",
    "validate_polynomial_order",
    "validate_coefficient_matrix",
]


class InvalidWindowSizeError(ValueError):
    """Raised when a half window size is not usable for a given signal."""


class InvalidPolynomialOrderError(ValueError):
    """Raised when the window is too small for the requested polynomial order."""


def _is_integral(value: Any) -> bool:
    """Returns True for Python/NumPy integers and integral floats, never for bools."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, (int, np.integer)):
        return True
    if isinstance(value, (float, np.floating)):
        return bool(np.isfinite(value)) and float(value).is_integer()
    return False


def validate_signal(signal: ArrayLike) -> NDArray[np.float64]:
    """Validates and converts a signal into a float NumPy array.

    A signal is either a 1D sequence of samples, or a 2D array of shape
    ``(n_samples, n_channels)`` holding several signals column-wise.

    Args:
        signal: Array-like of samples.

    Returns:
        A new float64 array; the input is never modified.

    Raises:
        ValueError: If the signal is not 1D or 2D, or holds no samples.
    """
    arr = np.array(signal, dtype=float, copy=True)
    if arr.ndim not in (1, 2):
        raise ValueError(f"signal must be 1D or 2D (n_samples, n_channels); got ndim={arr.ndim}.")
    if arr.shape[0] == 0:
        raise ValueError("signal must contain at least one sample.")
    return arr


def validate_half_window_size(half_window_size: Any, n: int | None = None) -> int:
    """Checks that a window of ``2 * half_window_size + 1`` samples fits a signal.

    Args:
        half_window_size: Number of samples on each side of the center.
        n: Number of samples in the signal. If ``None`` only the value of
            ``half_window_size`` itself is checked.

    Returns:
        The half window size as ``int``.

    Raises:
        InvalidWindowSizeError: If ``half_window_size`` is not a positive
            integer or the full window is longer than the signal.
    """
    if not _is_integral(half_window_size):
        raise InvalidWindowSizeError(
            f"half_window_size must be an integer; got {half_window_size!r}."
        )
    m = int(half_window_size)
    if m < 1:
        raise InvalidWindowSizeError(f"half_window_size must be at least 1 but is {m}.")
    window_size = 2 * m + 1
    if n is not None and window_size > n:
        raise InvalidWindowSizeError(
            f"half_window_size={m} is too large: the window ({window_size} samples) "
            f"does not fit into a signal of length {n}."
        )
    return m


def validate_polynomial_order(polynomial_order: Any, half_window_size: int) -> int:
    """Checks that the polynomial order is supported by the window.

    Args:
        polynomial_order: Degree of the local polynomial.
        half_window_size: Validated half window size.

    Returns:
        The polynomial order as ``int``.

    Raises:
        InvalidPolynomialOrderError: If ``polynomial_order`` is negative, not
            an integer, or not smaller than the window size.
    """
    if not _is_integral(polynomial_order):
        raise InvalidPolynomialOrderError(
            f"polynomial_order must be an integer; got {polynomial_order!r}."
        )
    k = int(polynomial_order)
    if k < 0:
        raise InvalidPolynomialOrderError(f"polynomial_order must be non-negative but is {k}.")
    window_size = 2 * int(half_window_size) + 1
    if k >= window_size:
        raise InvalidPolynomialOrderError(
            "The window size has to be larger than the polynomial order "
            f"(window size {window_size}, polynomial order {k})."
        )
    return k


def validate_coefficient_matrix(coef: ArrayLike, half_window_size: int) -> NDArray[np.float64]:
    """Validates the shape of a coefficient matrix for a given half window size.

    Args:
        coef: Square matrix with one weight row per window position.
        half_window_size: Validated half window size.

    Returns:
        The coefficient matrix as a float64 array.

    Raises:
        ValueError: If the matrix is not of shape ``(2m+1, 2m+1)``.
    """
    arr = np.asarray(coef, dtype=float)
    window_size = 2 * int(half_window_size) + 1
    if arr.shape != (window_size, window_size):
        raise ValueError(
            f"coef must have shape ({window_size}, {window_size}) for "
            f"half_window_size={half_window_size}; got {arr.shape}."
        )
    return arr
