"""Tests for smoothkit.utils.validate."""

import numpy as np
import pytest

from smoothkit.utils.validate import (
    InvalidPolynomialOrderError,
    InvalidWindowSizeError,
    validate_coefficient_matrix,
    validate_half_window_size,
    validate_polynomial_order,
    validate_signal,
)


def test_validate_signal_returns_float_copy():
    """Tests that the signal is converted to a new float array."""
    x = np.array([1, 2, 3])
    out = validate_signal(x)

    assert out.dtype == np.float64
    out[0] = 10.0
    assert x[0] == 1


def test_validate_signal_accepts_lists_and_2d():
    """Tests that lists and (n, c) arrays are accepted."""
    assert validate_signal([1.0, 2.0]).shape == (2,)
    assert validate_signal(np.zeros((5, 3))).shape == (5, 3)


@pytest.mark.parametrize("signal", [3.0, np.zeros((2, 2, 2)), []])
def test_validate_signal_rejects_bad_input(signal):
    """Tests that scalars, 3D arrays and empty signals are rejected."""
    with pytest.raises(ValueError):
        validate_signal(signal)


@pytest.mark.parametrize("m, n", [(1, 3), (2, 10), (np.int64(3), 7), (2.0, 5)])
def test_validate_half_window_size_accepts_fitting_windows(m, n):
    """Tests that windows up to the signal length are accepted."""
    assert validate_half_window_size(m, n=n) == int(m)


def test_validate_half_window_size_without_length():
    """Tests that only the value is checked when no length is given."""
    assert validate_half_window_size(50) == 50


@pytest.mark.parametrize("m", [0, -1, 1.5, True, "2", None])
def test_validate_half_window_size_rejects_invalid_values(m):
    """Tests that non-positive or non-integer values are rejected."""
    with pytest.raises(InvalidWindowSizeError):
        validate_half_window_size(m, n=100)


def test_validate_half_window_size_rejects_window_longer_than_signal():
    """Tests that a window exceeding the signal raises InvalidWindowSizeError."""
    with pytest.raises(InvalidWindowSizeError, match="too large"):
        validate_half_window_size(3, n=6)


def test_invalid_window_size_error_is_value_error():
    """Tests that the error kind can be caught as ValueError."""
    with pytest.raises(ValueError):
        validate_half_window_size(5, n=4)


@pytest.mark.parametrize("k, m", [(0, 1), (2, 1), (3, 2), (4, 2)])
def test_validate_polynomial_order_accepts_orders_below_window_size(k, m):
    """Tests that orders smaller than the window size are accepted."""
    assert validate_polynomial_order(k, m) == k


@pytest.mark.parametrize("k, m", [(3, 1), (5, 2), (-1, 3), (1.5, 3), (False, 3)])
def test_validate_polynomial_order_rejects_invalid_orders(k, m):
    """Tests that orders not supported by the window are rejected."""
    with pytest.raises(InvalidPolynomialOrderError):
        validate_polynomial_order(k, m)


def test_validate_coefficient_matrix_checks_shape():
    """Tests that the matrix must be (2m+1, 2m+1)."""
    assert validate_coefficient_matrix(np.eye(5), 2).shape == (5, 5)
    with pytest.raises(ValueError, match="shape"):
        validate_coefficient_matrix(np.eye(3), 2)
    with pytest.raises(ValueError, match="shape"):
        validate_coefficient_matrix(np.ones(5), 2)
