"""Unit tests for Savitzky-Golay coefficient construction."""

import logging
import warnings
from fractions import Fraction

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy.signal import savgol_coeffs

from smoothkit.savitzky_golay.coefficients import (
    anchor_coefficients,
    cached_savitzky_golay_coefficients,
    fit_basis,
    mirror_edge_rows,
    savitzky_golay_coefficients,
    window_offsets,
)
from smoothkit.utils.validate import InvalidPolynomialOrderError, InvalidWindowSizeError

VALID_PAIRS = [(1, 0), (1, 1), (1, 2), (2, 2), (2, 3), (3, 2), (4, 4), (5, 3)]
HIGH_ORDER_PAIRS = [(6, 11), (6, 12), (10, 11), (10, 15), (10, 20), (25, 12)]


def _exact_fit_matrix(m, k):
    """Hat matrix of the degree-k fit over 2m+1 samples, in rational arithmetic."""
    w = 2 * m + 1
    ortho = []
    for p in range(k + 1):
        v = [Fraction(j**p) for j in range(w)]
        for u, uu in ortho:
            c = sum(a * b for a, b in zip(v, u)) / uu
            v = [a - c * b for a, b in zip(v, u)]
        ortho.append((v, sum(a * a for a in v)))
    return np.array(
        [[float(sum(u[i] * u[j] / uu for u, uu in ortho)) for j in range(w)] for i in range(w)]
    )


def test_window_offsets_span_unit_interval():
    """Tests that the offsets are centered on the window midpoint and scaled to [-1, 1]."""
    assert_allclose(window_offsets(2), [-1.0, -0.5, 0.0, 0.5, 1.0], atol=0.0, rtol=0.0)


def test_fit_basis_is_orthonormal():
    """Tests the shape and orthonormality of the per-window basis."""
    basis = fit_basis(4, 3)

    assert basis.shape == (9, 4)
    assert_allclose(basis.T @ basis, np.eye(4), atol=1e-13)


@pytest.mark.parametrize("m, k", VALID_PAIRS)
def test_anchor_coefficients_match_anchor_relative_pseudoinverse(m, k):
    """Tests that each anchor row is row 0 of pinv of the (j - anchor)**p design matrix."""
    w = 2 * m + 1
    basis = fit_basis(m, k)
    for anchor in range(m + 1):
        raw = np.vander(np.arange(w, dtype=float) - anchor, N=k + 1, increasing=True)
        expected = np.linalg.pinv(raw)[0]
        assert_allclose(anchor_coefficients(anchor, basis), expected, rtol=1e-7, atol=1e-9)


def test_centered_rows_match_tabulated_values():
    """Tests centered weights against the classic Savitzky-Golay tables."""
    assert_allclose(
        savitzky_golay_coefficients(2, 2)[2],
        np.array([-3.0, 12.0, 17.0, 12.0, -3.0]) / 35.0,
        atol=1e-12,
    )
    assert_allclose(
        savitzky_golay_coefficients(3, 2)[3],
        np.array([-2.0, 3.0, 6.0, 7.0, 6.0, 3.0, -2.0]) / 21.0,
        atol=1e-12,
    )
    # odd orders share the centered row with the even order below
    assert_allclose(
        savitzky_golay_coefficients(2, 3)[2],
        savitzky_golay_coefficients(2, 2)[2],
        atol=1e-12,
    )


def test_linear_edge_rows_for_three_point_window():
    """Tests the exact edge weights of a linear fit to three samples."""
    coef = savitzky_golay_coefficients(1, 1)

    assert_allclose(coef[0], [5.0 / 6.0, 1.0 / 3.0, -1.0 / 6.0], atol=1e-12)
    assert_allclose(coef[1], [1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0], atol=1e-12)
    assert_allclose(coef[2], [-1.0 / 6.0, 1.0 / 3.0, 5.0 / 6.0], atol=1e-12)


@pytest.mark.parametrize("m, k", VALID_PAIRS)
def test_coefficient_rows_sum_to_one(m, k):
    """Tests that every row reproduces a constant signal."""
    coef = savitzky_golay_coefficients(m, k)

    assert coef.shape == (2 * m + 1, 2 * m + 1)
    assert_allclose(coef.sum(axis=1), np.ones(2 * m + 1), atol=1e-9)


@pytest.mark.parametrize("m, k", VALID_PAIRS)
def test_right_edge_rows_mirror_left_edge_rows(m, k):
    """Tests that row m+1+j is row m-1-j reversed."""
    coef = savitzky_golay_coefficients(m, k)
    for j in range(m):
        assert_allclose(coef[m + 1 + j], coef[m - 1 - j][::-1], atol=0.0, rtol=0.0)


@pytest.mark.parametrize("m, k", [(2, 1), (3, 2), (4, 3), (4, 4)])
def test_rows_reproduce_polynomials_up_to_order(m, k):
    """Tests that row i evaluates any degree <= k polynomial exactly at position i."""
    coef = savitzky_golay_coefficients(m, k)
    t = np.arange(2 * m + 1, dtype=float)
    for degree in range(k + 1):
        y = ((t - m) / m) ** degree
        assert_allclose(coef @ y, y, atol=1e-8)


def test_order_zero_is_uniform_average():
    """Tests that k=0 gives the unweighted moving average in every row."""
    coef = savitzky_golay_coefficients(3, 0)
    assert_allclose(coef, np.full((7, 7), 1.0 / 7.0), atol=1e-12)


def test_mirror_edge_rows_reverses_both_axes():
    """Tests the pure mirroring transform."""
    left = np.array([[1.0, 2.0, 3.0],
                     [4.0, 5.0, 6.0]])

    out = mirror_edge_rows(left)

    assert_allclose(out, [[6.0, 5.0, 4.0], [3.0, 2.0, 1.0]], atol=0.0, rtol=0.0)
    out[0, 0] = -1.0
    assert left[1, 2] == 6.0


def test_parallel_construction_matches_serial():
    """Tests that threading the anchor fits does not change the result."""
    serial = savitzky_golay_coefficients(6, 4, n_workers=1)
    threaded = savitzky_golay_coefficients(6, 4, n_workers=4)
    assert_allclose(threaded, serial, atol=1e-14, rtol=0.0)


@pytest.mark.parametrize("m", [0, -2, 1.5, True])
def test_invalid_half_window_size_raises(m):
    """Tests that invalid half window sizes are rejected."""
    with pytest.raises(InvalidWindowSizeError):
        savitzky_golay_coefficients(m, 0)


@pytest.mark.parametrize("m, k", [(1, 3), (2, 5), (2, 9), (3, -1)])
def test_invalid_polynomial_order_raises(m, k):
    """Tests that k >= 2m+1 or k < 0 is rejected before any computation."""
    with pytest.raises(InvalidPolynomialOrderError):
        savitzky_golay_coefficients(m, k)


def test_cached_coefficients_are_reused_and_copied():
    """Tests that the memoized builder computes once and hands out copies."""
    first = cached_savitzky_golay_coefficients(3, 2)
    first[:] = 0.0
    second = cached_savitzky_golay_coefficients(3, 2)

    assert cached_savitzky_golay_coefficients.cache_info().hits == 1
    assert_allclose(second, savitzky_golay_coefficients(3, 2), atol=0.0, rtol=0.0)


def test_coefficient_computation_is_logged(caplog):
    """Tests that computing a matrix emits a debug record on the package logger."""
    with caplog.at_level(logging.DEBUG, logger="smoothkit"):
        savitzky_golay_coefficients(2, 2)

    assert any(
        record.name == "smoothkit" and "Savitzky-Golay coefficients" in record.getMessage()
        for record in caplog.records
    )


@pytest.mark.parametrize("m, k", HIGH_ORDER_PAIRS)
def test_high_order_coefficients_match_exact_fit(m, k):
    """Tests high orders against the hat matrix computed in exact arithmetic."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        coef = savitzky_golay_coefficients(m, k)

    assert_allclose(coef, _exact_fit_matrix(m, k), atol=1e-9)


@pytest.mark.parametrize("m, k", HIGH_ORDER_PAIRS)
def test_high_order_rows_sum_to_one_and_mirror(m, k):
    """Tests row sums and the reflection invariant for high orders."""
    coef = savitzky_golay_coefficients(m, k)

    assert_allclose(coef.sum(axis=1), np.ones(2 * m + 1), atol=1e-12)
    assert_allclose(coef[m + 1:], coef[m - 1::-1, ::-1], atol=0.0, rtol=0.0)


@pytest.mark.parametrize("m, k", [(6, 7), (8, 9), (10, 11)])
def test_high_order_centered_row_matches_scipy(m, k):
    """Tests the centered row against scipy.signal.savgol_coeffs."""
    assert_allclose(
        savitzky_golay_coefficients(m, k)[m],
        savgol_coeffs(2 * m + 1, k, use="dot"),
        atol=1e-6,
    )


@pytest.mark.parametrize("m", [1, 3, 6, 10, 30])
def test_interpolating_order_reproduces_window(m, rng):
    """Tests that k = 2m interpolates, so coef @ x returns x."""
    coef = savitzky_golay_coefficients(m, 2 * m)
    x = rng.normal(size=2 * m + 1)

    assert_allclose(coef @ x, x, atol=1e-9)


def test_every_valid_pair_builds_up_to_thirty():
    """Tests that no valid (m, k) with m <= 30 fails or loses constants."""
    for m in range(1, 31):
        for k in range(2 * m + 1):
            coef = savitzky_golay_coefficients(m, k)
            assert np.all(np.isfinite(coef)), (m, k)
            assert_allclose(coef.sum(axis=1), 1.0, atol=1e-10, err_msg=f"m={m}, k={k}")
