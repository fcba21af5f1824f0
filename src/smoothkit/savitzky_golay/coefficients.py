"""Savitzky-Golay coefficients, including exact boundary weights.

Savitzky, A., & Golay, M. J. (1964). Smoothing and differentiation of data
by simplified least squares procedures. Analytical Chemistry, 36(8), 1627-1639.

The least-squares construction follows Steinier, J., Termonia, Y., &
Deltour, J. (1972). Comments on smoothing and differentiation of data by
simplified least square procedure. Analytical Chemistry, 44(11), 1906-1909.

The coefficient matrix of a window of ``w = 2m + 1`` samples has one row per
position inside the window:

* rows ``0 .. m-1`` fit the first window and evaluate the fit at positions
  ``0 .. m-1`` (left edge of the signal),
* row ``m`` is the usual centered smoothing kernel,
* rows ``m+1 .. 2m`` are the left rows mirrored for the right edge.

Row ``i`` is row 0 of ``(X^T X)^{-1} X^T`` for the design matrix with
entries ``(j - i)**p``, i.e. the fitted value at position ``i``. That value
depends only on the space of polynomials of degree ``k``, not on where the
powers are centered, so every row is read off the hat matrix ``Q Q^T`` of a
single orthonormal basis built on the offsets ``(j - m) / m`` in ``[-1, 1]``.

Example:
    >>> import numpy as np
    >>> from smoothkit.savitzky_golay.coefficients import savitzky_golay_coefficients
    >>> coef = savitzky_golay_coefficients(2, 2)
    >>> bool(np.allclose(coef[2] * 35, [-3, 12, 17, 12, -3]))
    True
"""

from __future__ import annotations

import numpy as np

from smoothkit.logger import smoothkit_logger
from smoothkit.utils.caching import cache_array_result
from smoothkit.utils.concurrency import normalize_workers, parallel_execute
from smoothkit.utils.linalg import orthonormal_polynomial_basis, projection_weights
from smoothkit.utils.types import CoefficientMatrix
from smoothkit.utils.validate import (
    validate_half_window_size,
    validate_polynomial_order,
)

__all__ = [
    "window_offsets",
    "fit_basis",
    "anchor_coefficients",
    "mirror_edge_rows",
    "savitzky_golay_coefficients",
    "cached_savitzky_golay_coefficients",
]


def window_offsets(half_window_size: int) -> np.ndarray:
    """Returns the sample offsets ``(j - m) / m`` of a window, spanning ``[-1, 1]``."""
    m = int(half_window_size)
    return (np.arange(2 * m + 1, dtype=float) - m) / m


def fit_basis(half_window_size: int, order: int) -> np.ndarray:
    """Builds an orthonormal polynomial basis over one window.

    Args:
        half_window_size:
            Half window size ``m``; the window holds ``2m + 1`` samples.
        order:
            The degree of the polynomial to fit.

    Returns:
        Array of shape ``(2m + 1, order + 1)`` with orthonormal columns
        spanning the polynomials of degree <= ``order`` on the window.
    """
    return orthonormal_polynomial_basis(
        window_offsets(half_window_size),
        order,
        warn_context=(
            f"Savitzky-Golay fit (half_window_size={half_window_size}, order={order})"
        ),
    )


def anchor_coefficients(anchor: int, basis: np.ndarray) -> np.ndarray:
    """Returns the weights reproducing the local polynomial fit at ``anchor``.

    This is row ``anchor`` of the hat matrix ``Q Q^T``, the fitted value of
    the least-squares polynomial at that position of the window.
    """
    return projection_weights(basis, anchor)


def mirror_edge_rows(left_rows: np.ndarray) -> np.ndarray:
    """Derives the right-edge rows from the left-edge rows.

    Row ``j`` of the result is row ``m - 1 - j`` of ``left_rows`` with its
    elements reversed, i.e. the input reversed along both axes. A fit near
    the right edge is the mirror image of one near the left edge.

    Args:
        left_rows: Array of shape ``(m, 2m + 1)``.

    Returns:
        A new array of the same shape.
    """
    return np.array(np.asarray(left_rows, dtype=float)[::-1, ::-1])


def savitzky_golay_coefficients(
    half_window_size: int,
    polynomial_order: int,
    *,
    n_workers: int = 1,
) -> CoefficientMatrix:
    """Computes the Savitzky-Golay coefficient matrix.

    Args:
        half_window_size: Half window size ``m`` (at least 1).
        polynomial_order: Polynomial order ``k`` with ``0 <= k < 2m + 1``.
        n_workers: Number of threads used to evaluate the ``m + 1``
            independent anchor rows.

    Returns:
        Array of shape ``(2m + 1, 2m + 1)``; see the module docstring for the
        meaning of the rows.

    Raises:
        InvalidWindowSizeError: If ``half_window_size`` is not a positive integer.
        InvalidPolynomialOrderError: If ``polynomial_order`` is invalid for the window.
    """
    m = validate_half_window_size(half_window_size)
    k = validate_polynomial_order(polynomial_order, m)
    window_size = 2 * m + 1

    smoothkit_logger.debug(
        "Computing Savitzky-Golay coefficients for half_window_size=%d, polynomial_order=%d.",
        m,
        k,
    )

    basis = fit_basis(m, k)
    rows = parallel_execute(
        anchor_coefficients,
        [(i, basis) for i in range(m + 1)],
        n_workers=normalize_workers(n_workers),
    )

    coef = np.empty((window_size, window_size), dtype=float)
    coef[: m + 1] = np.vstack(rows)
    coef[m + 1:] = mirror_edge_rows(coef[:m])
    return coef


@cache_array_result(maxsize=128)
def cached_savitzky_golay_coefficients(
    half_window_size: int,
    polynomial_order: int,
) -> CoefficientMatrix:
    """Memoized :func:`savitzky_golay_coefficients`; returns a fresh copy per call."""
    return savitzky_golay_coefficients(half_window_size, polynomial_order)
