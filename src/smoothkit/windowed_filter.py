"""Boundary-aware application of a coefficient matrix to a signal.

The interior of the signal is smoothed by sliding the centered row of the
coefficient matrix over it. The first and last ``m`` samples have no full
centered window; they are computed instead from the first and last full
window, each output position with its own row of edge weights.
"""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import ArrayLike

from smoothkit.logger import smoothkit_logger
from smoothkit.utils.types import CoefficientMatrix, FloatArray, Signal
from smoothkit.utils.validate import (
    validate_coefficient_matrix,
    validate_half_window_size,
    validate_signal,
)

__all__ = ["convolve_centered", "apply_filter"]


def convolve_centered(x: Signal, kernel: ArrayLike) -> FloatArray:
    """Computes centered windowed dot products of ``x`` with ``kernel``.

    For a kernel of odd length ``2m + 1`` the result has ``n - 2m`` entries,
    where entry ``q`` corresponds to sample ``p = q + m`` and equals
    ``sum_j kernel[j + m] * x[p + j]`` for ``j`` in ``-m .. m``. No padding is
    applied, so only positions with a complete window are returned.

    Args:
        x: Signal of shape ``(n,)`` or ``(n, c)``.
        kernel: Weights of shape ``(2m + 1,)``.

    Returns:
        Array of shape ``(n - 2m,)`` or ``(n - 2m, c)``.

    Raises:
        ValueError: If ``kernel`` is not 1D of odd length, or is longer than
            the signal.
    """
    x = np.asarray(x, dtype=float)
    kernel = np.asarray(kernel, dtype=float)
    if kernel.ndim != 1 or kernel.size % 2 != 1:
        raise ValueError(f"kernel must be 1D with odd length; got shape {kernel.shape}.")
    if kernel.size > x.shape[0]:
        raise ValueError(
            f"kernel of length {kernel.size} is longer than the signal ({x.shape[0]} samples)."
        )
    # windows has shape (n - 2m, [c,] 2m + 1); the window axis is last
    windows = sliding_window_view(x, kernel.size, axis=0)
    return windows @ kernel


def apply_filter(x: Signal, half_window_size: int, coef: CoefficientMatrix) -> FloatArray:
    """Applies a coefficient matrix to a signal.

    With ``m = half_window_size``, ``w = 2m + 1`` and ``n = len(x)``:

    * ``y[p]`` for ``m <= p <= n - 1 - m`` is the centered dot product of
      ``coef[m]`` with ``x[p - m .. p + m]``,
    * ``y[p]`` for ``p < m`` is ``coef[p] @ x[0 .. w - 1]``,
    * ``y[n - m + q]`` for ``q < m`` is ``coef[m + 1 + q] @ x[n - w .. n - 1]``.

    Every output position is written exactly once. When ``n == w`` the
    result equals ``coef @ x``.

    Args:
        x: Signal of shape ``(n,)``, or ``(n, c)`` for ``c`` signals stored
            column-wise. Not modified.
        half_window_size: Half window size ``m``.
        coef: Coefficient matrix of shape ``(2m + 1, 2m + 1)``.

    Returns:
        A new array with the same shape as ``x``.

    Raises:
        ValueError: If the signal or ``coef`` has an invalid shape.
        InvalidWindowSizeError: If the window does not fit into the signal.
    """
    x = validate_signal(x)
    n = x.shape[0]
    m = validate_half_window_size(half_window_size, n=n)
    coef = validate_coefficient_matrix(coef, m)
    window_size = 2 * m + 1

    if n == window_size:
        smoothkit_logger.warning(
            "The window (%d samples) spans the whole signal; every output sample "
            "is computed from the same window.",
            window_size,
        )

    y = np.empty_like(x)
    y[m:n - m] = convolve_centered(x, coef[m])
    y[:m] = coef[:m] @ x[:window_size]
    y[n - m:] = coef[m + 1:] @ x[n - window_size:]
    return y
