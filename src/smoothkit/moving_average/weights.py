"""Moving-average weights expressed as a coefficient matrix."""

from __future__ import annotations

import numpy as np

from smoothkit.utils.caching import cache_array_result
from smoothkit.utils.types import CoefficientMatrix
from smoothkit.utils.validate import validate_half_window_size

__all__ = ["moving_average_weights", "moving_average_coefficients"]


def moving_average_weights(half_window_size: int, weighted: bool = False) -> np.ndarray:
    """Returns the ``2m + 1`` normalized weights of a centered moving average.

    Args:
        half_window_size: Half window size ``m`` (at least 1).
        weighted: If ``True`` the weight at offset ``d`` is proportional to
            ``1 / 2**|d|``; otherwise all weights are equal.

    Returns:
        Array of shape ``(2m + 1,)`` summing to one.
    """
    m = validate_half_window_size(half_window_size)
    if weighted:
        weights = np.exp2(-np.abs(np.arange(-m, m + 1)))
    else:
        weights = np.ones(2 * m + 1, dtype=float)
    return weights / weights.sum()


@cache_array_result(maxsize=128)
def moving_average_coefficients(half_window_size: int, weighted: bool = False) -> CoefficientMatrix:
    """Returns a ``(2m + 1, 2m + 1)`` coefficient matrix with identical rows.

    Every row is :func:`moving_average_weights`, so the edge samples are the
    plain average of the first or last full window.
    """
    weights = moving_average_weights(half_window_size, bool(weighted))
    return np.tile(weights, (weights.size, 1))
