"""Centered moving-average smoother."""

from __future__ import annotations

from numpy.typing import ArrayLike

from smoothkit.moving_average.ma_config import MovingAverageConfig
from smoothkit.moving_average.weights import moving_average_coefficients
from smoothkit.utils.types import FloatArray, Signal
from smoothkit.utils.validate import validate_half_window_size, validate_signal
from smoothkit.windowed_filter import apply_filter

__all__ = ["MovingAverageSmoother", "moving_average"]


class MovingAverageSmoother:
    """Smooths a signal with a (optionally weighted) centered moving average."""

    def __init__(
        self,
        signal: ArrayLike,
        config: MovingAverageConfig | None = None,
    ):
        """Initializes the smoother.

        Args:
            signal: Samples of shape ``(n,)`` or ``(n, c)``.
            config: Optional :class:`MovingAverageConfig` with default settings.
        """
        self.signal = validate_signal(signal)
        self.config = config or MovingAverageConfig()

    def smooth(
        self,
        half_window_size: int | None = None,
        weighted: bool | None = None,
    ) -> FloatArray:
        """Returns the smoothed signal.

        Args:
            half_window_size: Overrides ``config.half_window_size``.
            weighted: Overrides ``config.weighted``.

        Returns:
            A new array with the shape of the signal.

        Raises:
            InvalidWindowSizeError: If the window does not fit the signal.
        """
        if half_window_size is None:
            half_window_size = self.config.half_window_size
        if weighted is None:
            weighted = self.config.weighted

        m = validate_half_window_size(half_window_size, n=self.signal.shape[0])
        coef = moving_average_coefficients(m, bool(weighted))
        return apply_filter(self.signal, m, coef)


def moving_average(
    signal: Signal,
    half_window_size: int = 2,
    weighted: bool = False,
) -> FloatArray:
    """Runs a centered moving average over ``signal``.

    Example:
        >>> import numpy as np
        >>> from smoothkit import moving_average
        >>> y = moving_average([1, 1, 1, 1, 1, 1, 1], half_window_size=1)
        >>> bool(np.allclose(y, 1.0))
        True
    """
    return MovingAverageSmoother(signal).smooth(half_window_size, weighted)
