"""Savitzky-Golay smoother with exact edge handling."""

from __future__ import annotations

from numpy.typing import ArrayLike

from smoothkit.savitzky_golay.coefficients import (
    cached_savitzky_golay_coefficients,
    savitzky_golay_coefficients,
)
from smoothkit.savitzky_golay.sg_config import SavitzkyGolayConfig
from smoothkit.utils.concurrency import normalize_workers
from smoothkit.utils.types import FloatArray, Signal
from smoothkit.utils.validate import (
    validate_half_window_size,
    validate_polynomial_order,
    validate_signal,
)
from smoothkit.windowed_filter import apply_filter

__all__ = ["SavitzkyGolaySmoother", "savitzky_golay"]


class SavitzkyGolaySmoother:
    """Smooths a signal by local polynomial least-squares regression."""

    def __init__(
        self,
        signal: ArrayLike,
        config: SavitzkyGolayConfig | None = None,
    ):
        """Initializes the SavitzkyGolaySmoother instance.

        Args:
            signal:
                Samples of shape ``(n,)``, or ``(n, c)`` for ``c`` signals
                smoothed independently. The input is copied.
            config:
                An optional SavitzkyGolayConfig instance with default settings.
        """
        self.signal = validate_signal(signal)
        self.config = config or SavitzkyGolayConfig()

    def smooth(
        self,
        half_window_size: int | None = None,
        polynomial_order: int | None = None,
        n_workers: int | None = None,
    ) -> FloatArray:
        """Returns the Savitzky-Golay smoothed signal.

        A polynomial of degree ``polynomial_order`` is fitted by least squares
        to every window of ``2 * half_window_size + 1`` samples and evaluated
        at the window center. The first and last ``half_window_size`` samples
        are taken from the fits to the first and last full window, evaluated
        at their own positions, so the output has the same length as the
        input and no samples are dropped.

        Args:
            half_window_size: Overrides ``config.half_window_size``.
            polynomial_order: Overrides ``config.polynomial_order``.
            n_workers: Overrides ``config.n_workers``.

        Returns:
            A new array with the shape of the signal.

        Raises:
            InvalidWindowSizeError: If the window does not fit the signal.
            InvalidPolynomialOrderError: If the window is not larger than the
                polynomial order.
        """
        cfg = self.config
        if half_window_size is None:
            half_window_size = cfg.half_window_size
        if polynomial_order is None:
            polynomial_order = cfg.polynomial_order
        if n_workers is None:
            n_workers = cfg.n_workers

        m = validate_half_window_size(half_window_size, n=self.signal.shape[0])
        k = validate_polynomial_order(polynomial_order, m)

        if cfg.use_cache:
            coef = cached_savitzky_golay_coefficients(m, k)
        else:
            coef = savitzky_golay_coefficients(m, k, n_workers=normalize_workers(n_workers))
        return apply_filter(self.signal, m, coef)


def savitzky_golay(
    signal: Signal,
    half_window_size: int = 10,
    polynomial_order: int = 3,
) -> FloatArray:
    """Runs a Savitzky-Golay filter over ``signal``.

    Example:
        >>> import numpy as np
        >>> from smoothkit import savitzky_golay
        >>> x = np.arange(1.0, 11.0)
        >>> bool(np.allclose(savitzky_golay(x, half_window_size=2, polynomial_order=2), x))
        True
    """
    return SavitzkyGolaySmoother(signal).smooth(half_window_size, polynomial_order)
