"""Configuration for the Savitzky-Golay smoother.

This config controls which window and polynomial degree
:class:`SavitzkyGolaySmoother` uses, and how the coefficient matrix is
obtained.
"""

from __future__ import annotations


class SavitzkyGolayConfig:
    """Configuration for the Savitzky-Golay smoother.

    Any keyword passed to :meth:`SavitzkyGolaySmoother.smooth` overrides the
    corresponding attribute for that call only.
    """

    def __init__(
        self,
        half_window_size: int = 10,
        polynomial_order: int = 3,
        n_workers: int = 1,
        use_cache: bool = True,
    ):
        """Initialize configuration.

        Args:
            half_window_size:
                Number of samples on each side of the center point. The full
                window spans ``2 * half_window_size + 1`` samples and must fit
                into the signal.

            polynomial_order:
                Degree of the polynomial fitted to every window. Must be
                smaller than the window size. ``0`` reduces the filter to an
                unweighted moving average.

            n_workers:
                Number of threads used to compute the coefficient rows of the
                distinct anchor positions. Only used when ``use_cache`` is
                ``False`` or the matrix is not cached yet.

            use_cache:
                If ``True``, coefficient matrices are memoized per
                ``(half_window_size, polynomial_order)`` pair.
        """
        self.half_window_size = half_window_size
        self.polynomial_order = polynomial_order
        self.n_workers = n_workers
        self.use_cache = use_cache
