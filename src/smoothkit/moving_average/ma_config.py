"""Configuration for the moving-average smoother."""

from __future__ import annotations


class MovingAverageConfig:
    """Configuration for the moving-average smoother.

    Args:
        half_window_size:
            Number of samples on each side of the center point.
        weighted:
            If ``True``, samples at distance ``d`` from the center are
            weighted by ``1 / 2**d`` before normalization.
    """

    def __init__(self, half_window_size: int = 2, weighted: bool = False):
        """Initialize configuration."""
        self.half_window_size = half_window_size
        self.weighted = weighted
