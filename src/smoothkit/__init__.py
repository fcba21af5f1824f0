"""Provides all smoothkit methods."""

from importlib.metadata import PackageNotFoundError, version

from smoothkit.moving_average import (
    MovingAverageConfig,
    MovingAverageSmoother,
    moving_average,
    moving_average_coefficients,
)
from smoothkit.savitzky_golay import (
    SavitzkyGolayConfig,
    SavitzkyGolaySmoother,
    cached_savitzky_golay_coefficients,
    savitzky_golay,
    savitzky_golay_coefficients,
)
from smoothkit.smoothing_kit import SmoothingKit, available_methods, register_method
from smoothkit.utils.validate import InvalidPolynomialOrderError, InvalidWindowSizeError
from smoothkit.windowed_filter import apply_filter

try:
    __version__ = version("smoothkit")
except PackageNotFoundError:
    pass


def clear_coefficient_cache() -> None:
    """Empties the memoized coefficient matrices."""
    cached_savitzky_golay_coefficients.cache_clear()
    moving_average_coefficients.cache_clear()


__all__ = [
    "InvalidPolynomialOrderError",
    "InvalidWindowSizeError",
    "MovingAverageConfig",
    "MovingAverageSmoother",
    "SavitzkyGolayConfig",
    "SavitzkyGolaySmoother",
    "SmoothingKit",
    "apply_filter",
    "available_methods",
    "cached_savitzky_golay_coefficients",
    "clear_coefficient_cache",
    "moving_average",
    "moving_average_coefficients",
    "register_method",
    "savitzky_golay",
    "savitzky_golay_coefficients",
]
