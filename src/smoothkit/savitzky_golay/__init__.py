"""Savitzky-Golay smoothing."""

from smoothkit.savitzky_golay.coefficients import (
    cached_savitzky_golay_coefficients,
    savitzky_golay_coefficients,
)
from smoothkit.savitzky_golay.savitzky_golay import (
    SavitzkyGolaySmoother,
    savitzky_golay,
)
from smoothkit.savitzky_golay.sg_config import SavitzkyGolayConfig

__all__ = [
    "SavitzkyGolayConfig",
    "SavitzkyGolaySmoother",
    "cached_savitzky_golay_coefficients",
    "savitzky_golay",
    "savitzky_golay_coefficients",
]
