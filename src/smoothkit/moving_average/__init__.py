"""Moving-average smoothing."""

from smoothkit.moving_average.ma_config import MovingAverageConfig
from smoothkit.moving_average.moving_average import (
    MovingAverageSmoother,
    moving_average,
)
from smoothkit.moving_average.weights import (
    moving_average_coefficients,
    moving_average_weights,
)

__all__ = [
    "MovingAverageConfig",
    "MovingAverageSmoother",
    "moving_average",
    "moving_average_coefficients",
    "moving_average_weights",
]
