"""Shared typing aliases for SmoothKit."""

from __future__ import annotations

from typing import Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

FloatArray: TypeAlias = NDArray[np.float64]

Signal: TypeAlias = Sequence[float] | NDArray[np.floating]
CoefficientMatrix: TypeAlias = NDArray[np.float64]
