"""Shared typing aliases for DiffKit."""

from __future__ import annotations

from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

FloatArray: TypeAlias = NDArray[np.float64]
RegisterArray: TypeAlias = NDArray[np.floating] | NDArray[np.int64]
