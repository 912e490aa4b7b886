from __future__ import annotations

from collections.abc import Callable
from typing import Literal

import numpy as np

# typing only
type ScalarFn = Callable[[float], float]
type Shortcut = Literal["initial", "min", "max"]

# Runtime types
FloatDType = np.float64  # runtime dtype only
BitsDType = np.int64  # raw IEEE-754 bit pattern of FloatDType
