from __future__ import annotations
from typing import Literal, Union

import numpy as np
from numpy import ndarray
from numpy.typing import DTypeLike

Scalar = int | float
ChannelValue = Union[Scalar, np.number, ndarray]
SpaceName = Literal["xyz", "yxy", "lab"]

__all__ = ["Scalar", "ChannelValue", "DTypeLike", "SpaceName"]
