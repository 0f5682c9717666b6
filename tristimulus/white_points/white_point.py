"""
White points
============

A white point is the reference white seen by a standard observer under a
standard illuminant, expressed as XYZ tristimulus values normalized to
``Y = 1``. Colors carry one as a tag; colors with different tags never mix.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Optional

import numpy as np
from numpy.typing import DTypeLike

from ..channels import get_channel
from ..utils.default import DEFAULT_CHANNEL_DTYPE, value_or_default

if TYPE_CHECKING:
    from ..colors.xyz import Xyz


@dataclass(frozen=True)
class WhitePoint:
    name: str
    x: float
    y: float
    z: float
    observer: Literal[2, 10] = 2
    description: str = ""

    def get_xyz(self, dtype: Optional[DTypeLike] = None) -> Xyz:
        """Return the tristimulus values as an ``Xyz`` tagged with this white point.

        Integer channel types go through ``Channel.from_float``, so components
        above 1.0 (Z of D65 for instance) saturate at the integer maximum.
        """
        from ..colors.xyz import Xyz  # local import to avoid cycles

        channel = get_channel(value_or_default(dtype, DEFAULT_CHANNEL_DTYPE))
        values = np.array((self.x, self.y, self.z), dtype=channel.float_dtype)
        return Xyz.from_channels(channel.from_float(values), self)

    @property
    def tristimulus(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"Standard Illuminant {self.name} ({self.x}, {self.y}, {self.z})"

    def __repr__(self) -> str:
        return self.name
