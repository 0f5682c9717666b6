"""The CIE 1931 Yxy (xyY) color space."""

from typing import ClassVar, Optional, Tuple

import numpy as np
from numpy.typing import DTypeLike

from ..channels import get_channel
from ..conversions.xyz_yxy import np_xyz_to_chromaticity
from ..utils.default import DEFAULT_CHANNEL_DTYPE, value_or_default
from ..white_points import DEFAULT_WHITE_POINT, WhitePoint
from .color_base import ColorBase, space_class


class Yxy(ColorBase):
    """
    Luminance plus chromaticity, derived from XYZ.

    - x: X / (X + Y + Z), typically 0 to 1
    - y: Y / (X + Y + Z), typically 0 to 1
    - luma: the Y of XYZ, 0 is black and 1 is white
    """

    __slots__ = ()

    space: ClassVar[str] = "yxy"
    components: ClassVar[Tuple[str, ...]] = ("x", "y", "luma")

    @classmethod
    def default(cls, white_point: Optional[WhitePoint] = None, dtype: Optional[DTypeLike] = None) -> 'Yxy':
        """Chromaticity of the white point at zero luminance."""
        white_point = value_or_default(white_point, DEFAULT_WHITE_POINT)
        dtype = value_or_default(dtype, DEFAULT_CHANNEL_DTYPE)
        white = cls.from_xyz(white_point.get_xyz(dtype))
        return cls.with_wp(white_point, white.x, white.y, 0, dtype=white.dtype)

    @classmethod
    def from_xyz(cls, xyz: ColorBase) -> 'Yxy':
        """
        x = X / sum, y = Y / sum with sum = X + Y + Z computed in float.

        Luminance is copied from Y in the native channel type. x and y stay 0
        when the sum is zero, subnormal, infinite or NaN.
        """
        cls._expect(xyz, "xyz")
        channel = get_channel(xyz.dtype)
        f = xyz.into_float()
        cx, cy = np_xyz_to_chromaticity(f.x, f.y, f.z)
        chroma = np.asarray(channel.from_float(np.stack([cx, cy], axis=-1)))
        return cls(np.concatenate([chroma, xyz.channels[..., 1:2]], axis=-1), xyz.white_point)

    @classmethod
    def from_yxy(cls, yxy: ColorBase) -> 'Yxy':
        cls._expect(yxy, "yxy")
        return cls(yxy.channels, yxy.white_point)

    @classmethod
    def from_lab(cls, lab: ColorBase) -> 'Yxy':
        cls._expect(lab, "lab")
        cls._expect_float(lab.dtype, "lab -> yxy")
        xyz = space_class("xyz").from_lab(lab.into_float())
        return cls.from_float(cls.from_xyz(xyz), lab.dtype)
