"""The CIE 1931 XYZ color space."""

from typing import ClassVar, Tuple

import numpy as np

from ..channels import get_channel
from ..conversions.lab import np_lab_to_xyz
from ..conversions.xyz_yxy import np_yxy_to_xyz
from .color_base import ColorBase


class Xyz(ColorBase):
    """
    CIE 1931 XYZ tristimulus values.

    - x: response of the long-wavelength cones; 0.0 to 0.95047 under D65
    - y: luminance, 0.0 is black and 1.0 is white
    - z: blue stimulation; 0.0 to 1.08883 under D65

    The ranges depend on the white point.
    """

    __slots__ = ()

    space: ClassVar[str] = "xyz"
    components: ClassVar[Tuple[str, ...]] = ("x", "y", "z")

    @classmethod
    def from_xyz(cls, xyz: ColorBase) -> 'Xyz':
        cls._expect(xyz, "xyz")
        return cls(xyz.channels, xyz.white_point)

    @classmethod
    def from_yxy(cls, yxy: ColorBase) -> 'Xyz':
        """
        X = luma * x / y, Y = luma, Z = luma * (1 - x - y) / y.

        X and Z stay 0 when y is zero, subnormal, infinite or NaN.
        """
        cls._expect(yxy, "yxy")
        channel = get_channel(yxy.dtype)
        f = yxy.into_float()
        xyz = np_yxy_to_xyz(f.x, f.y, f.luma)
        return cls(np.asarray(channel.from_float(xyz)), yxy.white_point)

    @classmethod
    def from_lab(cls, lab: ColorBase) -> 'Xyz':
        cls._expect(lab, "lab")
        cls._expect_float(lab.dtype, "lab -> xyz")
        channel = get_channel(lab.dtype)
        f = lab.into_float()
        white = lab.white_point.get_xyz(channel.float_dtype).channels
        xyz = np_lab_to_xyz(f.l, f.a, f.b, white)
        return cls(np.asarray(channel.from_float(xyz)), lab.white_point)
