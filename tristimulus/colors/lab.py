"""The CIE L*a*b* (CIELAB) color space."""

from typing import ClassVar, Tuple

import numpy as np

from ..channels import get_channel
from ..conversions.lab import np_xyz_to_lab
from .color_base import ColorBase, space_class


class Lab(ColorBase):
    """
    CIE 1976 L*a*b*, relative to the color's white point.

    - l: lightness, 0 is black and 100 the reference white
    - a: green (negative) to red (positive)
    - b: blue (negative) to yellow (positive)

    Lab covers every perceivable color and is close to perceptually uniform,
    which makes it a common intermediate space. Its values are not in
    ``[0, 1]``, so conversions to and from Lab need a float channel type and
    raise ``UnsupportedConversionError`` for integer ones. Integer Lab colors
    can still be built and stored.
    """

    __slots__ = ()

    space: ClassVar[str] = "lab"
    components: ClassVar[Tuple[str, ...]] = ("l", "a", "b")

    @classmethod
    def from_xyz(cls, xyz: ColorBase) -> 'Lab':
        cls._expect(xyz, "xyz")
        cls._expect_float(xyz.dtype, "xyz -> lab")
        channel = get_channel(xyz.dtype)
        f = xyz.into_float()
        white = xyz.white_point.get_xyz(channel.float_dtype).channels
        lab = np_xyz_to_lab(f.x, f.y, f.z, white)
        return cls(np.asarray(channel.from_float(lab)), xyz.white_point)

    @classmethod
    def from_yxy(cls, yxy: ColorBase) -> 'Lab':
        cls._expect(yxy, "yxy")
        cls._expect_float(yxy.dtype, "yxy -> lab")
        xyz = space_class("xyz").from_yxy(yxy.into_float())
        return cls.from_float(cls.from_xyz(xyz), yxy.dtype)

    @classmethod
    def from_lab(cls, lab: ColorBase) -> 'Lab':
        cls._expect(lab, "lab")
        return cls(lab.channels, lab.white_point)
