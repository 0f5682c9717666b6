"""Tristimulus: typed CIE XYZ / Yxy / L*a*b* colors with lossless channel encodings."""

import logging

from .channels import Channel, FloatChannel, IntegerChannel, get_channel, register_channel, into_float, from_float
from .white_points import (
    WhitePoint,
    A, B, C, D50, D55, D65, D75, E, F2, F7, F11,
    D50Degree10, D55Degree10, D65Degree10, D75Degree10,
    get_white_point,
)
from .colors import ColorBase, Components, Xyz, Yxy, Lab, Alpha, convert
from .errors import (
    ColorError,
    ChannelTypeError,
    LayoutError,
    WhitePointMismatchError,
    UnsupportedConversionError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # channels
    "Channel",
    "FloatChannel",
    "IntegerChannel",
    "get_channel",
    "register_channel",
    "into_float",
    "from_float",
    # white points
    "WhitePoint",
    "A", "B", "C", "D50", "D55", "D65", "D75", "E", "F2", "F7", "F11",
    "D50Degree10", "D55Degree10", "D65Degree10", "D75Degree10",
    "get_white_point",
    # colors
    "ColorBase",
    "Components",
    "Xyz",
    "Yxy",
    "Lab",
    "Alpha",
    "convert",
    # errors
    "ColorError",
    "ChannelTypeError",
    "LayoutError",
    "WhitePointMismatchError",
    "UnsupportedConversionError",
]
