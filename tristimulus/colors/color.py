from __future__ import annotations
from typing import Any, Optional, Type, Union

from ..errors import UnsupportedConversionError, WhitePointMismatchError
from ..types.channel_types import SpaceName
from ..white_points import WhitePoint
from .color_base import ColorBase, space_class


def color_convert(self: ColorBase, to_space: Union[SpaceName, str, Type[ColorBase]],
                  white_point: Optional[WhitePoint] = None) -> ColorBase:
    """
    Convert this color to another space under the same white point.

    Args:
        to_space: Target space name ("xyz", "yxy", "lab") or color class.
        white_point: Optional expected white point of the result. Passing a
            different white point than the color's raises, since no
            chromatic adaptation exists.

    Returns:
        New color of the target space with the same channel type.
    """
    target = space_class(to_space)
    if white_point is not None and white_point != self.white_point:
        raise WhitePointMismatchError(self.white_point, white_point, "convert")

    entry = getattr(target, f"from_{self.space}", None)
    if entry is None:
        raise UnsupportedConversionError(f"no conversion from {self.space} to {target.space}")
    return entry(self)


ColorBase.convert = color_convert


def convert(color: Any, to_space: Union[SpaceName, str, Type[ColorBase]],
            white_point: Optional[WhitePoint] = None) -> ColorBase:
    """Function form of ``ColorBase.convert``."""
    if not isinstance(color, ColorBase):
        raise UnsupportedConversionError(f"{type(color).__name__} is not a color and cannot be converted")
    return color.convert(to_space, white_point)
