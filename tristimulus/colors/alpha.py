from __future__ import annotations
from typing import Any, Optional, Type

import numpy as np
from numpy.typing import DTypeLike

from ..types.channel_types import ChannelValue
from ..white_points import DEFAULT_WHITE_POINT, WhitePoint
from .color_base import ColorBase, Components

_OWN_ATTRS = frozenset(('_color', '_alpha', 'alpha'))


class Alpha:
    """
    A color plus an opacity channel of the same channel type.

    Component fields of the wrapped color are forwarded, so ``xyza.x`` reads
    and ``xyza.x = 0.3`` writes the wrapped color directly. The wrapper is not
    itself a color: it has no channel container and no conversions.
    """

    __slots__ = ('_color', '_alpha')

    def __init__(self, color: ColorBase, alpha: ChannelValue) -> None:
        if not isinstance(color, ColorBase):
            raise TypeError(f"Alpha wraps a color, got {type(color).__name__}")
        object.__setattr__(self, '_color', color)
        self.alpha = alpha

    @classmethod
    def new(cls, space: Type[ColorBase], *channels: ChannelValue, alpha: ChannelValue,
            dtype: Optional[DTypeLike] = None) -> 'Alpha':
        """Wrap a D65 ``space`` color built from ``channels``."""
        return cls.with_wp(space, DEFAULT_WHITE_POINT, *channels, alpha=alpha, dtype=dtype)

    @classmethod
    def with_wp(cls, space: Type[ColorBase], white_point: WhitePoint, *channels: ChannelValue,
                alpha: ChannelValue, dtype: Optional[DTypeLike] = None) -> 'Alpha':
        return cls(space.with_wp(white_point, *channels, dtype=dtype), alpha)

    @property
    def color(self) -> ColorBase:
        return self._color

    @property
    def alpha(self) -> Any:
        return self._alpha[()]

    @alpha.setter
    def alpha(self, value: ChannelValue) -> None:
        batch_shape = self._color.shape[:-1]
        arr = np.array(np.broadcast_to(np.asarray(value, dtype=self._color.dtype), batch_shape))
        object.__setattr__(self, '_alpha', arr)

    @property
    def white_point(self) -> WhitePoint:
        return self._color.white_point

    @property
    def dtype(self) -> np.dtype:
        return self._color.dtype

    def as_components(self) -> Components:
        return self._color.as_components()

    def as_components_mut(self) -> Components:
        return self._color.as_components_mut()

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name in _OWN_ATTRS:
            raise AttributeError(name)
        if name in type(self._color).components:
            return getattr(self._color, name)
        raise AttributeError(f"{type(self).__name__} has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _OWN_ATTRS:
            object.__setattr__(self, name, value)
        elif name in type(self._color).components:
            setattr(self._color, name, value)
        else:
            raise AttributeError(f"{type(self).__name__} has no attribute {name!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alpha):
            return NotImplemented
        return self._color == other._color and bool(np.array_equal(self._alpha, other._alpha))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Alpha({self._color!r}, alpha={self.alpha!r})"
