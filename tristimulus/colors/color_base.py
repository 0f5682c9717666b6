from __future__ import annotations
from typing import Any, Callable, ClassVar, Dict, Optional, Sequence, Tuple, Type, Union

import numpy as np
from numpy import ndarray
from numpy.typing import DTypeLike

from ..channels import get_channel
from ..errors import LayoutError, UnsupportedConversionError, WhitePointMismatchError
from ..types.channel_types import ChannelValue
from ..utils.default import DEFAULT_CHANNEL_DTYPE, value_or_default
from ..white_points import DEFAULT_WHITE_POINT, WhitePoint

MAX_CHANNELS = 4

# Attributes of the Alpha wrapper; a component with one of these names could
# not be forwarded through it.
ALPHA_ATTRS = frozenset(("alpha", "color"))

_SPACES: Dict[str, Type['ColorBase']] = {}


def _unwrap(value: ndarray) -> Any:
    return value[()]


def _component_property(index: int, name: str) -> property:
    """Named accessor for a fixed index on the last axis of ``self._channels``."""

    def fget(self) -> Any:
        return _unwrap(self._channels[..., index])

    def fset(self, value: ChannelValue) -> None:
        self._channels[..., index] = value

    return property(fget, fset, doc=f"Channel {index} ({name}).")


def _check_layout(owner: str, fields: Sequence[str], reserved: type,
                  reserved_names: frozenset = frozenset()) -> Tuple[str, ...]:
    fields = tuple(fields)
    if not 1 <= len(fields) <= MAX_CHANNELS:
        raise LayoutError(f"{owner} declares {len(fields)} components, expected 1 to {MAX_CHANNELS}")
    if len(set(fields)) != len(fields):
        raise LayoutError(f"{owner} declares duplicate components {fields}")
    for field in fields:
        if not field.isidentifier() or field.startswith('_'):
            raise LayoutError(f"{owner}: invalid component name {field!r}")
        if hasattr(reserved, field):
            raise LayoutError(f"{owner}: component {field!r} shadows {reserved.__name__}.{field}")
        if field in reserved_names:
            raise LayoutError(f"{owner}: component {field!r} is reserved by the Alpha wrapper")
    return fields


class Components:
    """
    Named-field view over a channel container.

    The view never owns data: every field reads or writes a fixed index on
    the last axis of the backing array. Whether writes are allowed depends on
    the backing array (``ColorBase.as_components`` hands out a read-only one).
    """

    __slots__ = ('_channels',)

    fields: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, channels: ndarray) -> None:
        if not isinstance(channels, ndarray):
            raise TypeError(f"{type(self).__name__} views an ndarray, got {type(channels).__name__}")
        if channels.ndim == 0 or channels.shape[-1] != len(self.fields):
            raise LayoutError(
                f"{type(self).__name__} expects last dimension {len(self.fields)}, got shape {channels.shape}"
            )
        self._channels = channels

    @property
    def is_writeable(self) -> bool:
        return bool(self._channels.flags.writeable)

    def as_tuple(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, field) for field in self.fields)

    def __iter__(self):
        return iter(self.as_tuple())

    def __repr__(self) -> str:
        body = ", ".join(f"{field}={getattr(self, field)!r}" for field in self.fields)
        return f"{type(self).__name__}({body})"


def make_components(name: str, fields: Sequence[str]) -> Type[Components]:
    """Build a ``Components`` subclass with one property per field."""
    fields = _check_layout(name, fields, Components)
    namespace: Dict[str, Any] = {'__slots__': (), 'fields': fields}
    for index, field in enumerate(fields):
        namespace[field] = _component_property(index, field)
    return type(name, (Components,), namespace)


class ColorBase:
    """
    A channel container tagged with a white point.

    Subclasses declare ``space`` and ``components``; the named accessors, the
    component view class and ``num_channels`` are derived from them when the
    class is created.
    """

    __slots__ = ('_channels', '_white_point')

    space: ClassVar[str]
    components: ClassVar[Tuple[str, ...]]
    num_channels: ClassVar[int]
    Components: ClassVar[Type[Components]]
    convert: Callable[..., 'ColorBase']

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        fields = cls.__dict__.get('components')
        if fields is None:
            return
        fields = _check_layout(cls.__name__, fields, ColorBase, ALPHA_ATTRS)
        cls.components = fields
        cls.num_channels = len(fields)
        cls.Components = make_components(f"{cls.__name__}Components", fields)
        for index, field in enumerate(fields):
            setattr(cls, field, _component_property(index, field))
        _SPACES[cls.space] = cls

    def __init__(self, channels: Union[ndarray, Sequence[ChannelValue]],
                 white_point: Optional[WhitePoint] = None) -> None:
        if not hasattr(type(self), 'num_channels'):
            raise TypeError(f"{type(self).__name__} declares no components")

        # Plain Python numbers get the default channel type; numpy input keeps its own.
        dtype = None if isinstance(channels, (ndarray, np.generic)) else DEFAULT_CHANNEL_DTYPE
        arr = np.array(channels, dtype=dtype)
        get_channel(arr.dtype)

        if arr.ndim == 0 or arr.shape[-1] != self.num_channels:
            raise LayoutError(
                f"{type(self).__name__} expects last dimension {self.num_channels}, got shape {arr.shape}"
            )

        self._channels = arr
        self._white_point = value_or_default(white_point, DEFAULT_WHITE_POINT)

    # ------------------ CONSTRUCTION ------------------
    @classmethod
    def from_channels(cls, channels: Union[ndarray, Sequence[ChannelValue]],
                      white_point: Optional[WhitePoint] = None):
        """Build a color from a raw channel container. Values are not validated."""
        return cls(channels, white_point)

    @classmethod
    def new(cls, *channels: ChannelValue, dtype: Optional[DTypeLike] = None):
        """Build a D65 color from one argument per channel."""
        return cls.with_wp(DEFAULT_WHITE_POINT, *channels, dtype=dtype)

    @classmethod
    def with_wp(cls, white_point: WhitePoint, *channels: ChannelValue,
                dtype: Optional[DTypeLike] = None):
        """Build a color under ``white_point`` from one argument per channel.

        Arguments may be scalars or broadcastable arrays. Without ``dtype``,
        numpy inputs keep their common dtype and Python numbers get the default
        channel type.
        """
        return cls(cls._stack(channels, dtype), white_point)

    @classmethod
    def from_components(cls, components: Components, white_point: Optional[WhitePoint] = None):
        if components.fields != cls.components:
            raise LayoutError(f"{cls.__name__} cannot be built from {type(components).__name__}")
        return cls(np.array(components._channels), white_point)

    @classmethod
    def default(cls, white_point: Optional[WhitePoint] = None, dtype: Optional[DTypeLike] = None):
        """All channels zero."""
        dtype = value_or_default(dtype, DEFAULT_CHANNEL_DTYPE)
        return cls(np.zeros(cls.num_channels, dtype=dtype), white_point)

    @classmethod
    def _stack(cls, values: Sequence[ChannelValue], dtype: Optional[DTypeLike]) -> ndarray:
        if len(values) != cls.num_channels:
            raise LayoutError(f"{cls.__name__} takes {cls.num_channels} channels ({', '.join(cls.components)}), got {len(values)}")
        if dtype is None:
            if all(isinstance(v, (ndarray, np.generic)) for v in values):
                dtype = np.result_type(*values)
            else:
                dtype = DEFAULT_CHANNEL_DTYPE
        arrays = np.broadcast_arrays(*(np.asarray(v, dtype=dtype) for v in values))
        return np.stack(arrays, axis=-1)

    # ------------------ CHANNEL ACCESS ------------------
    @property
    def channels(self) -> ndarray:
        """Read-only view of the channel container."""
        view = self._channels.view()
        view.flags.writeable = False
        return view

    def channels_mut(self) -> ndarray:
        """The backing channel container itself; writes change this color."""
        return self._channels

    def as_components(self) -> Components:
        """Read-only named-field view."""
        return self.Components(self.channels)

    def as_components_mut(self) -> Components:
        """Writable named-field view sharing this color's container."""
        return self.Components(self._channels)

    @property
    def white_point(self) -> WhitePoint:
        return self._white_point

    @property
    def dtype(self) -> np.dtype:
        return self._channels.dtype

    @property
    def value(self) -> Union[Tuple[Any, ...], ndarray]:
        """Tuple of channel values for a single color, a copy of the array for batches."""
        if self._channels.ndim == 1:
            return tuple(self._channels.tolist())
        return self._channels.copy()

    @property
    def is_array(self) -> bool:
        """Check if this color holds a batch of colors."""
        return self._channels.ndim > 1

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._channels.shape

    # ------------------ FLOAT DOMAIN ------------------
    def into_float(self):
        """Same color with every channel promoted to the canonical float type."""
        channel = get_channel(self.dtype)
        return type(self)(np.asarray(channel.into_float(self._channels)), self._white_point)

    @classmethod
    def from_float(cls, fcolor: 'ColorBase', dtype: Optional[DTypeLike] = None):
        """Demote a float color to channel type ``dtype`` (default float32)."""
        if not isinstance(fcolor, cls):
            raise TypeError(f"{cls.__name__}.from_float expects {cls.__name__}, got {type(fcolor).__name__}")
        channel = get_channel(value_or_default(dtype, DEFAULT_CHANNEL_DTYPE))
        return cls(np.asarray(channel.from_float(fcolor._channels)), fcolor._white_point)

    # ------------------ CONVERSION ENTRY POINTS ------------------
    @classmethod
    def from_xyz(cls, xyz: 'ColorBase'):
        raise UnsupportedConversionError(f"{cls.__name__} cannot be built from xyz")

    @classmethod
    def from_yxy(cls, yxy: 'ColorBase'):
        raise UnsupportedConversionError(f"{cls.__name__} cannot be built from yxy")

    @classmethod
    def from_lab(cls, lab: 'ColorBase'):
        raise UnsupportedConversionError(f"{cls.__name__} cannot be built from lab")

    @classmethod
    def _expect(cls, color: Any, space: str) -> None:
        if not isinstance(color, ColorBase) or color.space != space:
            raise TypeError(f"{cls.__name__}.from_{space} expects a {space} color, got {type(color).__name__}")

    @classmethod
    def _expect_float(cls, dtype: DTypeLike, operation: str) -> None:
        """Reject channel types whose float domain is ``[0, 1]``; ``operation``
        produces values outside of it."""
        if not get_channel(dtype).is_float:
            raise UnsupportedConversionError(
                f"{operation} needs a float channel type, got {np.dtype(dtype).name}"
            )

    # ------------------ VALUE SEMANTICS ------------------
    def check_white_point(self, other: 'ColorBase', operation: str = "combine") -> None:
        if self._white_point != other._white_point:
            raise WhitePointMismatchError(self._white_point, other._white_point, operation)

    def copy(self):
        return type(self)(self._channels, self._white_point)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if type(self) is not type(other):
            return False
        self.check_white_point(other, "compare")
        return self._channels.shape == other._channels.shape and bool(np.array_equal(self._channels, other._channels))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(channels={self._channels!r}, white_point={self._white_point!r})"


def space_class(space: Union[str, Type[ColorBase]]) -> Type[ColorBase]:
    """Resolve a space name (``"xyz"``) or color class to the color class."""
    if isinstance(space, type) and issubclass(space, ColorBase) and hasattr(space, 'num_channels'):
        return space
    if isinstance(space, str):
        try:
            return _SPACES[space.lower()]
        except KeyError:
            pass
    raise UnsupportedConversionError(f"unknown color space {space!r}; known: {', '.join(sorted(_SPACES))}")


def registered_spaces() -> Tuple[str, ...]:
    return tuple(sorted(_SPACES))
