"""
Channel normalization
=====================

A channel type is a numpy dtype paired with a float dtype (its canonical
float domain) and two mappings between them.

- Float channels map to themselves.
- Integer channels map their full representable range onto ``[0, 1]``.

``from_float(into_float(v)) == v`` for every v in ``[0, MAX]``. Demotion of
an arbitrary float truncates toward zero and saturates at the integer limits,
e.g. ``UINT8.from_float(0.5) == 127`` and ``UINT8.from_float(2.0) == 255``.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict

import numpy as np
from numpy.typing import DTypeLike

from ..errors import ChannelTypeError


def _unwrap(arr: Any) -> Any:
    """Return a numpy scalar for 0-d arrays, the array otherwise."""
    return np.asarray(arr)[()]


class Channel(ABC):
    """Maps values of ``dtype`` to and from the canonical ``float_dtype``."""

    __slots__ = ('dtype', 'float_dtype')

    def __init__(self, dtype: DTypeLike, float_dtype: DTypeLike) -> None:
        self.dtype = np.dtype(dtype)
        self.float_dtype = np.dtype(float_dtype)
        if not np.issubdtype(self.float_dtype, np.floating):
            raise ChannelTypeError(f"float domain must be a float dtype, got {self.float_dtype}")

    @abstractmethod
    def into_float(self, value: Any) -> Any:
        """Map a native-range value into the canonical float domain."""

    @abstractmethod
    def from_float(self, value: Any) -> Any:
        """Map a canonical float value back to the native range."""

    @property
    def is_float(self) -> bool:
        return self.dtype == self.float_dtype

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.dtype.name} as {self.float_dtype.name})"


class FloatChannel(Channel):
    """Identity mapping; the type is its own canonical representation."""

    __slots__ = ()

    def __init__(self, dtype: DTypeLike) -> None:
        super().__init__(dtype, dtype)

    def into_float(self, value: Any) -> Any:
        return _unwrap(np.asarray(value, dtype=self.dtype))

    def from_float(self, value: Any) -> Any:
        return _unwrap(np.asarray(value, dtype=self.dtype))


class IntegerChannel(Channel):
    """Maps ``[0, MAX]`` onto ``[0.0, 1.0]``.

    ``into_float(v) = v / MAX`` and ``from_float(f) = trunc(f * MAX)``, both
    computed in ``float_dtype``. Demotion saturates at ``MIN``/``MAX`` and maps
    NaN to 0.
    """

    __slots__ = ('_min', '_max', '_min_f', '_max_f')

    def __init__(self, dtype: DTypeLike, float_dtype: DTypeLike) -> None:
        super().__init__(dtype, float_dtype)
        if not np.issubdtype(self.dtype, np.integer):
            raise ChannelTypeError(f"IntegerChannel needs an integer dtype, got {self.dtype}")
        info = np.iinfo(self.dtype)
        self._min = self.dtype.type(info.min)
        self._max = self.dtype.type(info.max)
        # float(MAX) rounds up to a power of two for 32/64-bit types; anything
        # at or past it saturates.
        self._min_f = self.float_dtype.type(info.min)
        self._max_f = self.float_dtype.type(info.max)

    def into_float(self, value: Any) -> Any:
        arr = np.asarray(value, dtype=self.dtype).astype(self.float_dtype)
        return _unwrap(arr / self._max_f)

    def from_float(self, value: Any) -> Any:
        f = np.asarray(value, dtype=self.float_dtype)
        with np.errstate(invalid="ignore", over="ignore"):
            scaled = np.trunc(f * self._max_f)
            high = scaled >= self._max_f
            low = scaled <= self._min_f
            nan = np.isnan(scaled)
        safe = np.where(high | low | nan, 0, scaled).astype(self.dtype)
        out = np.where(high, self._max, np.where(low, self._min, safe)).astype(self.dtype)
        return _unwrap(out)


_CHANNELS: Dict[np.dtype, Channel] = {}


def register_channel(channel: Channel) -> Channel:
    """Make ``channel`` the mapping used for its dtype. Returns it."""
    _CHANNELS[channel.dtype] = channel
    return channel


def get_channel(dtype: DTypeLike) -> Channel:
    """Resolve a dtype-like (``np.uint8``, ``"u2"``, ``float``) to its channel."""
    try:
        key = np.dtype(dtype)
    except TypeError as exc:
        raise ChannelTypeError(f"not a dtype: {dtype!r}") from exc
    try:
        return _CHANNELS[key]
    except KeyError:
        raise ChannelTypeError(f"no channel registered for dtype {key}") from None


def is_channel_type(dtype: DTypeLike) -> bool:
    try:
        get_channel(dtype)
    except ChannelTypeError:
        return False
    return True


def into_float(value: Any) -> Any:
    """Promote ``value`` using the channel registered for its own dtype."""
    arr = np.asarray(value)
    return get_channel(arr.dtype).into_float(arr)


def from_float(value: Any, dtype: DTypeLike) -> Any:
    """Demote a canonical float ``value`` to the channel type ``dtype``."""
    return get_channel(dtype).from_float(value)


FLOAT32 = register_channel(FloatChannel(np.float32))
FLOAT64 = register_channel(FloatChannel(np.float64))

UINT8 = register_channel(IntegerChannel(np.uint8, np.float32))
UINT16 = register_channel(IntegerChannel(np.uint16, np.float32))
UINT32 = register_channel(IntegerChannel(np.uint32, np.float32))
UINT64 = register_channel(IntegerChannel(np.uint64, np.float64))
INT8 = register_channel(IntegerChannel(np.int8, np.float32))
INT16 = register_channel(IntegerChannel(np.int16, np.float32))
INT32 = register_channel(IntegerChannel(np.int32, np.float32))
INT64 = register_channel(IntegerChannel(np.int64, np.float64))

# Word-sized integers pair with float64; on 64-bit platforms these dtypes are
# the int64/uint64 entries above.
INTP = register_channel(IntegerChannel(np.intp, np.float64))
UINTP = register_channel(IntegerChannel(np.uintp, np.float64))
