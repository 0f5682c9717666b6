"""
Tristimulus Channels
====================

Numeric channel types and their mapping to the canonical float domain.

Built-in channel types
----------------------
- float32, float64: identity
- uint8/16/32, int8/16/32: ``[0, MAX] <-> [0.0, 1.0]`` in float32
- uint64, int64, intp, uintp: ``[0, MAX] <-> [0.0, 1.0]`` in float64

>>> import numpy as np
>>> from tristimulus.channels import get_channel
>>> get_channel(np.uint8).into_float(255)
np.float32(1.0)
>>> get_channel(np.uint8).from_float(0.5)   # truncates, does not round
np.uint8(127)
"""

from .channel import (
    Channel,
    FloatChannel,
    IntegerChannel,
    register_channel,
    get_channel,
    is_channel_type,
    into_float,
    from_float,
    FLOAT32,
    FLOAT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    INT8,
    INT16,
    INT32,
    INT64,
    INTP,
    UINTP,
)

__all__ = [
    'Channel',
    'FloatChannel',
    'IntegerChannel',
    'register_channel',
    'get_channel',
    'is_channel_type',
    'into_float',
    'from_float',
    'FLOAT32',
    'FLOAT64',
    'UINT8',
    'UINT16',
    'UINT32',
    'UINT64',
    'INT8',
    'INT16',
    'INT32',
    'INT64',
    'INTP',
    'UINTP',
]
