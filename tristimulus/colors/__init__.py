"""
Tristimulus Color Classes
=========================

Device-independent CIE color spaces, each a channel container tagged with a
white point.

Scalar Usage
------------
>>> from tristimulus.colors import Xyz, Yxy
>>> from tristimulus.white_points import D50
>>>
>>> xyz = Xyz.new(0.25, 0.40, 0.10)          # float32, D65
>>> xyz.x, xyz.y
>>> yxy = xyz.convert("yxy")
>>> Xyz.with_wp(D50, 0.25, 0.40, 0.10).white_point
D50

Array Usage
-----------
>>> import numpy as np
>>> batch = Xyz.from_channels(np.array([[0.25, 0.40, 0.10], [0.0, 0.0, 0.0]], dtype=np.float64))
>>> batch.is_array
True
>>> batch.convert("yxy").y                   # one value per color

Integer channels
----------------
>>> xyz8 = Xyz.new(np.uint8(64), np.uint8(102), np.uint8(25))
>>> xyz8.into_float().dtype
dtype('float32')

Alpha
-----
>>> from tristimulus.colors import Alpha
>>> xyza = Alpha.new(Xyz, 0.25, 0.40, 0.10, alpha=0.5)
>>> xyza.x = 0.3                             # writes the wrapped color

Notes
-----
- Colors under different white points can't be compared or converted into
  each other; that raises ``WhitePointMismatchError``.
- Values are never clamped or validated.
"""

from .color_base import ColorBase, Components, make_components, space_class, registered_spaces
from .xyz import Xyz
from .yxy import Yxy
from .lab import Lab
from .alpha import Alpha
from .color import color_convert, convert

__all__ = [
    'ColorBase',
    'Components',
    'make_components',
    'space_class',
    'registered_spaces',
    'Xyz',
    'Yxy',
    'Lab',
    'Alpha',
    'color_convert',
    'convert',
]
