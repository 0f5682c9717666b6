from .white_point import WhitePoint
from .illuminants import (
    A, B, C, D50, D55, D65, D75, E, F2, F7, F11,
    D50Degree10, D55Degree10, D65Degree10, D75Degree10,
    STANDARD_ILLUMINANTS,
    DEFAULT_WHITE_POINT,
    get_white_point,
)

__all__ = [
    'WhitePoint',
    'A', 'B', 'C', 'D50', 'D55', 'D65', 'D75', 'E', 'F2', 'F7', 'F11',
    'D50Degree10', 'D55Degree10', 'D65Degree10', 'D75Degree10',
    'STANDARD_ILLUMINANTS',
    'DEFAULT_WHITE_POINT',
    'get_white_point',
]
