"""
Tristimulus Color Space Conversions
===================================

Vectorized float-domain kernels. They take one array per channel (any
broadcastable shapes) and return the result channels stacked on the last
axis. The color classes promote to float, call these, and demote back.

XYZ <-> Yxy:
    np_xyz_to_yxy(x, y, z)
    np_yxy_to_xyz(x, y, luma)
    np_xyz_to_chromaticity(x, y, z)

XYZ <-> Lab (CIE 1976, relative to a reference white):
    np_xyz_to_lab(x, y, z, white)
    np_lab_to_xyz(l, a, b, white)

Degenerate inputs (zero luminance, zero X+Y+Z) produce zeros, never NaN or
infinity.
"""

from .xyz_yxy import np_xyz_to_yxy, np_yxy_to_xyz, np_xyz_to_chromaticity
from .lab import np_xyz_to_lab, np_lab_to_xyz, LAB_EPSILON, LAB_KAPPA

__all__ = [
    'np_xyz_to_yxy',
    'np_yxy_to_xyz',
    'np_xyz_to_chromaticity',
    'np_xyz_to_lab',
    'np_lab_to_xyz',
    'LAB_EPSILON',
    'LAB_KAPPA',
]
