"""
CIE 1976 L*a*b* kernels.

Constants are the exact rational CIE values (CIE 15:2004) rather than the
rounded 0.008856 / 903.3, so the two branches of ``f`` meet continuously.
"""

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

LAB_EPSILON = 216.0 / 24389.0
LAB_KAPPA = 24389.0 / 27.0


def _f(t: NDArray) -> NDArray:
    return np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16.0) / 116.0)


def _f_inv(ft: NDArray) -> NDArray:
    cube = ft ** 3
    return np.where(cube > LAB_EPSILON, cube, (116.0 * ft - 16.0) / LAB_KAPPA)


def np_xyz_to_lab(x: NDArray, y: NDArray, z: NDArray, white: Sequence[float]) -> NDArray:
    """
    Convert tristimulus values to L*a*b* relative to ``white``.

    Args:
        x, y, z: Tristimulus arrays (float).
        white: Reference white ``(Xw, Yw, Zw)``.

    Returns:
        Array with L, a, b stacked on the last axis. L is 0..100 for colors
        between black and the reference white.
    """
    x, y, z = np.broadcast_arrays(*(np.asarray(c) for c in (x, y, z)))
    wx, wy, wz = (np.asarray(w, dtype=x.dtype) for w in white)

    fx = _f(x / wx)
    fy = _f(y / wy)
    fz = _f(z / wz)

    lightness = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return np.stack([lightness, a, b], axis=-1)


def np_lab_to_xyz(lightness: NDArray, a: NDArray, b: NDArray, white: Sequence[float]) -> NDArray:
    """
    Inverse of ``np_xyz_to_lab``.

    Returns:
        Array with X, Y, Z stacked on the last axis.
    """
    lightness, a, b = np.broadcast_arrays(*(np.asarray(c) for c in (lightness, a, b)))
    wx, wy, wz = (np.asarray(w, dtype=lightness.dtype) for w in white)

    fy = (lightness + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    xr = _f_inv(fx)
    yr = np.where(lightness > LAB_KAPPA * LAB_EPSILON, fy ** 3, lightness / LAB_KAPPA)
    zr = _f_inv(fz)
    return np.stack([xr * wx, yr * wy, zr * wz], axis=-1)
