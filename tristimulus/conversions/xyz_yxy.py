"""XYZ <-> Yxy kernels. Inputs and outputs are float arrays of any shape."""

import logging
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from ..utils.num_utils import is_normal

logger = logging.getLogger(__name__)


def np_yxy_to_xyz(x: NDArray, y: NDArray, luma: NDArray) -> NDArray:
    """
    Convert chromaticity plus luminance to tristimulus values.

    ``X = luma * x / y`` and ``Z = luma * (1 - x - y) / y``. Where ``y`` is not
    a normal float, X and Z stay 0 and only ``Y = luma`` is carried.

    Returns:
        Array with the X, Y, Z channels stacked on the last axis.
    """
    x, y, luma = np.broadcast_arrays(*(np.asarray(c) for c in (x, y, luma)))
    normal = is_normal(y)
    safe_y = np.where(normal, y, np.ones_like(y))
    zero = np.zeros_like(luma)

    big_x = np.where(normal, luma * x / safe_y, zero)
    big_z = np.where(normal, luma * (1 - x - y) / safe_y, zero)

    if not normal.all():
        logger.debug("yxy->xyz: %d sample(s) with non-normal y, X and Z left at 0", normal.size - np.count_nonzero(normal))
    return np.stack([big_x, luma, big_z], axis=-1)


def np_xyz_to_chromaticity(x: NDArray, y: NDArray, z: NDArray) -> Tuple[NDArray, NDArray]:
    """
    Chromaticity coordinates ``(X/sum, Y/sum)`` with ``sum = X + Y + Z``.

    Both are 0 where ``sum`` is not a normal float.
    """
    x, y, z = np.broadcast_arrays(*(np.asarray(c) for c in (x, y, z)))
    total = x + y + z
    normal = is_normal(total)
    safe_total = np.where(normal, total, np.ones_like(total))
    zero = np.zeros_like(total)

    if not normal.all():
        logger.debug("xyz->yxy: %d sample(s) with non-normal X+Y+Z, chromaticity left at 0", normal.size - np.count_nonzero(normal))
    return np.where(normal, x / safe_total, zero), np.where(normal, y / safe_total, zero)


def np_xyz_to_yxy(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    """
    Convert tristimulus values to Yxy.

    Luminance is carried through unchanged; see ``np_xyz_to_chromaticity`` for
    the degenerate case.

    Returns:
        Array with the x, y, luma channels stacked on the last axis.
    """
    cx, cy = np_xyz_to_chromaticity(x, y, z)
    luma = np.broadcast_to(np.asarray(y), cx.shape)
    return np.stack([cx, cy, luma], axis=-1)
