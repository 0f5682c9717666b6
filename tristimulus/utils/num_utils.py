import numpy as np
from numpy.typing import ArrayLike, NDArray


def is_normal(value: ArrayLike) -> NDArray[np.bool_]:
    """Elementwise IEEE "normal" test.

    True for finite, non-zero values that are not subnormal in the value's own
    float dtype. Zero, subnormals, infinities and NaN are all rejected.
    """
    arr = np.asarray(value)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    tiny = np.finfo(arr.dtype).tiny
    with np.errstate(invalid="ignore"):
        return np.isfinite(arr) & (np.abs(arr) >= tiny)
