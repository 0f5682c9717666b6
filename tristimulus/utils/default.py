from typing import Optional, TypeVar

import numpy as np

T = TypeVar('T')

# Channel type used when a color is built from plain Python numbers.
DEFAULT_CHANNEL_DTYPE = np.dtype(np.float32)


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default
