from .default import value_or_default, DEFAULT_CHANNEL_DTYPE
from .num_utils import is_normal

__all__ = ["value_or_default", "DEFAULT_CHANNEL_DTYPE", "is_normal"]
