from .channel_types import ChannelValue, DTypeLike, Scalar, SpaceName

__all__ = ["ChannelValue", "DTypeLike", "Scalar", "SpaceName"]
