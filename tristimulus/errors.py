"""Exceptions raised by tristimulus.

Numeric degeneracies (zero luminance, zero chromaticity sums) are never
errors; they are handled by the conversion policies. These exceptions cover
misuse of the type contracts only.
"""


class ColorError(Exception):
    """Base class for every error raised by this package."""


class ChannelTypeError(ColorError, TypeError):
    """The dtype has no registered channel mapping."""


class LayoutError(ColorError, ValueError):
    """A channel container does not match the component layout of its space."""


class WhitePointMismatchError(ColorError, TypeError):
    """Two colors with different white points were mixed.

    Chromatic adaptation is not implemented, so there is no implicit way to
    bring colors under different illuminants together.
    """

    def __init__(self, left, right, operation: str = "combine") -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"cannot {operation} colors with white points {left.name} and {right.name}"
        )


class UnsupportedConversionError(ColorError, NotImplementedError):
    """No conversion path exists between the requested spaces."""
