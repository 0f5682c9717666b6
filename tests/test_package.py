import logging

import numpy as np
import pytest

import tristimulus
from tristimulus import errors


def test_public_api():
    for name in tristimulus.__all__:
        assert hasattr(tristimulus, name), name
    assert tristimulus.Xyz.new(0.1, 0.2, 0.3).white_point is tristimulus.D65


def test_package_logger_has_null_handler():
    handlers = logging.getLogger("tristimulus").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_error_hierarchy():
    assert issubclass(errors.ChannelTypeError, TypeError)
    assert issubclass(errors.LayoutError, ValueError)
    assert issubclass(errors.WhitePointMismatchError, TypeError)
    assert issubclass(errors.UnsupportedConversionError, NotImplementedError)
    for exc in (errors.ChannelTypeError, errors.LayoutError,
                errors.WhitePointMismatchError, errors.UnsupportedConversionError):
        assert issubclass(exc, errors.ColorError)


def test_mismatch_error_carries_both_white_points():
    exc = errors.WhitePointMismatchError(tristimulus.D65, tristimulus.D50, "compare")
    assert exc.left is tristimulus.D65
    assert exc.right is tristimulus.D50
    assert str(exc) == "cannot compare colors with white points D65 and D50"


def test_default_channel_type():
    from tristimulus.utils import DEFAULT_CHANNEL_DTYPE, value_or_default
    assert DEFAULT_CHANNEL_DTYPE == np.float32
    assert value_or_default(None, 3) == 3
    assert value_or_default(0, 3) == 0
