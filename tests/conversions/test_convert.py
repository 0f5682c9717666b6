import numpy as np
import pytest

from tristimulus.colors import Lab, Xyz, Yxy, convert, registered_spaces, space_class
from tristimulus.errors import UnsupportedConversionError, WhitePointMismatchError
from tristimulus.white_points import D50, D65


def test_convert_by_name_and_class():
    xyz = Xyz.new(0.2, 0.3, 0.4)
    assert isinstance(xyz.convert("yxy"), Yxy)
    assert isinstance(xyz.convert("LAB"), Lab)
    assert isinstance(xyz.convert(Yxy), Yxy)
    assert isinstance(convert(xyz, "xyz"), Xyz)


def test_convert_keeps_channel_type():
    xyz = Xyz.new(0.2, 0.3, 0.4, dtype=np.float64)
    assert xyz.convert("yxy").dtype == np.float64
    assert xyz.convert("lab").dtype == np.float64


def test_every_space_converts_to_every_space():
    start = Xyz.new(0.2, 0.3, 0.4, dtype=np.float64)
    for source in ("xyz", "yxy", "lab"):
        color = start.convert(source)
        for target in ("xyz", "yxy", "lab"):
            converted = color.convert(target)
            assert converted.space == target
            assert np.allclose(converted.convert("xyz").channels, start.channels, atol=1e-9)


def test_self_conversion_copies():
    xyz = Xyz.new(0.2, 0.3, 0.4)
    same = xyz.convert("xyz")
    assert same == xyz
    same.x = 0.9
    assert xyz.x == pytest.approx(0.2)


def test_unknown_space():
    with pytest.raises(UnsupportedConversionError):
        Xyz.new(0.2, 0.3, 0.4).convert("srgb")
    with pytest.raises(UnsupportedConversionError):
        space_class(int)
    with pytest.raises(UnsupportedConversionError):
        convert((0.2, 0.3, 0.4), "xyz")
    # UnsupportedConversionError is a NotImplementedError
    with pytest.raises(NotImplementedError):
        space_class("hsv")


def test_registered_spaces():
    assert {"xyz", "yxy", "lab"} <= set(registered_spaces())
    assert space_class("xyz") is Xyz


def test_explicit_white_point_must_match():
    xyz = Xyz.new(0.2, 0.3, 0.4)
    assert xyz.convert("yxy", white_point=D65).white_point is D65
    with pytest.raises(WhitePointMismatchError) as excinfo:
        xyz.convert("yxy", white_point=D50)
    assert "D65" in str(excinfo.value) and "D50" in str(excinfo.value)
    assert isinstance(excinfo.value, TypeError)
