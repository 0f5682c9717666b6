import logging

import numpy as np
import pytest

from tristimulus.colors import Xyz, Yxy
from tristimulus.conversions import np_xyz_to_chromaticity, np_xyz_to_yxy, np_yxy_to_xyz
from tristimulus.utils import is_normal
from samples import samples_xyz_yxy


def test_xyz_to_yxy():
    for (x, y, z), (x_exp, y_exp, luma_exp) in samples_xyz_yxy.items():
        x_out, y_out, luma_out = np_xyz_to_yxy(x, y, z)
        assert abs(x_out - x_exp) < 1e-5
        assert abs(y_out - y_exp) < 1e-5
        assert luma_out == luma_exp


def test_xyz_to_yxy_numpy():
    the_matrix = np.array(list(samples_xyz_yxy.keys()))
    expected = np.array(list(samples_xyz_yxy.values()))
    result = np_xyz_to_yxy(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert result.shape == the_matrix.shape
    assert np.allclose(result, expected, atol=1e-5)


def test_yxy_to_xyz_numpy():
    xyz = np.array(list(samples_xyz_yxy.keys()))
    yxy = np.array(list(samples_xyz_yxy.values()))
    result = np_yxy_to_xyz(yxy[..., 0], yxy[..., 1], yxy[..., 2])
    assert np.allclose(result, xyz, atol=1e-4)


def test_degenerate_chromaticity_has_no_division_by_zero():
    with np.errstate(all="raise"):
        out = np_yxy_to_xyz(0.3, 0.0, 0.5)
    assert out.tolist() == [0.0, 0.5, 0.0]


def test_degenerate_xyz_has_no_division_by_zero():
    with np.errstate(all="raise"):
        out = np_xyz_to_yxy(0.0, 0.0, 0.0)
    assert out.tolist() == [0.0, 0.0, 0.0]


@pytest.mark.parametrize("bad_y", [0.0, -0.0, 1e-310, np.inf, -np.inf, np.nan])
def test_non_normal_y_leaves_x_and_z_at_zero(bad_y):
    big_x, big_y, big_z = np_yxy_to_xyz(0.3, np.float64(bad_y), 0.5)
    assert big_x == 0.0 and big_z == 0.0
    assert big_y == 0.5


def test_normal_definition_is_shared():
    values = np.array([1.0, -2.0, 0.0, 1e-310, np.inf, np.nan, np.finfo(np.float64).tiny])
    assert is_normal(values).tolist() == [True, True, False, False, False, False, True]
    # subnormal in float32 but normal in float64
    assert not is_normal(np.float32(1e-40))
    assert is_normal(np.float64(1e-40))


def test_subnormal_sum_gives_zero_chromaticity():
    cx, cy = np_xyz_to_chromaticity(np.float32(1e-40), np.float32(0.0), np.float32(0.0))
    assert cx == 0.0 and cy == 0.0


def test_degenerate_guard_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="tristimulus")
    np_yxy_to_xyz(np.array([0.3, 0.3]), np.array([0.0, 0.3]), np.array([0.5, 0.5]))
    assert any("non-normal y" in r.getMessage() for r in caplog.records)


# ---------------- color level ----------------

def test_degenerate_yxy_color():
    xyz = Yxy.new(0.3, 0.0, 0.5).convert("xyz")
    assert isinstance(xyz, Xyz)
    assert xyz.value == (0.0, 0.5, 0.0)


def test_degenerate_xyz_color():
    yxy = Xyz.new(0.0, 0.0, 0.0).convert("yxy")
    assert isinstance(yxy, Yxy)
    assert yxy.value == (0.0, 0.0, 0.0)


def test_yxy_xyz_yxy_round_trip(float_dtype):
    tol = 1e-5 if float_dtype == np.float32 else 1e-12
    for _, (x, y, luma) in samples_xyz_yxy.items():
        yxy = Yxy.new(x, y, luma, dtype=float_dtype)
        back = Yxy.from_xyz(Xyz.from_yxy(yxy))
        assert back.dtype == float_dtype
        assert np.allclose(back.channels, yxy.channels, atol=tol, rtol=0)


def test_xyz_yxy_xyz_round_trip_batch():
    xyz = Xyz.from_channels(np.array(list(samples_xyz_yxy.keys()), dtype=np.float64))
    back = xyz.convert("yxy").convert("xyz")
    assert back.shape == xyz.shape
    assert np.allclose(back.channels, xyz.channels, atol=1e-12)


def test_luma_is_carried_in_native_type(integer_dtype):
    info = np.iinfo(integer_dtype)
    y_value = integer_dtype.type(info.max // 3)
    xyz = Xyz.new(integer_dtype.type(info.max // 4), y_value, integer_dtype.type(info.max // 5))
    yxy = xyz.convert("yxy")
    assert yxy.dtype == integer_dtype
    assert yxy.luma == y_value


def test_integer_chromaticity():
    xyz = Xyz.new(np.uint16(20000), np.uint16(20000), np.uint16(20000))
    yxy = Yxy.from_xyz(xyz)
    # 1/3 of the range, truncated
    expected = np.uint16(65535 // 3)
    assert abs(int(yxy.x) - int(expected)) <= 1
    assert abs(int(yxy.y) - int(expected)) <= 1


def test_white_point_is_preserved():
    from tristimulus.white_points import D50
    yxy = Xyz.with_wp(D50, 0.2, 0.3, 0.4).convert("yxy")
    assert yxy.white_point is D50
    assert yxy.convert("xyz").white_point is D50


def test_conversion_checks_input_space():
    with pytest.raises(TypeError):
        Yxy.from_xyz(Yxy.new(0.3, 0.3, 1.0))
    with pytest.raises(TypeError):
        Xyz.from_yxy(Xyz.new(0.3, 0.3, 1.0))
