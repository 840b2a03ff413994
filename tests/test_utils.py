import pytest

from materialquant.utils import (
    Vec3,
    alpha_from_int,
    argb_from_linrgb,
    argb_from_rgb,
    blue_from_int,
    delinearized,
    diff_degrees,
    green_from_int,
    hex_from_argb,
    int_from_lstar,
    is_opaque,
    lerp,
    linearized,
    lstar_from_argb,
    lstar_from_y,
    matrix_multiply,
    red_from_int,
    rgb_hex_from_argb,
    rotation_direction,
    sanitize_degrees_double,
    sanitize_degrees_int,
    signum,
    y_from_lstar,
)


@pytest.mark.parametrize("rgb", [(0, 0, 0), (1, 35, 69), (255, 128, 7), (255, 255, 255)])
def test_rgb_pack_round_trip(rgb):
    argb = argb_from_rgb(*rgb)
    assert (red_from_int(argb), green_from_int(argb), blue_from_int(argb)) == rgb
    assert alpha_from_int(argb) == 255
    assert is_opaque(argb)


def test_argb_from_rgb_masks_components():
    assert argb_from_rgb(256 + 1, 0, 0) == argb_from_rgb(1, 0, 0)


def test_transparent_not_opaque():
    assert not is_opaque(0x80FF0000)
    assert alpha_from_int(0x80FF0000) == 0x80


def test_hex_from_argb_examples():
    assert hex_from_argb(0xFF012345) == "ff012345"
    assert rgb_hex_from_argb(0xFF012345) == "012345"


def test_hex_zero_padded():
    assert len(hex_from_argb(0)) == 8
    assert len(rgb_hex_from_argb(0xFF000000)) == 6


def test_linearize_round_trip_all_channels():
    for channel in range(256):
        assert delinearized(linearized(channel)) == channel


def test_linearized_range():
    assert linearized(0) == 0.0
    assert linearized(255) == pytest.approx(100.0)


def test_delinearized_clamps():
    assert delinearized(-50.0) == 0
    assert delinearized(500.0) == 255


def test_lstar_y_round_trip():
    for lstar in (0.0, 5.0, 8.0, 25.0, 50.0, 75.0, 100.0):
        assert lstar_from_y(y_from_lstar(lstar)) == pytest.approx(lstar, abs=1e-9)


def test_int_from_lstar_extremes():
    assert int_from_lstar(0.0) == 0xFF000000
    assert int_from_lstar(100.0) == 0xFFFFFFFF


def test_lstar_from_argb_extremes():
    assert lstar_from_argb(0xFF000000) == pytest.approx(0.0)
    assert lstar_from_argb(0xFFFFFFFF) == pytest.approx(100.0)


def test_lstar_is_monotonic_in_gray():
    values = [lstar_from_argb(argb_from_rgb(g, g, g)) for g in range(0, 256, 15)]
    assert values == sorted(values)


@pytest.mark.parametrize("degrees", list(range(-719, 720, 37)))
def test_sanitize_degrees_int_range(degrees):
    result = sanitize_degrees_int(degrees)
    assert 0 <= result < 360
    assert (result - degrees) % 360 == 0


@pytest.mark.parametrize("degrees", [-700.5, -1.25, 0.0, 12.5, 359.9, 360.0, 725.75])
def test_sanitize_degrees_double_range(degrees):
    result = sanitize_degrees_double(degrees)
    assert 0.0 <= result < 360.0
    assert (result - degrees) % 360.0 == pytest.approx(0.0, abs=1e-9)


def test_diff_degrees_symmetric_and_bounded():
    for a, b in [(0, 350), (10, 200), (90, 90), (359, 1)]:
        d = diff_degrees(a, b)
        assert d == diff_degrees(b, a)
        assert 0.0 <= d <= 180.0


def test_rotation_direction():
    assert rotation_direction(0.0, 180.0) == 1.0
    assert rotation_direction(10.0, 20.0) == 1.0
    assert rotation_direction(20.0, 10.0) == -1.0


def test_signum():
    assert signum(-3.5) == -1
    assert signum(0.0) == 0
    assert signum(2.0) == 1


def test_lerp_endpoints():
    assert lerp(3.0, 9.0, 0.0) == 3.0
    assert lerp(3.0, 9.0, 1.0) == 9.0


def test_matrix_multiply_identity():
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert matrix_multiply(Vec3(1.5, -2.0, 3.0), identity) == Vec3(1.5, -2.0, 3.0)


def test_matrix_multiply_permutation():
    swap = [[0, 1, 0], [0, 0, 1], [1, 0, 0]]
    assert matrix_multiply(Vec3(1.0, 2.0, 3.0), swap) == Vec3(2.0, 3.0, 1.0)


def test_argb_from_linrgb_extremes():
    assert argb_from_linrgb(Vec3(100.0, 100.0, 100.0)) == 0xFFFFFFFF
    assert argb_from_linrgb(Vec3()) == 0xFF000000


def test_argb_from_linrgb_inverts_linearized():
    argb = argb_from_rgb(12, 200, 99)
    lin = Vec3(
        linearized(red_from_int(argb)),
        linearized(green_from_int(argb)),
        linearized(blue_from_int(argb)),
    )
    assert argb_from_linrgb(lin) == argb