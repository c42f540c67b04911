import pytest

from chromamix.colors import Color
from ..samples import round_trip_rgb


def _close(a, b, tol=1):
    return all(abs(x - y) <= tol for x, y in zip(a, b))


@pytest.mark.parametrize("rgb", round_trip_rgb)
def test_hex_round_trip(rgb):
    color = Color.from_rgb(*rgb)
    assert Color.from_hex(color.hex).rgb == color.rgb


@pytest.mark.parametrize("rgb", round_trip_rgb)
def test_hsl_round_trip(rgb):
    h, s, l, _ = Color.from_rgb(*rgb).hsl
    assert _close(Color.from_hsl(h, s, l).rgb[:3], rgb)


@pytest.mark.parametrize("rgb", round_trip_rgb)
def test_hsv_round_trip(rgb):
    h, s, v, _ = Color.from_rgb(*rgb).hsv
    assert _close(Color.from_hsv(h, s, v).rgb[:3], rgb)


@pytest.mark.parametrize("rgb", round_trip_rgb)
def test_lab_round_trip(rgb):
    l, a, b = Color.from_rgb(*rgb).lab
    assert _close(Color.from_lab(l, a, b).rgb[:3], rgb)


@pytest.mark.parametrize("rgb", round_trip_rgb)
def test_lch_round_trip(rgb):
    l, c, h = Color.from_rgb(*rgb).lch
    assert _close(Color.from_lch(l, c, h).rgb[:3], rgb)


@pytest.mark.parametrize("rgb", round_trip_rgb)
def test_hue_range(rgb):
    color = Color.from_rgb(*rgb)
    assert 0 <= color.hsl.h < 360
    assert 0 <= color.hsv.h < 360
    assert 0 <= color.lch.h < 360
