import pickle

import pytest

from chromamix.colors import Color
from chromamix.config import EngineConfig
from chromamix.exceptions import InvalidColorFormatError
from chromamix.types import ColorSpace, HSLA, RGBA


def test_from_rgb():
    color = Color.from_rgb(255, 128, 0)
    assert color.rgb == RGBA(255, 128, 0, 1.0)
    assert color.hex == "#ff8000"
    assert color.source_space == ColorSpace.RGB
    assert color.is_opaque


def test_from_hex_with_alpha():
    color = Color.from_hex("#ff000080")
    assert color.rgb[:3] == (255, 0, 0)
    assert color.alpha == pytest.approx(0.502)
    assert not color.is_opaque
    assert color.hex == "#ff000080"


def test_hsl_reads_back_source_values():
    color = Color.from_hsl(200, 50, 40)
    assert color.hsl == HSLA(200.0, 50.0, 40.0, 1.0)
    assert color.source_space == ColorSpace.HSL


def test_derived_hsl():
    assert Color.from_hex("#ff0000").hsl == HSLA(0.0, 100.0, 50.0, 1.0)
    h, s, l, _ = Color.from_hex("#336699").hsl
    assert (h, s, l) == (210.0, 50.0, 40.0)


def test_hue_is_wrapped():
    assert Color.from_hsl(360, 100, 50).hsl.h == 0.0
    assert Color.from_hsl(-30, 100, 50).hsl.h == 330.0
    assert Color.from_hsv(720.5, 100, 100).hsv.h == 0.5
    assert Color.from_hsl(360, 100, 50) == Color.from_hex("#ff0000")


def test_precision_follows_config():
    color = Color.from_rgb(10, 20, 30)
    h, s, l, _ = color.to_hsl(EngineConfig(precision=0))
    assert all(float(v).is_integer() for v in (h, s, l))


@pytest.mark.parametrize("build", [
    lambda: Color.from_rgb(256, 0, 0),
    lambda: Color.from_rgb(-1, 0, 0),
    lambda: Color.from_rgb(0, 0, 0, 1.5),
    lambda: Color.from_rgb("x", 0, 0),
    lambda: Color.from_rgb(float("nan"), 0, 0),
    lambda: Color.from_hsl(0, 101, 50),
    lambda: Color.from_hsl(0, 50, -0.1),
    lambda: Color.from_hsl(float("inf"), 50, 50),
    lambda: Color.from_hsv(0, 50, 100.5),
    lambda: Color.from_lab(101, 0, 0),
    lambda: Color.from_lch(50, -1, 0),
    lambda: Color.from_hex("#12345"),
    lambda: Color.from_space("rgb", (1, 2)),
])
def test_invalid_channels_raise(build):
    with pytest.raises(InvalidColorFormatError):
        build()


def test_invalid_color_is_a_value_error():
    with pytest.raises(ValueError):
        Color.from_rgb(300, 0, 0)


def test_from_lab_in_gamut_keeps_source():
    color = Color.from_lab(50, 10, -10)
    assert color.source_space == ColorSpace.LAB
    assert color.lab == (50.0, 10.0, -10.0)


def test_from_lab_out_of_gamut_is_clamped():
    color = Color.from_lab(50, 120, 0)
    assert color.source_space is None
    assert all(0 <= c <= 255 for c in color.rgb[:3])


def test_from_lch():
    color = Color.from_lch(60, 30, 400)
    assert color.lch.h == 40.0
    l, a, b = color.lab
    assert l == 60.0
    assert a > 0 and b > 0


def test_from_space_dispatch():
    assert Color.from_space("hsla", (0, 100, 50), alpha=0.5).hex == "#ff000080"
    assert Color.from_space("hsb", (120, 100, 100)).hex == "#00ff00"
    assert Color.from_space(ColorSpace.HEX, "#00f").hex == "#0000ff"


def test_convert():
    color = Color.from_hex("#ff0000")
    assert color.convert("hex") == "#ff0000"
    assert color.convert("rgb") == (255, 0, 0, 1.0)
    assert color.convert("hsv") == (0.0, 100.0, 100.0, 1.0)
    l, a, b = color.convert("lab")
    assert l == pytest.approx(53.24, abs=0.01)


def test_immutable():
    color = Color.from_hex("#ff0000")
    with pytest.raises(AttributeError):
        color._rgb = (0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        color.alpha = 0.5
    with pytest.raises(AttributeError):
        del color._alpha


def test_with_alpha_returns_copy():
    color = Color.from_hsl(200, 50, 40)
    faded = color.with_alpha(0.25)
    assert color.alpha == 1.0
    assert faded.alpha == 0.25
    assert faded.hsl[:3] == color.hsl[:3]
    with pytest.raises(InvalidColorFormatError):
        color.with_alpha(2)


def test_equality_and_hash():
    a = Color.from_hex("#ff0000")
    b = Color.from_rgb(255, 0, 0)
    c = Color.from_hsl(0, 100, 50)
    assert a == b == c
    assert len({a, b, c}) == 1
    assert a != Color.from_hex("#ff000080")
    assert a != "#ff0000"


def test_repr_and_str():
    color = Color.from_hex("#ABCDEF")
    assert repr(color) == "Color('#abcdef')"
    assert str(color) == "#abcdef"


def test_pickle_keeps_source():
    color = Color.from_hsl(200, 50, 40, alpha=0.5)
    restored = pickle.loads(pickle.dumps(color))
    assert restored == color
    assert restored.hsl == color.hsl


def test_init_clamps():
    color = Color(1.5, -0.2, 0.5, alpha=2)
    assert color.unit_rgb == (1.0, 0.0, 0.5)
    assert color.alpha == 1.0


@pytest.mark.parametrize("channels", [
    (float("nan"), 0, 0),
    (0, float("inf"), 0),
    (0, 0, 0, float("nan")),
])
def test_init_rejects_non_finite(channels):
    with pytest.raises(InvalidColorFormatError):
        Color(*channels)
