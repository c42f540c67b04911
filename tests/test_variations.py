import logging

import pytest

from chromamix.colors import Color
from chromamix.exceptions import InvalidColorFormatError, InvalidParametersError
from chromamix.variations import (
    VariationKind,
    VariationSeries,
    VariationSet,
    shades,
    tints,
    tones,
    variation_factors,
    vary,
)

BASE = "hsl(200, 50%, 40%)"


def test_variation_factors():
    assert variation_factors(5, 100) == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert variation_factors(3, 50) == [0.0, 0.25, 0.5]


def test_tints_move_lightness_toward_white():
    series = tints(BASE, steps=5, intensity=100)
    assert isinstance(series, VariationSeries)
    assert series.kind == VariationKind.TINTS
    assert [c.hsl.l for c in series] == [40.0, 55.0, 70.0, 85.0, 100.0]
    assert all(c.hsl.h == 200.0 and c.hsl.s == 50.0 for c in series)
    assert series[-1].hex == "#ffffff"


def test_shades_move_lightness_toward_black():
    series = shades(BASE, steps=5, intensity=100)
    assert [c.hsl.l for c in series] == [40.0, 30.0, 20.0, 10.0, 0.0]
    assert series[-1].hex == "#000000"


def test_tones_remove_saturation():
    series = tones(BASE, steps=5, intensity=100)
    assert [c.hsl.s for c in series] == [50.0, 37.5, 25.0, 12.5, 0.0]
    assert all(c.hsl.l == 40.0 for c in series)


def test_first_step_is_the_base():
    for kind in ("tints", "shades", "tones"):
        series = vary(BASE, kind, steps=4, intensity=80)
        assert series[0] == Color.parse(BASE)
        assert len(series) == 4
        assert series.factors[0] == 0.0


def test_default_intensity_goes_halfway():
    series = tints(BASE)
    assert len(series) == 10
    assert series[-1].hsl.l == 70.0


def test_zero_intensity_repeats_base():
    series = shades(BASE, steps=3, intensity=0)
    assert series.hexes == [Color.parse(BASE).hex] * 3


def test_alpha_is_preserved():
    series = tints("hsla(10, 80%, 30%, 0.5)", steps=3)
    assert all(c.alpha == 0.5 for c in series)


def test_singular_kind_names():
    assert VariationKind("tint") == VariationKind.TINTS
    assert VariationKind(" Shade ") == VariationKind.SHADES
    with pytest.raises(ValueError):
        VariationKind("hues")


def test_all_returns_every_series():
    result = vary("#336699", "all", steps=3, intensity=100)
    assert isinstance(result, VariationSet)
    assert len(result) == 9
    assert set(result.series) == {VariationKind.TINTS, VariationKind.SHADES, VariationKind.TONES}
    assert result.tints[-1].hex == "#ffffff"
    assert result.shades[-1].hex == "#000000"
    assert result.skipped == 0


@pytest.mark.parametrize("steps, intensity", [(2, 50), (0, 50), (5, -1), (5, 101)])
def test_invalid_parameters(steps, intensity):
    with pytest.raises(InvalidParametersError):
        vary(BASE, "tints", steps=steps, intensity=intensity)


def test_invalid_base():
    with pytest.raises(InvalidColorFormatError):
        vary("nope")


def test_analysis():
    analysis = tints(BASE, steps=5, intensity=100).analysis()
    assert analysis.count == 5
    assert analysis.lightness_range == (40.0, 100.0)
    assert analysis.saturation_range == (50.0, 50.0)
    # every entry contrasts with either white or black at some level
    assert 0 < analysis.accessibility_compliant <= 5


def test_generation_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="chromamix.variations"):
        vary(BASE, "tones", steps=3)
    assert any("Generating tones" in record.getMessage() for record in caplog.records)
