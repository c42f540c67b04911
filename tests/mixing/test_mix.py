import logging

import pytest

from chromamix.colors import Color
from chromamix.config import EngineConfig, HueMean
from chromamix.exceptions import EmptyInputError, InvalidColorFormatError, InvalidWeightsError
from chromamix.mixing import hue_mean, mix, validate_weights


def test_single_color_is_returned_unchanged():
    color = Color.from_hsl(200, 50, 40)
    assert mix([color]) is color
    assert mix(["#abcdef"]).hex == "#abcdef"


def test_empty_input():
    with pytest.raises(EmptyInputError):
        mix([])


def test_rgb_mix():
    assert mix(["#ff0000", "#0000ff"]).hex == "#800080"
    assert mix(["#000000", "#ffffff"], [0.25, 0.75]).hex == "#bfbfbf"
    assert mix(["#ff0000", "#00ff00", "#0000ff"]).hex == "#555555"


def test_weights_are_not_normalized():
    with pytest.raises(InvalidWeightsError):
        mix(["#ff0000", "#0000ff"], [0.5, 0.4])
    with pytest.raises(InvalidWeightsError):
        mix(["#ff0000", "#0000ff"], [2, 2])


@pytest.mark.parametrize("weights", [[0.5], [0.5, 0.25, 0.25], [1.2, -0.2], [float("nan"), 1.0]])
def test_invalid_weights(weights):
    with pytest.raises(InvalidWeightsError):
        mix(["#ff0000", "#0000ff"], weights)


def test_weight_tolerance():
    assert validate_weights([0.5, 0.5005], 2) == [0.5, 0.5005]
    with pytest.raises(InvalidWeightsError):
        validate_weights([0.5, 0.502], 2)
    assert validate_weights([0.5, 0.502], 2, tolerance=0.01) == [0.5, 0.502]


def test_hsl_mix_takes_circular_hue_mean():
    assert mix(["#ff0000", "#00ff00"], space="hsl").hex == "#ffff00"
    assert mix(["#ff0000", "#0000ff"], space="hsl").hex == "#ff00ff"


def test_legacy_hue_mean():
    config = EngineConfig(hue_mean=HueMean.LEGACY_COSINE)
    assert mix(["#ff0000", "#0000ff"], space="hsl", config=config).hex == "#ff0000"


def test_hue_mean():
    h = hue_mean([350, 10], [0.5, 0.5])
    assert 0 <= h < 360
    assert min(h, 360 - h) == pytest.approx(0.0, abs=1e-9)
    assert hue_mean([90, 180], [0.5, 0.5]) == pytest.approx(135.0)
    assert hue_mean([0, 180], [0.5, 0.5]) == 0.0
    assert hue_mean([90], [1.0], HueMean.LEGACY_COSINE) in (0.0, 180.0)


def test_lab_mix_of_black_and_white_is_mid_gray():
    r, g, b, _ = mix(["#000000", "#ffffff"], space="lab").rgb
    assert r == g == b
    assert 118 <= r <= 120


def test_lch_mix():
    result = mix(["#cc6666", "#cccc66"], space="lch")
    h = result.lch.h
    red_h = Color.from_hex("#cc6666").lch.h
    yellow_h = Color.from_hex("#cccc66").lch.h
    assert red_h < h < yellow_h


def test_alpha_is_mixed():
    result = mix([Color.from_rgb(255, 0, 0, 0.0), Color.from_rgb(0, 0, 255, 1.0)])
    assert result.alpha == 0.5
    result = mix([Color.from_rgb(255, 0, 0, 0.0), "#0000ff"], space="lab")
    assert result.alpha == 0.5


def test_blend_mode_ignores_valid_weights():
    assert mix(["#ff0000", "#0000ff"], [0.9, 0.1], blend_mode="multiply").hex == "#000000"
    assert mix(["#ff0000", "#0000ff"], blend_mode="screen").hex == "#ff00ff"


def test_blend_mode_still_validates_weights():
    with pytest.raises(InvalidWeightsError):
        mix(["#ff0000", "#0000ff"], [0.9, 0.9], blend_mode="multiply")


def test_invalid_color_in_mix():
    with pytest.raises(InvalidColorFormatError):
        mix(["#ff0000", "not a color"])


def test_unsupported_space():
    with pytest.raises(ValueError):
        mix(["#ff0000", "#0000ff"], space="hsv")


def test_mix_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="chromamix.mixing"):
        mix(["#ff0000", "#0000ff"])
    assert any("Mixed 2 colors" in record.getMessage() for record in caplog.records)
