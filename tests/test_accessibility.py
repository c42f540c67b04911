import pytest

from chromamix.accessibility import (
    AA_NORMAL,
    ContrastStandard,
    TextSize,
    check_contrast,
    contrast_ratio,
    delta_e_76,
    perceived_brightness,
    relative_luminance,
    thresholds,
    wcag_compliance,
)


def test_relative_luminance_bounds():
    assert relative_luminance("#ffffff") == pytest.approx(1.0)
    assert relative_luminance("#000000") == 0.0
    assert relative_luminance("#777777") == pytest.approx(0.1845, abs=1e-3)


def test_contrast_ratio():
    assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)
    assert contrast_ratio("#abcdef", "#abcdef") == pytest.approx(1.0)


def test_contrast_ratio_is_symmetric():
    assert contrast_ratio("#336699", "#ffcc00") == pytest.approx(contrast_ratio("#ffcc00", "#336699"))


def test_wcag_compliance():
    result = wcag_compliance(4.5)
    assert result.aa_normal
    assert result.aa_large
    assert result.aaa_large
    assert not result.aaa_normal

    result = wcag_compliance(2.9)
    assert not any((result.aa_normal, result.aa_large, result.aaa_normal, result.aaa_large))


def test_thresholds():
    assert thresholds(TextSize.NORMAL) == (4.5, 7.0)
    assert thresholds("large") == (3.0, 4.5)


def test_perceived_brightness():
    assert perceived_brightness("#ffffff") == 255
    assert perceived_brightness("#000000") == 0
    assert perceived_brightness("#ff0000") == 76


def test_delta_e():
    assert delta_e_76("#ff0000", "#ff0000") == 0.0
    assert delta_e_76("#000000", "#ffffff") == pytest.approx(100.0, abs=0.01)
    assert delta_e_76("#ff0000", "#fe0000") < delta_e_76("#ff0000", "#00ff00")


def test_black_on_white_passes_everything():
    report = check_contrast("#000000", "#ffffff")
    assert report.contrast_ratio == 21.0
    assert report.wcag_aa
    assert report.wcag_aaa
    assert report.passes
    assert report.recommendations == ["Excellent contrast - meets AAA standards"]
    assert report.foreground_adjustments == []
    assert report.background_adjustments == []


def test_gray_on_white_depends_on_text_size():
    normal = check_contrast("#777777", "#ffffff")
    assert normal.contrast_ratio == 4.48
    assert not normal.wcag_aa
    assert not normal.passes
    assert normal.recommendations[0] == "This color combination does not meet accessibility standards"

    large = check_contrast("#777777", "#ffffff", text_size="large")
    assert large.wcag_aa
    assert large.passes
    assert large.recommendations == ["Good contrast - meets AA standards"]


def test_aaa_standard_decides_passes():
    report = check_contrast("#595959", "#ffffff", standard=ContrastStandard.WCAG_AAA)
    assert report.wcag_aa
    assert report.passes == report.wcag_aaa


def test_failing_pair_suggests_adjustments():
    report = check_contrast("#777777", "#888888")
    assert report.contrast_ratio < 3
    assert "Consider using colors with more contrast difference" in report.recommendations
    assert report.foreground_adjustments
    assert report.background_adjustments
    assert any(adj.passes for adj in report.foreground_adjustments)
    for adj in report.foreground_adjustments:
        assert adj.contrast_ratio == pytest.approx(contrast_ratio(adj.color, report.background), abs=0.01)


def test_adjustments_can_be_disabled():
    report = check_contrast("#777777", "#888888", suggest_alternatives=False)
    assert report.foreground_adjustments == []
    assert report.background_adjustments == []


def test_ratio_threshold_constant():
    report = check_contrast("#767676", "#ffffff")
    assert report.contrast_ratio >= AA_NORMAL
    assert report.passes
