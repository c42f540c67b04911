"""
Perceptual metrics: WCAG relative luminance, contrast ratio, compliance
checks and CIE76 color difference.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field
from enum import Enum

from boundednumbers import clamp

from .colors import Color, ColorInput, parse_color
from .conversions import unit_rgb_to_lab
from .utils import round_half_up

# WCAG 2.x thresholds
AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

# lightness offsets tried when suggesting passing alternatives
LIGHTNESS_ADJUSTMENTS = (-40, -30, -20, 20, 30, 40)


class TextSize(str, Enum):
    NORMAL = "normal"
    LARGE = "large"


class ContrastStandard(str, Enum):
    WCAG_AA = "WCAG_AA"
    WCAG_AAA = "WCAG_AAA"


def _linearize(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorInput) -> float:
    """
    WCAG relative luminance in [0, 1].

    Computed from the 8-bit channels so the result matches what a browser
    would report for the same hex value.
    """
    r, g, b, _ = parse_color(color).rgb
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(a: ColorInput, b: ColorInput) -> float:
    """WCAG contrast ratio in [1, 21], symmetric in its arguments."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def perceived_brightness(color: ColorInput) -> int:
    """ITU-R BT.601 weighted brightness on the 0-255 scale."""
    r, g, b, _ = parse_color(color).rgb
    return int(round_half_up(0.299 * r + 0.587 * g + 0.114 * b))


def delta_e_76(a: ColorInput, b: ColorInput) -> float:
    """CIE76 color difference: Euclidean distance in L*a*b*."""
    l1, a1, b1 = unit_rgb_to_lab(*parse_color(a).unit_rgb)
    l2, a2, b2 = unit_rgb_to_lab(*parse_color(b).unit_rgb)
    return math.sqrt((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


@dataclass(frozen=True)
class WCAGCompliance:
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool


def wcag_compliance(ratio: float) -> WCAGCompliance:
    return WCAGCompliance(
        aa_normal=ratio >= AA_NORMAL,
        aa_large=ratio >= AA_LARGE,
        aaa_normal=ratio >= AAA_NORMAL,
        aaa_large=ratio >= AAA_LARGE,
    )


def thresholds(text_size: TextSize) -> tuple[float, float]:
    """(AA, AAA) minimum ratios for a text size."""
    if TextSize(text_size) == TextSize.LARGE:
        return AA_LARGE, AAA_LARGE
    return AA_NORMAL, AAA_NORMAL


@dataclass(frozen=True)
class ContrastAdjustment:
    color: Color
    contrast_ratio: float
    passes: bool


@dataclass(frozen=True)
class ContrastReport:
    foreground: Color
    background: Color
    contrast_ratio: float
    text_size: TextSize
    standard: ContrastStandard
    wcag_aa: bool
    wcag_aaa: bool
    passes: bool
    recommendations: list[str] = field(default_factory=list)
    foreground_adjustments: list[ContrastAdjustment] = field(default_factory=list)
    background_adjustments: list[ContrastAdjustment] = field(default_factory=list)


def _evaluate(ratio: float, text_size: TextSize, standard: ContrastStandard) -> tuple[bool, bool, bool]:
    aa, aaa = thresholds(text_size)
    wcag_aa = ratio >= aa
    wcag_aaa = ratio >= aaa
    passes = wcag_aaa if standard == ContrastStandard.WCAG_AAA else wcag_aa
    return wcag_aa, wcag_aaa, passes


def _recommendations(fg: Color, bg: Color, ratio: float, wcag_aaa: bool, passes: bool) -> list[str]:
    if passes:
        if wcag_aaa:
            return ["Excellent contrast - meets AAA standards"]
        return ["Good contrast - meets AA standards"]

    notes = ["This color combination does not meet accessibility standards"]
    if ratio < AA_LARGE:
        notes.append("Consider using colors with more contrast difference")
    fg_brightness = perceived_brightness(fg)
    bg_brightness = perceived_brightness(bg)
    if abs(fg_brightness - bg_brightness) < 100:
        notes.append(
            "Try using a darker foreground color" if fg_brightness > 127
            else "Try using a lighter foreground color"
        )
        notes.append(
            "Try using a darker background color" if bg_brightness > 127
            else "Try using a lighter background color"
        )
    return notes


def _adjustments(
    subject: Color,
    other: Color,
    text_size: TextSize,
    standard: ContrastStandard,
    subject_is_foreground: bool,
) -> list[ContrastAdjustment]:
    h, s, l, _ = subject.hsl
    results = []
    for offset in LIGHTNESS_ADJUSTMENTS:
        lightness = clamp(l + offset, 0, 100)
        if abs(lightness - l) < 5:
            continue
        candidate = Color.from_hsl(h, s, lightness)
        ratio = contrast_ratio(candidate, other) if subject_is_foreground else contrast_ratio(other, candidate)
        _, _, passes = _evaluate(ratio, text_size, standard)
        results.append(ContrastAdjustment(candidate, round_half_up(ratio, 2), passes))
    return results


def check_contrast(
    foreground: ColorInput,
    background: ColorInput,
    text_size: TextSize | str = TextSize.NORMAL,
    standard: ContrastStandard | str = ContrastStandard.WCAG_AA,
    suggest_alternatives: bool = True,
) -> ContrastReport:
    """
    Check a foreground/background pair against WCAG.

    Args:
        foreground: text color
        background: background color
        text_size: "normal" or "large" (large text has lower thresholds)
        standard: which level decides ``passes``
        suggest_alternatives: when the pair falls short of AA, include
            lightness-adjusted variants of either color

    Returns:
        ContrastReport with the ratio rounded to 2 decimals
    """
    fg = parse_color(foreground)
    bg = parse_color(background)
    text_size = TextSize(text_size)
    standard = ContrastStandard(standard)

    ratio = round_half_up(contrast_ratio(fg, bg), 2)
    wcag_aa, wcag_aaa, passes = _evaluate(ratio, text_size, standard)

    fg_adjust: list[ContrastAdjustment] = []
    bg_adjust: list[ContrastAdjustment] = []
    if suggest_alternatives and not wcag_aa:
        fg_adjust = _adjustments(fg, bg, text_size, standard, subject_is_foreground=True)
        bg_adjust = _adjustments(bg, fg, text_size, standard, subject_is_foreground=False)

    return ContrastReport(
        foreground=fg,
        background=bg,
        contrast_ratio=ratio,
        text_size=text_size,
        standard=standard,
        wcag_aa=wcag_aa,
        wcag_aaa=wcag_aaa,
        passes=passes,
        recommendations=_recommendations(fg, bg, ratio, wcag_aaa, passes),
        foreground_adjustments=fg_adjust,
        background_adjustments=bg_adjust,
    )

