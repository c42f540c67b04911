"""
Harmony palettes: hue rotations of a base color around the HSL wheel.

Every palette starts with the base color. The rule's anchor hues come next,
at the base saturation and lightness; when ``count`` asks for more colors
than the rule has anchors, the extra slots cycle through the anchors again
with a spread in hue, saturation and lightness scaled by ``variation``.

The spread is deterministic: slot ``i`` is offset by the fractional part of
``i`` times the golden ratio, so the same input always yields the same
palette.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from itertools import combinations
from typing import Iterator, Union

from boundednumbers import clamp

from .accessibility import AA_NORMAL, contrast_ratio
from .colors import Color, ColorInput, parse_color
from .exceptions import InvalidParametersError
from .utils import normalize_hue, round_half_up

logger = logging.getLogger(__name__)

MIN_COUNT = 3
MAX_COUNT = 10

# lightness of generated (non-anchor) colors stays inside this band
LIGHTNESS_FLOOR = 10.0
LIGHTNESS_CEILING = 90.0

_GOLDEN = 0.6180339887498949


class HarmonyKind(str, Enum):
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SPLIT_COMPLEMENTARY = "split_complementary"
    DOUBLE_COMPLEMENTARY = "double_complementary"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            name = value.strip().lower().replace("-", "_")
            for member in cls:
                if member.value == name:
                    return member
        return None


# hue offsets from the base, base first
HARMONY_ANGLES: dict[HarmonyKind, tuple[float, ...]] = {
    HarmonyKind.COMPLEMENTARY: (0, 180),
    HarmonyKind.TRIADIC: (0, 120, 240),
    HarmonyKind.TETRADIC: (0, 90, 180, 270),
    HarmonyKind.SPLIT_COMPLEMENTARY: (0, 150, 210),
}

# hue, saturation and lightness spread of the extra slots at variation 100
HARMONY_SPREAD: dict[HarmonyKind, tuple[float, float, float]] = {
    HarmonyKind.ANALOGOUS: (0, 20, 20),
    HarmonyKind.COMPLEMENTARY: (30, 30, 30),
    HarmonyKind.TRIADIC: (20, 30, 30),
    HarmonyKind.TETRADIC: (15, 25, 25),
    HarmonyKind.SPLIT_COMPLEMENTARY: (20, 30, 30),
    HarmonyKind.DOUBLE_COMPLEMENTARY: (15, 25, 25),
}

# folded hue distances each rule expects between the base and the others
EXPECTED_ANGLES: dict[HarmonyKind, tuple[float, ...]] = {
    HarmonyKind.MONOCHROMATIC: (0,),
    HarmonyKind.ANALOGOUS: (30, 60),
    HarmonyKind.COMPLEMENTARY: (180,),
    HarmonyKind.TRIADIC: (120,),
    HarmonyKind.TETRADIC: (90, 180),
    HarmonyKind.SPLIT_COMPLEMENTARY: (150,),
    HarmonyKind.DOUBLE_COMPLEMENTARY: (60, 120, 180),
}

# deviation from an expected angle tolerated before the harmony score drops
ANGLE_TOLERANCE = 15.0
MAX_PENALTY = 20.0


def hue_distance(h1: float, h2: float) -> float:
    """Shortest angular distance between two hues, in [0, 180]."""
    d = abs(h1 - h2) % 360.0
    return 360.0 - d if d > 180.0 else d


def _spread(i: int, phase: float) -> float:
    """Offset in [-0.5, 0.5) for extra slot ``i``."""
    return (i * _GOLDEN + phase) % 1.0 - 0.5


def _anchor_offsets(kind: HarmonyKind, variation: float) -> tuple[float, ...]:
    if kind == HarmonyKind.DOUBLE_COMPLEMENTARY:
        offset = 30 + (variation / 100) * 60
        return (0, 180, offset, offset + 180)
    return HARMONY_ANGLES[kind]


def _monochromatic(base: Color, count: int, variation: float) -> list[Color]:
    hsl = base.hsl
    scale = (variation / 100) * 0.5
    colors = [base]
    for i in range(1, count):
        factor = (i / (count - 1)) * 2 - 1
        s = clamp(hsl.s + factor * scale * 100, 0.0, 100.0)
        l = clamp(hsl.l + factor * scale * 50, LIGHTNESS_FLOOR, LIGHTNESS_CEILING)
        colors.append(Color.from_hsl(hsl.h, s, l, alpha=hsl.a))
    return colors


def _analogous(base: Color, count: int, variation: float) -> list[Color]:
    hsl = base.hsl
    _, s_spread, l_spread = HARMONY_SPREAD[HarmonyKind.ANALOGOUS]
    max_angle = 30 + (variation / 100) * 30
    step = (max_angle * 2) / (count - 1)
    colors = [base]
    for i in range(1, count):
        hue = hsl.h - max_angle + i * step
        s = clamp(hsl.s + _spread(i, 1 / 3) * (variation / 100) * s_spread, 0.0, 100.0)
        l = clamp(hsl.l + _spread(i, 2 / 3) * (variation / 100) * l_spread, LIGHTNESS_FLOOR, LIGHTNESS_CEILING)
        colors.append(Color.from_hsl(hue, s, l, alpha=hsl.a))
    return colors


def _rotations(base: Color, kind: HarmonyKind, count: int, variation: float) -> list[Color]:
    hsl = base.hsl
    anchors = _anchor_offsets(kind, variation)
    h_spread, s_spread, l_spread = HARMONY_SPREAD[kind]
    amount = variation / 100

    colors = [base]
    for offset in anchors[1:count]:
        colors.append(Color.from_hsl(hsl.h + offset, hsl.s, hsl.l, alpha=hsl.a))
    for i in range(len(anchors), count):
        hue = hsl.h + anchors[i % len(anchors)] + _spread(i, 0.0) * amount * h_spread
        s = clamp(hsl.s + _spread(i, 1 / 3) * amount * s_spread, 0.0, 100.0)
        l = clamp(hsl.l + _spread(i, 2 / 3) * amount * l_spread, LIGHTNESS_FLOOR, LIGHTNESS_CEILING)
        colors.append(Color.from_hsl(hue, s, l, alpha=hsl.a))
    return colors


@dataclass(frozen=True)
class ColorRelationship:
    from_index: int
    to_index: int
    relationship: str
    strength: float
    angle: float


def classify_angle(angle: float) -> tuple[str, float]:
    """Name the relationship for a folded hue distance and rate how closely it fits, in [0.1, 1]."""
    if angle < 30:
        name, strength = "analogous", 1.0 - (angle / 30) * 0.3
    elif 150 <= angle <= 210:
        name, strength = "complementary", 1.0 - (abs(angle - 180) / 30) * 0.2
    elif 110 <= angle <= 130:
        name, strength = "triadic", 1.0 - (abs(angle - 120) / 10) * 0.2
    elif 80 <= angle <= 100:
        name, strength = "tetradic", 1.0 - (abs(angle - 90) / 10) * 0.2
    else:
        name, strength = "related", 1.0
    return name, max(0.1, strength)


@dataclass(frozen=True)
class HarmonyPalette:
    """A base color and the colors its harmony rule produced, base first."""

    kind: HarmonyKind
    base: Color
    colors: tuple[Color, ...]
    variation: float

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    def __getitem__(self, index):
        return self.colors[index]

    @property
    def hexes(self) -> list[str]:
        return [c.hex for c in self.colors]

    def relationships(self) -> list[ColorRelationship]:
        hues = [c.hsl.h for c in self.colors]
        out = []
        for i, j in combinations(range(len(hues)), 2):
            angle = hue_distance(hues[i], hues[j])
            name, strength = classify_angle(angle)
            out.append(ColorRelationship(i, j, name, round_half_up(strength, 3), round_half_up(angle, 2)))
        return out

    @property
    def diversity(self) -> int:
        """Spread of the palette, 0-100; hue distance weighs 60%, saturation and lightness 20% each."""
        pairs = list(combinations([c.hsl for c in self.colors], 2))
        if not pairs:
            return 0
        hue = sum(hue_distance(a.h, b.h) for a, b in pairs) / len(pairs)
        sat = sum(abs(a.s - b.s) for a, b in pairs) / len(pairs)
        light = sum(abs(a.l - b.l) for a, b in pairs) / len(pairs)
        score = min(100.0, hue / 180 * 100) * 0.6 + min(100.0, sat) * 0.2 + min(100.0, light) * 0.2
        return int(round_half_up(score))

    @property
    def harmony_score(self) -> int:
        """
        How closely the colors follow the rule, 0-100.

        Each color whose distance from the base misses every expected angle
        by more than ``ANGLE_TOLERANCE`` costs up to ``MAX_PENALTY`` points.
        """
        expected = EXPECTED_ANGLES[self.kind]
        base_hue = self.colors[0].hsl.h
        penalties = 0.0
        for color in self.colors[1:]:
            angle = hue_distance(color.hsl.h, base_hue)
            deviation = min(abs(angle - e) for e in expected)
            if deviation > ANGLE_TOLERANCE:
                penalties += min(MAX_PENALTY, deviation - ANGLE_TOLERANCE)
        return int(max(0.0, round_half_up(100 - penalties)))

    @property
    def accessibility_score(self) -> int:
        """
        Pairwise contrast of the palette, 0-100: half from the mean contrast
        ratio (saturating at 7:1), half from the share of pairs reaching AA.
        """
        ratios = [contrast_ratio(a, b) for a, b in combinations(self.colors, 2)]
        if not ratios:
            return 100
        mean = sum(ratios) / len(ratios)
        compliant = sum(1 for r in ratios if r >= AA_NORMAL) / len(ratios)
        return int(round_half_up(min(100.0, mean / 7 * 50) + compliant * 50))


_GENERATORS = {
    HarmonyKind.MONOCHROMATIC: _monochromatic,
    HarmonyKind.ANALOGOUS: _analogous,
}


def harmony(
    base: ColorInput,
    kind: Union[HarmonyKind, str] = HarmonyKind.COMPLEMENTARY,
    count: int = 5,
    variation: float = 20,
) -> HarmonyPalette:
    """
    Build a harmony palette around ``base``.

    Args:
        base: color in any parseable form
        kind: harmony rule; hyphenated names are accepted
        count: palette size, 3 to 10
        variation: 0-100, widens analogous arcs, the double-complementary
            offset, monochromatic steps and the spread of extra slots

    Returns:
        HarmonyPalette

    Raises:
        InvalidParametersError: count or variation out of range
        InvalidColorFormatError: ``base`` cannot be parsed
    """
    kind = HarmonyKind(kind)
    if not MIN_COUNT <= count <= MAX_COUNT:
        raise InvalidParametersError(
            "harmony", [{"loc": ("count",), "msg": f"must be in [{MIN_COUNT}, {MAX_COUNT}]", "input": count}]
        )
    if not 0 <= variation <= 100:
        raise InvalidParametersError(
            "harmony", [{"loc": ("variation",), "msg": "must be in [0, 100]", "input": variation}]
        )

    color = parse_color(base)
    logger.debug("Generating %s harmony of %s (count=%d, variation=%g)", kind.value, color.hex, count, variation)

    generate = _GENERATORS.get(kind)
    if generate is not None:
        colors = generate(color, count, variation)
    else:
        colors = _rotations(color, kind, count, variation)
    return HarmonyPalette(kind, color, tuple(colors), variation)


def complementary(base: ColorInput, count: int = 5, variation: float = 20) -> HarmonyPalette:
    return harmony(base, HarmonyKind.COMPLEMENTARY, count, variation)


def triadic(base: ColorInput, count: int = 5, variation: float = 20) -> HarmonyPalette:
    return harmony(base, HarmonyKind.TRIADIC, count, variation)


def complement(color: ColorInput) -> Color:
    """The color opposite on the HSL wheel, same saturation, lightness and alpha."""
    hsl = parse_color(color).hsl
    return Color.from_hsl(normalize_hue(hsl.h + 180), hsl.s, hsl.l, alpha=hsl.a)
