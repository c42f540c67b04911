"""
Tints, shades and tones of a base color.

All three work in HSL. For step ``i`` of ``steps`` the factor is
``(i / (steps - 1)) * (intensity / 100)``; step 0 is therefore always the
base color and the last step moves the full ``intensity`` toward the target:

- tint: lightness toward 100
- shade: lightness toward 0
- tone: saturation toward 0

Hue, the untouched channel and alpha are carried over unchanged.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Union, overload

from boundednumbers import clamp

from .accessibility import AA_NORMAL, contrast_ratio
from .colors import Color, ColorInput, parse_color
from .exceptions import InvalidColorFormatError, InvalidParametersError
from .types.color_types import HSLA

logger = logging.getLogger(__name__)

MIN_STEPS = 3
_WHITE = Color(1.0, 1.0, 1.0)
_BLACK = Color(0.0, 0.0, 0.0)


class VariationKind(str, Enum):
    TINTS = "tints"
    SHADES = "shades"
    TONES = "tones"
    ALL = "all"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            name = value.strip().lower()
            for member in cls:
                if name in (member.value, member.value.rstrip("s")):
                    return member
        return None


def variation_factors(steps: int, intensity: float) -> list[float]:
    return [(i / (steps - 1)) * (intensity / 100) for i in range(steps)]


def _tint(hsl: HSLA, factor: float) -> tuple[float, float, float]:
    return hsl.h, hsl.s, clamp(hsl.l + (100 - hsl.l) * factor, 0.0, 100.0)


def _shade(hsl: HSLA, factor: float) -> tuple[float, float, float]:
    return hsl.h, hsl.s, clamp(hsl.l * (1 - factor), 0.0, 100.0)


def _tone(hsl: HSLA, factor: float) -> tuple[float, float, float]:
    return hsl.h, clamp(hsl.s * (1 - factor), 0.0, 100.0), hsl.l


VARIATION_FUNCTIONS: dict[VariationKind, Callable[[HSLA, float], tuple[float, float, float]]] = {
    VariationKind.TINTS: _tint,
    VariationKind.SHADES: _shade,
    VariationKind.TONES: _tone,
}


@dataclass(frozen=True)
class VariationAnalysis:
    count: int
    lightness_range: tuple[float, float]
    saturation_range: tuple[float, float]
    # entries reaching AA normal-text contrast against white or black
    accessibility_compliant: int


@dataclass(frozen=True)
class VariationSeries:
    """An ordered run of variants, from the base color outward."""

    kind: VariationKind
    base: Color
    colors: tuple[Color, ...]
    factors: tuple[float, ...]
    skipped: int = 0

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    @overload
    def __getitem__(self, index: int) -> Color: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Color, ...]: ...

    def __getitem__(self, index):
        return self.colors[index]

    @property
    def hexes(self) -> list[str]:
        return [c.hex for c in self.colors]

    def analysis(self) -> VariationAnalysis:
        if not self.colors:
            return VariationAnalysis(0, (0.0, 0.0), (0.0, 0.0), 0)
        hsl = [c.hsl for c in self.colors]
        compliant = sum(
            1 for c in self.colors
            if max(contrast_ratio(c, _WHITE), contrast_ratio(c, _BLACK)) >= AA_NORMAL
        )
        return VariationAnalysis(
            count=len(self.colors),
            lightness_range=(min(x.l for x in hsl), max(x.l for x in hsl)),
            saturation_range=(min(x.s for x in hsl), max(x.s for x in hsl)),
            accessibility_compliant=compliant,
        )


@dataclass(frozen=True)
class VariationSet:
    """Tints, shades and tones generated from one base color."""

    base: Color
    tints: VariationSeries
    shades: VariationSeries
    tones: VariationSeries
    kind: VariationKind = field(default=VariationKind.ALL, init=False)

    @property
    def series(self) -> dict[VariationKind, VariationSeries]:
        return {
            VariationKind.TINTS: self.tints,
            VariationKind.SHADES: self.shades,
            VariationKind.TONES: self.tones,
        }

    @property
    def skipped(self) -> int:
        return self.tints.skipped + self.shades.skipped + self.tones.skipped

    def __len__(self) -> int:
        return len(self.tints) + len(self.shades) + len(self.tones)


def _generate(base: Color, kind: VariationKind, steps: int, intensity: float) -> VariationSeries:
    hsl = base.hsl
    fn = VARIATION_FUNCTIONS[kind]
    colors: list[Color] = []
    factors: list[float] = []
    skipped = 0
    for i, factor in enumerate(variation_factors(steps, intensity)):
        h, s, l = fn(hsl, factor)
        try:
            colors.append(Color.from_hsl(h, s, l, alpha=hsl.a))
        except InvalidColorFormatError as exc:
            skipped += 1
            logger.warning("Skipping %s step %d of %s: %s", kind.value, i, base.hex, exc)
            continue
        factors.append(factor)
    return VariationSeries(kind, base, tuple(colors), tuple(factors), skipped)


def vary(
    base: ColorInput,
    kind: Union[VariationKind, str] = VariationKind.TINTS,
    steps: int = 10,
    intensity: float = 50,
) -> Union[VariationSeries, VariationSet]:
    """
    Generate variations of ``base``.

    Args:
        base: color in any parseable form
        kind: tints, shades, tones or all (singular names accepted)
        steps: number of colors per series, at least 3
        intensity: percentage of the full move applied at the last step

    Returns:
        VariationSeries, or VariationSet for ``all``

    Raises:
        InvalidParametersError: steps below 3 or intensity outside [0, 100]
        InvalidColorFormatError: ``base`` cannot be parsed
    """
    kind = VariationKind(kind)
    if steps < MIN_STEPS:
        raise InvalidParametersError(
            "vary", [{"loc": ("steps",), "msg": f"must be at least {MIN_STEPS}", "input": steps}]
        )
    if not 0 <= intensity <= 100:
        raise InvalidParametersError(
            "vary", [{"loc": ("intensity",), "msg": "must be in [0, 100]", "input": intensity}]
        )

    color = parse_color(base)
    logger.debug("Generating %s of %s (steps=%d, intensity=%g)", kind.value, color.hex, steps, intensity)

    if kind == VariationKind.ALL:
        return VariationSet(
            base=color,
            tints=_generate(color, VariationKind.TINTS, steps, intensity),
            shades=_generate(color, VariationKind.SHADES, steps, intensity),
            tones=_generate(color, VariationKind.TONES, steps, intensity),
        )
    return _generate(color, kind, steps, intensity)


def tints(base: ColorInput, steps: int = 10, intensity: float = 50) -> VariationSeries:
    return vary(base, VariationKind.TINTS, steps, intensity)  # type: ignore[return-value]


def shades(base: ColorInput, steps: int = 10, intensity: float = 50) -> VariationSeries:
    return vary(base, VariationKind.SHADES, steps, intensity)  # type: ignore[return-value]


def tones(base: ColorInput, steps: int = 10, intensity: float = 50) -> VariationSeries:
    return vary(base, VariationKind.TONES, steps, intensity)  # type: ignore[return-value]
