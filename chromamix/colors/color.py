from __future__ import annotations
import math
from typing import Any, Optional, Tuple, Union

from boundednumbers import clamp01

from ..config import DEFAULT_CONFIG, EngineConfig
from ..conversions import (
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    lab_to_unit_rgb,
    lch_to_unit_rgb,
    lch_to_lab,
    lab_in_gamut,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    unit_rgb_to_lab,
    unit_rgb_to_lch,
    unit_rgb_to_hex,
    hex_to_rgb,
)
from ..exceptions import InvalidColorFormatError
from ..types.color_types import ColorSpace, HSLA, HSVA, LAB, LCH, RGBA, as_space
from ..utils import normalize_hue, round_channel, round_half_up

SourceNotation = Tuple[ColorSpace, Tuple[float, float, float]]


def _check_finite(value: Any, name: str, original: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidColorFormatError(original, f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise InvalidColorFormatError(original, f"{name} must be finite, got {value!r}")
    return number


def _check_range(value: Any, name: str, lo: float, hi: float, original: Any) -> float:
    number = _check_finite(value, name, original)
    if not lo <= number <= hi:
        raise InvalidColorFormatError(original, f"{name} must be in [{lo:g}, {hi:g}], got {number:g}")
    return number


class Color:
    """
    Immutable color value.

    The color is stored once as unit sRGB plus alpha; every other notation is
    derived on read. The notation the color was built from is remembered so
    reading it back reproduces the input (rounded) instead of a value that
    went through 8-bit quantization.

    Construct with the ``from_*`` classmethods or ``Color.parse``.
    """

    __slots__ = ('_rgb', '_alpha', '_source', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(
        self,
        r: float,
        g: float,
        b: float,
        alpha: float = 1.0,
        source: Optional[SourceNotation] = None,
    ) -> None:
        """
        Build from unit RGB. Channels outside [0, 1] are clamped; use the
        ``from_*`` constructors for validated input.

        Raises:
            InvalidColorFormatError: a channel is NaN or infinite
        """
        original = (r, g, b, alpha)
        r, g, b = (_check_finite(v, n, original) for v, n in zip((r, g, b), "rgb"))
        alpha = _check_finite(alpha, "alpha", original)
        self._rgb = (float(clamp01(r)), float(clamp01(g)), float(clamp01(b)))
        self._alpha = float(clamp01(alpha))
        self._source = source
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, alpha: float = 1.0) -> Color:
        """8-bit channels in [0, 255], alpha in [0, 1]."""
        original = (r, g, b, alpha)
        r, g, b = (_check_range(v, n, 0, 255, original) for v, n in zip((r, g, b), "rgb"))
        alpha = _check_range(alpha, "alpha", 0, 1, original)
        return cls(r / 255, g / 255, b / 255, alpha, (ColorSpace.RGB, (r, g, b)))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, alpha: float = 1.0) -> Color:
        """Hue in degrees (wrapped), saturation and lightness in [0, 100]."""
        original = (h, s, l, alpha)
        h = normalize_hue(_check_finite(h, "hue", original))
        s = _check_range(s, "saturation", 0, 100, original)
        l = _check_range(l, "lightness", 0, 100, original)
        alpha = _check_range(alpha, "alpha", 0, 1, original)
        r, g, b = hsl_to_unit_rgb(h, s / 100, l / 100)
        return cls(r, g, b, alpha, (ColorSpace.HSL, (h, s, l)))

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, alpha: float = 1.0) -> Color:
        """Hue in degrees (wrapped), saturation and value in [0, 100]."""
        original = (h, s, v, alpha)
        h = normalize_hue(_check_finite(h, "hue", original))
        s = _check_range(s, "saturation", 0, 100, original)
        v = _check_range(v, "value", 0, 100, original)
        alpha = _check_range(alpha, "alpha", 0, 1, original)
        r, g, b = hsv_to_unit_rgb(h, s / 100, v / 100)
        return cls(r, g, b, alpha, (ColorSpace.HSV, (h, s, v)))

    @classmethod
    def from_lab(cls, l: float, a: float, b: float, alpha: float = 1.0) -> Color:
        """
        CIE L*a*b* with L in [0, 100]. Colors outside the sRGB gamut are
        clamped into it and lose their source notation.
        """
        original = (l, a, b, alpha)
        l = _check_range(l, "lightness", 0, 100, original)
        a = _check_finite(a, "a", original)
        b = _check_finite(b, "b", original)
        alpha = _check_range(alpha, "alpha", 0, 1, original)
        source = (ColorSpace.LAB, (l, a, b)) if lab_in_gamut(l, a, b) else None
        return cls(*lab_to_unit_rgb(l, a, b), alpha, source)

    @classmethod
    def from_lch(cls, l: float, c: float, h: float, alpha: float = 1.0) -> Color:
        """LCh(ab) with L in [0, 100], chroma >= 0, hue in degrees (wrapped)."""
        original = (l, c, h, alpha)
        l = _check_range(l, "lightness", 0, 100, original)
        c = _check_range(c, "chroma", 0, math.inf, original)
        h = normalize_hue(_check_finite(h, "hue", original))
        alpha = _check_range(alpha, "alpha", 0, 1, original)
        source = (ColorSpace.LCH, (l, c, h)) if lab_in_gamut(*lch_to_lab(l, c, h)) else None
        return cls(*lch_to_unit_rgb(l, c, h), alpha, source)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        try:
            r, g, b, alpha = hex_to_rgb(value)
        except (ValueError, AttributeError):
            raise InvalidColorFormatError(value, "expected #rgb, #rgba, #rrggbb or #rrggbbaa") from None
        return cls(r / 255, g / 255, b / 255, alpha, (ColorSpace.RGB, (r, g, b)))

    @classmethod
    def from_space(
        cls,
        space: Union[str, ColorSpace],
        values: Tuple[float, ...],
        alpha: float = 1.0,
    ) -> Color:
        """Dispatch to the constructor of ``space`` with display-unit values."""
        space = as_space(space)
        if space == ColorSpace.HEX:
            return cls.from_hex(values)  # type: ignore[arg-type]
        constructor = {
            ColorSpace.RGB: cls.from_rgb,
            ColorSpace.HSL: cls.from_hsl,
            ColorSpace.HSV: cls.from_hsv,
            ColorSpace.LAB: cls.from_lab,
            ColorSpace.LCH: cls.from_lch,
        }[space]
        if len(values) != 3:
            raise InvalidColorFormatError(values, f"{space.value} expects 3 channels, got {len(values)}")
        return constructor(*values, alpha=alpha)

    @classmethod
    def parse(cls, value: Any, space: Optional[Union[str, ColorSpace]] = None) -> Color:
        from .parser import parse_color
        return parse_color(value, space)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def unit_rgb(self) -> Tuple[float, float, float]:
        return self._rgb

    @property
    def alpha(self) -> float:
        return round_half_up(self._alpha, DEFAULT_CONFIG.alpha_precision)

    @property
    def source_space(self) -> Optional[ColorSpace]:
        """The notation this color was constructed from, if it is still exact."""
        return self._source[0] if self._source else None

    @property
    def rgb(self) -> RGBA:
        r, g, b = (round_channel(c) for c in self._rgb)
        return RGBA(r, g, b, self.alpha)

    @property
    def hsl(self) -> HSLA:
        return self.to_hsl()

    @property
    def hsv(self) -> HSVA:
        return self.to_hsv()

    @property
    def lab(self) -> LAB:
        return self.to_lab()

    @property
    def lch(self) -> LCH:
        return self.to_lch()

    @property
    def hex(self) -> str:
        return unit_rgb_to_hex(*self._rgb, self._alpha)

    @property
    def is_opaque(self) -> bool:
        return self._alpha >= 1

    # ------------------ CONVERSIONS ------------------
    def _source_values(self, space: ColorSpace) -> Optional[Tuple[float, float, float]]:
        if self._source is not None and self._source[0] == space:
            return self._source[1]
        return None

    def to_hsl(self, config: EngineConfig = DEFAULT_CONFIG) -> HSLA:
        values = self._source_values(ColorSpace.HSL)
        if values is None:
            h, s, l = unit_rgb_to_hsl(*self._rgb)
            values = (h, s * 100, l * 100)
        h, s, l = values
        p = config.precision
        return HSLA(normalize_hue(h, p), round_half_up(s, p), round_half_up(l, p),
                    round_half_up(self._alpha, config.alpha_precision))

    def to_hsv(self, config: EngineConfig = DEFAULT_CONFIG) -> HSVA:
        values = self._source_values(ColorSpace.HSV)
        if values is None:
            h, s, v = unit_rgb_to_hsv(*self._rgb)
            values = (h, s * 100, v * 100)
        h, s, v = values
        p = config.precision
        return HSVA(normalize_hue(h, p), round_half_up(s, p), round_half_up(v, p),
                    round_half_up(self._alpha, config.alpha_precision))

    def to_lab(self, config: EngineConfig = DEFAULT_CONFIG) -> LAB:
        values = self._source_values(ColorSpace.LAB)
        if values is None:
            lch = self._source_values(ColorSpace.LCH)
            values = lch_to_lab(*lch) if lch is not None else unit_rgb_to_lab(*self._rgb)
        l, a, b = values
        p = config.precision
        return LAB(round_half_up(l, p) + 0.0, round_half_up(a, p) + 0.0, round_half_up(b, p) + 0.0)

    def to_lch(self, config: EngineConfig = DEFAULT_CONFIG) -> LCH:
        values = self._source_values(ColorSpace.LCH)
        if values is None:
            values = unit_rgb_to_lch(*self._rgb)
        l, c, h = values
        p = config.precision
        return LCH(round_half_up(l, p) + 0.0, round_half_up(c, p) + 0.0, normalize_hue(h, p))

    def convert(self, space: Union[str, ColorSpace]) -> Union[str, Tuple[float, ...]]:
        """
        Return this color in another notation.

        ``"hex"`` yields a string; every other space yields its named tuple
        (alpha included for rgb, hsl and hsv).
        """
        space = as_space(space)
        if space == ColorSpace.HEX:
            return self.hex
        return {
            ColorSpace.RGB: lambda: self.rgb,
            ColorSpace.HSL: self.to_hsl,
            ColorSpace.HSV: self.to_hsv,
            ColorSpace.LAB: self.to_lab,
            ColorSpace.LCH: self.to_lch,
        }[space]()

    def with_alpha(self, alpha: float) -> Color:
        """Return a copy with a different alpha."""
        alpha = _check_range(alpha, "alpha", 0, 1, alpha)
        return Color(*self._rgb, alpha, self._source)

    # ------------------ DUNDER ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.hex == other.hex

    def __hash__(self) -> int:
        return hash(self.hex)

    def __repr__(self) -> str:
        return f"Color({self.hex!r})"

    def __str__(self) -> str:
        return self.hex

    def __reduce__(self):
        return (Color, (*self._rgb, self._alpha, self._source))
