"""
Color input parsing.

``parse_color`` accepts the notations clients commonly send: hex strings,
CSS functional notation, bare channel lists, CSS color names, tuples and
mappings keyed by channel name. Everything funnels into the validated
``Color.from_*`` constructors, so range errors surface as
``InvalidColorFormatError`` no matter how the color was written.
"""
from __future__ import annotations
import logging
import re
from typing import Any, Mapping, Optional, Sequence, Union

from ..exceptions import InvalidColorFormatError
from ..types.color_types import ColorSpace, as_space
from .color import Color
from .named import lookup_named_color

logger = logging.getLogger(__name__)

_NUM = r"(\d+(?:\.\d+)?|\.\d+)"
_SIGNED = r"(-?\d+(?:\.\d+)?|-?\.\d+)"
_SEP = r"\s*,\s*"

HEX_RE = re.compile(r"^(?:#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})|[0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)

RGB_PATTERNS = [
    re.compile(rf"^rgb\s*\(\s*(\d+){_SEP}(\d+){_SEP}(\d+)\s*\)$", re.IGNORECASE),
    re.compile(rf"^rgba\s*\(\s*(\d+){_SEP}(\d+){_SEP}(\d+){_SEP}{_NUM}\s*\)$", re.IGNORECASE),
    re.compile(rf"^(\d+){_SEP}(\d+){_SEP}(\d+)$"),
    re.compile(r"^(\d+)\s+(\d+)\s+(\d+)$"),
    re.compile(rf"^\[\s*(\d+){_SEP}(\d+){_SEP}(\d+)\s*\]$"),
]

HSL_PATTERNS = [
    re.compile(rf"^hsl\s*\(\s*{_NUM}{_SEP}{_NUM}%?{_SEP}{_NUM}%?\s*\)$", re.IGNORECASE),
    re.compile(rf"^hsla\s*\(\s*{_NUM}{_SEP}{_NUM}%?{_SEP}{_NUM}%?{_SEP}{_NUM}\s*\)$", re.IGNORECASE),
    re.compile(rf"^{_NUM}{_SEP}{_NUM}%{_SEP}{_NUM}%$"),
]

HSV_PATTERNS = [
    re.compile(rf"^hs[vb]\s*\(\s*{_NUM}{_SEP}{_NUM}%?{_SEP}{_NUM}%?\s*\)$", re.IGNORECASE),
    re.compile(rf"^hs[vb]a\s*\(\s*{_NUM}{_SEP}{_NUM}%?{_SEP}{_NUM}%?{_SEP}{_NUM}\s*\)$", re.IGNORECASE),
]

LAB_PATTERNS = [
    re.compile(rf"^lab\s*\(\s*{_SIGNED}{_SEP}{_SIGNED}{_SEP}{_SIGNED}\s*\)$", re.IGNORECASE),
]

LCH_PATTERNS = [
    re.compile(rf"^lch\s*\(\s*{_SIGNED}{_SEP}{_SIGNED}{_SEP}{_SIGNED}\s*\)$", re.IGNORECASE),
]

# mapping keys that identify each model, checked in order
MAPPING_KEYS = [
    (ColorSpace.RGB, ("r", "g", "b")),
    (ColorSpace.HSL, ("h", "s", "l")),
    (ColorSpace.HSV, ("h", "s", "v")),
    (ColorSpace.LAB, ("l", "a", "b")),
    (ColorSpace.LCH, ("l", "c", "h")),
]

ColorInput = Union[str, Sequence[float], Mapping[str, Any], Color]


def _match_any(patterns: list[re.Pattern], text: str) -> Optional[re.Match]:
    for pattern in patterns:
        match = pattern.match(text)
        if match:
            return match
    return None


def _string_hue(value: float, original: str) -> float:
    if not 0 <= value <= 360:
        raise InvalidColorFormatError(original, f"hue must be in [0, 360], got {value:g}")
    return value


def _build_rgb(values: list[float], text: str) -> Color:
    return Color.from_rgb(*values[:3], alpha=values[3] if len(values) > 3 else 1.0)


def _build_hsl(values: list[float], text: str) -> Color:
    h = _string_hue(values[0], text)
    return Color.from_hsl(h, values[1], values[2], alpha=values[3] if len(values) > 3 else 1.0)


def _build_hsv(values: list[float], text: str) -> Color:
    h = _string_hue(values[0], text)
    return Color.from_hsv(h, values[1], values[2], alpha=values[3] if len(values) > 3 else 1.0)


def _build_lab(values: list[float], text: str) -> Color:
    return Color.from_lab(*values)


def _build_lch(values: list[float], text: str) -> Color:
    _string_hue(values[2], text)
    return Color.from_lch(*values)


STRING_PARSERS = [
    ("rgb", RGB_PATTERNS, _build_rgb),
    ("hsl", HSL_PATTERNS, _build_hsl),
    ("hsv", HSV_PATTERNS, _build_hsv),
    ("lab", LAB_PATTERNS, _build_lab),
    ("lch", LCH_PATTERNS, _build_lch),
]


def detect_and_parse(text: str) -> tuple[Color, str]:
    """
    Parse a color string and report which notation matched.

    The notation is one of hex, rgb, rgba, hsl, hsla, hsv, hsva, lab, lch
    or named.

    Raises:
        InvalidColorFormatError: if no notation matches or a channel is out of range
    """
    stripped = text.strip()
    if not stripped:
        raise InvalidColorFormatError(text, "empty color string")

    if HEX_RE.match(stripped):
        return Color.from_hex(stripped), "hex"

    for notation, patterns, build in STRING_PARSERS:
        match = _match_any(patterns, stripped)
        if match is None:
            continue
        values = [float(group) for group in match.groups()]
        if len(values) == 4:
            notation += "a"
        return build(values, stripped), notation

    named = lookup_named_color(stripped)
    if named is not None:
        return Color.from_hex(named), "named"

    raise InvalidColorFormatError(text, "unrecognized color notation")


def parse_color_string(text: str) -> Color:
    """Parse a color string; see ``detect_and_parse``."""
    return detect_and_parse(text)[0]


def _parse_mapping(value: Mapping[str, Any]) -> Color:
    keys = {str(k).lower(): v for k, v in value.items()}
    for space, names in MAPPING_KEYS:
        if all(name in keys for name in names):
            # "a" is a channel in LAB and shorthand for alpha everywhere else
            alpha = keys.get("alpha", 1.0 if space == ColorSpace.LAB else keys.get("a", 1.0))
            return Color.from_space(space, tuple(keys[name] for name in names), alpha=alpha)
    raise InvalidColorFormatError(dict(value), "mapping keys do not name a supported color model")


def _parse_sequence(value: Sequence[Any], space: ColorSpace) -> Color:
    if len(value) not in (3, 4):
        raise InvalidColorFormatError(value, f"expected 3 or 4 channels, got {len(value)}")
    alpha = value[3] if len(value) == 4 else 1.0
    return Color.from_space(space, tuple(value[:3]), alpha=alpha)


def parse_color(value: ColorInput, space: Optional[Union[str, ColorSpace]] = None) -> Color:
    """
    Parse any supported color input into a ``Color``.

    Args:
        value: a ``Color``, a color string, a 3/4-item sequence, or a mapping
            with channel keys (``r g b``, ``h s l``, ``h s v``, ``l a b``,
            ``l c h``; optional ``alpha``)
        space: how to read a sequence; defaults to 8-bit RGB. Ignored for
            strings and mappings, which carry their own notation.

    Returns:
        Color

    Raises:
        InvalidColorFormatError
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        color = parse_color_string(value)
    elif isinstance(value, Mapping):
        color = _parse_mapping(value)
    elif isinstance(value, Sequence):
        color = _parse_sequence(value, as_space(space) if space is not None else ColorSpace.RGB)
    else:
        raise InvalidColorFormatError(value, f"unsupported input type {type(value).__name__}")
    logger.debug("Parsed %r as %s", value, color.hex)
    return color
