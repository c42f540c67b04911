"""
String renderings of colors and gradients: CSS notation, CSS/SCSS
variables and CSS gradient functions.
"""
from __future__ import annotations
from enum import Enum
from typing import Iterable, Union

from .accessibility import delta_e_76
from .colors import CSS_NAMED_COLORS, Color, ColorInput, parse_color
from .config import EngineConfig
from .gradients import GradientSpec, LinearGeometry, RadialGeometry
from .utils import format_number, round_half_up


class OutputFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    HSV = "hsv"
    HSVA = "hsva"
    LAB = "lab"
    LCH = "lch"
    CSS_VAR = "css-var"
    SCSS_VAR = "scss-var"
    NAMED = "named"


def _fixed(value: float, precision: int) -> str:
    return f"{round_half_up(value, precision):.{precision}f}"


def _triple(values: Iterable[float], precision: int, percent: tuple[bool, bool, bool] = (False, False, False)) -> str:
    parts = []
    for value, pct in zip(values, percent):
        text = _fixed(value, precision)
        parts.append(text + "%" if pct else text)
    return ", ".join(parts)


def closest_named_color(color: ColorInput) -> str:
    """CSS name of the color, or of the nearest named color by CIE76 distance."""
    color = parse_color(color)
    target = color.hex[:7]
    for name, value in CSS_NAMED_COLORS.items():
        if value == target:
            return name
    return min(CSS_NAMED_COLORS, key=lambda name: delta_e_76(color, CSS_NAMED_COLORS[name]))


def css_variable(color: ColorInput, name: str = "color") -> str:
    return f"--{name}: {parse_color(color).hex};"


def scss_variable(color: ColorInput, name: str = "color") -> str:
    return f"${name}: {parse_color(color).hex};"


def to_format(color: ColorInput, output_format: Union[OutputFormat, str], precision: int = 2) -> str:
    """
    Render a color in a textual notation.

    Args:
        color: any parseable color
        output_format: one of ``OutputFormat``
        precision: decimal places for float channels; 0 rounds to integers

    Returns:
        e.g. ``"rgb(255, 0, 0)"``, ``"hsl(0.00, 100.00%, 50.00%)"``
    """
    color = parse_color(color)
    fmt = OutputFormat(output_format)
    config = EngineConfig(precision=precision, alpha_precision=max(precision, 3))
    alpha_digits = precision if precision > 0 else 1

    if fmt == OutputFormat.HEX:
        return color.hex
    if fmt == OutputFormat.RGB:
        r, g, b, _ = color.rgb
        return f"rgb({r}, {g}, {b})"
    if fmt == OutputFormat.RGBA:
        r, g, b, a = color.rgb
        return f"rgba({r}, {g}, {b}, {_fixed(a, alpha_digits)})"
    if fmt in (OutputFormat.HSL, OutputFormat.HSLA):
        h, s, l, a = color.to_hsl(config)
        body = _triple((h, s, l), precision, (False, True, True))
        if fmt == OutputFormat.HSLA:
            return f"hsla({body}, {_fixed(a, alpha_digits)})"
        return f"hsl({body})"
    if fmt in (OutputFormat.HSV, OutputFormat.HSVA):
        h, s, v, a = color.to_hsv(config)
        body = _triple((h, s, v), precision, (False, True, True))
        if fmt == OutputFormat.HSVA:
            return f"hsva({body}, {_fixed(a, alpha_digits)})"
        return f"hsv({body})"
    if fmt == OutputFormat.LAB:
        return f"lab({_triple(color.to_lab(config), precision)})"
    if fmt == OutputFormat.LCH:
        return f"lch({_triple(color.to_lch(config), precision)})"
    if fmt == OutputFormat.CSS_VAR:
        return css_variable(color)
    if fmt == OutputFormat.SCSS_VAR:
        return scss_variable(color)
    return closest_named_color(color)


def gradient_stops_css(spec: GradientSpec) -> str:
    return ", ".join(f"{stop.color.hex} {format_number(stop.position, 4)}%" for stop in spec.stops)


def gradient_css(spec: GradientSpec) -> str:
    """
    CSS gradient function for a built gradient.

    Linear: ``linear-gradient(90deg, #ff0000 0%, #0000ff 100%)``.
    Radial: ``radial-gradient(circle farthest-corner at 50% 50%, ...)``.
    """
    stops = gradient_stops_css(spec)
    geometry = spec.geometry
    if isinstance(geometry, RadialGeometry):
        return (
            f"radial-gradient({geometry.shape.value} {geometry.size_spec} "
            f"at {geometry.center_spec}, {stops})"
        )
    if isinstance(geometry, LinearGeometry):
        return f"linear-gradient({format_number(geometry.angle, 4)}deg, {stops})"
    raise TypeError(f"Unsupported gradient geometry: {type(geometry).__name__}")


def variable_block(colors: Iterable[Color], prefix: str, scss: bool = False) -> str:
    """
    Numbered CSS (or SCSS) variables, one per line, starting at 1.

    >>> variable_block([Color.from_hex("#ffffff")], "color-tints")
    '--color-tints-1: #ffffff;'
    """
    sigil = "$" if scss else "--"
    return "\n".join(f"{sigil}{prefix}-{i}: {c.hex};" for i, c in enumerate(colors, start=1))
