from .color import Color
from .parser import parse_color, parse_color_string, detect_and_parse, ColorInput
from .named import CSS_NAMED_COLORS, lookup_named_color

__all__ = [
    "Color",
    "ColorInput",
    "parse_color",
    "parse_color_string",
    "detect_and_parse",
    "CSS_NAMED_COLORS",
    "lookup_named_color",
]
