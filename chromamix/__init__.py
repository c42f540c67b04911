"""chromamix: color conversion, mixing, variations, gradients and contrast analysis."""

import logging

from .colors import Color, parse_color, CSS_NAMED_COLORS
from .config import DEFAULT_CONFIG, EngineConfig, HueMean
from .exceptions import (
    ChromamixError,
    InvalidColorFormatError,
    InvalidWeightsError,
    EmptyInputError,
    PositionCountMismatchError,
    PositionsNotAscendingError,
    InvalidGeometryError,
    InvalidParametersError,
)
from .types import ColorSpace, RGBA, HSLA, HSVA, LAB, LCH
from .conversions import convert, np_convert
from .accessibility import (
    relative_luminance,
    contrast_ratio,
    wcag_compliance,
    check_contrast,
    delta_e_76,
    TextSize,
    ContrastStandard,
    ContrastReport,
)
from .mixing import mix, blend, BlendMode
from .variations import vary, tints, shades, tones, VariationKind, VariationSeries, VariationSet
from .gradients import (
    build_gradient,
    render_gradient,
    GradientSpec,
    GradientStop,
    Easing,
    LinearGeometry,
    RadialGeometry,
    RadialShape,
    RadialSize,
)
from .formatting import to_format, gradient_css, OutputFormat
from .harmony import harmony, HarmonyKind, HarmonyPalette
from .colorblindness import simulate, simulate_colors, Deficiency, SimulationReport

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Color",
    "parse_color",
    "CSS_NAMED_COLORS",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "HueMean",
    "ChromamixError",
    "InvalidColorFormatError",
    "InvalidWeightsError",
    "EmptyInputError",
    "PositionCountMismatchError",
    "PositionsNotAscendingError",
    "InvalidGeometryError",
    "InvalidParametersError",
    "ColorSpace",
    "RGBA",
    "HSLA",
    "HSVA",
    "LAB",
    "LCH",
    "convert",
    "np_convert",
    "relative_luminance",
    "contrast_ratio",
    "wcag_compliance",
    "check_contrast",
    "delta_e_76",
    "TextSize",
    "ContrastStandard",
    "ContrastReport",
    "mix",
    "blend",
    "BlendMode",
    "vary",
    "tints",
    "shades",
    "tones",
    "VariationKind",
    "VariationSeries",
    "VariationSet",
    "build_gradient",
    "render_gradient",
    "GradientSpec",
    "GradientStop",
    "Easing",
    "LinearGeometry",
    "RadialGeometry",
    "RadialShape",
    "RadialSize",
    "to_format",
    "gradient_css",
    "OutputFormat",
    "harmony",
    "HarmonyKind",
    "HarmonyPalette",
    "simulate",
    "simulate_colors",
    "Deficiency",
    "SimulationReport",
]

__version__ = "0.1.0"
