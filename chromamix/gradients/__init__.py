from .builder import GradientSpec, GradientStop, build_gradient, GRADIENT_SPACES
from .easing import Easing, ease, ease_positions
from .geometry import Geometry, LinearGeometry, RadialGeometry, RadialShape, RadialSize
from .interpolate import HueDirection, lerp_hue, np_render, render_gradient
from .positions import even_positions, validate_positions, resolve_positions, quantized_stops

__all__ = [
    "GradientSpec",
    "GradientStop",
    "build_gradient",
    "GRADIENT_SPACES",
    "Easing",
    "ease",
    "ease_positions",
    "Geometry",
    "LinearGeometry",
    "RadialGeometry",
    "RadialShape",
    "RadialSize",
    "HueDirection",
    "lerp_hue",
    "np_render",
    "render_gradient",
    "even_positions",
    "validate_positions",
    "resolve_positions",
    "quantized_stops",
]
