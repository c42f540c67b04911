"""
Operation entry points.

One function per externally exposed tool. Each accepts either a raw mapping
(as decoded from a request) or the matching parameter model, validates it,
runs the engine and returns a typed result. Errors propagate as
``ChromamixError`` subclasses for the caller to map onto a response.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .accessibility import ContrastReport
from .accessibility import check_contrast as _check_contrast
from .colorblindness import SimulationReport, simulate_colors
from .colors import Color, detect_and_parse, parse_color
from .config import DEFAULT_CONFIG, EngineConfig
from .exceptions import ChromamixError
from .formatting import OutputFormat, css_variable, scss_variable, to_format
from .gradients import GradientSpec, LinearGeometry, RadialGeometry, build_gradient
from .harmony import HarmonyPalette, harmony
from .mixing import mix
from .params import (
    ColorblindnessParams,
    ContrastParams,
    ConvertParams,
    HarmonyParams,
    LinearGradientParams,
    MixParams,
    RadialGradientParams,
    VariationParams,
    validate_params,
)
from .variations import VariationSeries, VariationSet, vary

logger = logging.getLogger(__name__)

Raw = Mapping[str, Any]


@dataclass(frozen=True)
class ConversionResult:
    original: Any
    converted: str
    format: OutputFormat
    precision: int
    detected_format: str
    color: Color
    css_variable: Optional[str] = None
    scss_variable: Optional[str] = None


def _log_failure(operation: str, error: ChromamixError) -> None:
    logger.info("%s rejected [%s]: %s", operation, error.code, error.message)


def convert_color(params: Union[ConvertParams, Raw]) -> ConversionResult:
    p = validate_params(ConvertParams, params, "convert_color")
    try:
        if isinstance(p.color, str):
            color, detected = detect_and_parse(p.color)
        else:
            color = parse_color(p.color)
            detected = "mapping" if isinstance(p.color, dict) else "rgb"
    except ChromamixError as e:
        _log_failure("convert_color", e)
        raise

    css_var = scss_var = None
    if p.variable_name:
        css_var = css_variable(color, p.variable_name)
        scss_var = scss_variable(color, p.variable_name)
    elif p.output_format == OutputFormat.CSS_VAR:
        css_var = css_variable(color)
    elif p.output_format == OutputFormat.SCSS_VAR:
        scss_var = scss_variable(color)

    converted = to_format(color, p.output_format, p.precision)
    logger.debug("convert_color %r (%s) -> %s", p.color, detected, converted)
    return ConversionResult(
        original=p.color,
        converted=converted,
        format=p.output_format,
        precision=p.precision,
        detected_format=detected,
        color=color,
        css_variable=css_var,
        scss_variable=scss_var,
    )


def mix_colors(params: Union[MixParams, Raw], config: EngineConfig = DEFAULT_CONFIG) -> Color:
    p = validate_params(MixParams, params, "mix_colors")
    try:
        result = mix(p.colors, p.ratios, p.color_space, p.blend_mode, config)
    except ChromamixError as e:
        _log_failure("mix_colors", e)
        raise
    logger.debug("mix_colors %d colors -> %s", len(p.colors), result.hex)
    return result


def generate_variations(params: Union[VariationParams, Raw]) -> Union[VariationSeries, VariationSet]:
    p = validate_params(VariationParams, params, "generate_variations")
    try:
        result = vary(p.base_color, p.variation_type, p.steps, p.intensity)
    except ChromamixError as e:
        _log_failure("generate_variations", e)
        raise
    logger.debug("generate_variations %s of %s: %d colors", p.variation_type.value, result.base.hex, len(result))
    return result


def generate_linear_gradient(
    params: Union[LinearGradientParams, Raw],
    config: EngineConfig = DEFAULT_CONFIG,
) -> GradientSpec:
    p = validate_params(LinearGradientParams, params, "generate_linear_gradient")
    try:
        return build_gradient(
            p.colors,
            positions=p.positions,
            easing=p.interpolation,
            steps=p.steps,
            geometry=LinearGeometry(p.angle),
            color_space=p.color_space,
            config=config,
        )
    except ChromamixError as e:
        _log_failure("generate_linear_gradient", e)
        raise


def generate_radial_gradient(
    params: Union[RadialGradientParams, Raw],
    config: EngineConfig = DEFAULT_CONFIG,
) -> GradientSpec:
    p = validate_params(RadialGradientParams, params, "generate_radial_gradient")
    try:
        geometry = RadialGeometry(p.shape, p.size, p.center, p.dimensions)
        return build_gradient(
            p.colors,
            positions=p.positions,
            easing=p.interpolation,
            steps=p.steps,
            geometry=geometry,
            color_space=p.color_space,
            config=config,
        )
    except ChromamixError as e:
        _log_failure("generate_radial_gradient", e)
        raise


def check_contrast(params: Union[ContrastParams, Raw]) -> ContrastReport:
    p = validate_params(ContrastParams, params, "check_contrast")
    try:
        report = _check_contrast(p.foreground, p.background, p.text_size, p.standard)
    except ChromamixError as e:
        _log_failure("check_contrast", e)
        raise
    logger.debug(
        "check_contrast %s on %s: %.2f (passes=%s)",
        report.foreground.hex, report.background.hex, report.contrast_ratio, report.passes,
    )
    return report


def generate_harmony_palette(params: Union[HarmonyParams, Raw]) -> HarmonyPalette:
    p = validate_params(HarmonyParams, params, "generate_harmony_palette")
    try:
        palette = harmony(p.base_color, p.harmony_type, p.count, p.variation)
    except ChromamixError as e:
        _log_failure("generate_harmony_palette", e)
        raise
    logger.debug("generate_harmony_palette %s -> %s", p.harmony_type.value, palette.hexes)
    return palette


def simulate_colorblindness(params: Union[ColorblindnessParams, Raw]) -> SimulationReport:
    p = validate_params(ColorblindnessParams, params, "simulate_colorblindness")
    try:
        return simulate_colors(p.colors, p.type, p.severity)
    except ChromamixError as e:
        _log_failure("simulate_colorblindness", e)
        raise
