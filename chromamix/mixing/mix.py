from __future__ import annotations
import logging
import math
from typing import Optional, Sequence

from ..colors import Color, ColorInput, parse_color
from ..config import DEFAULT_CONFIG, EngineConfig
from ..exceptions import EmptyInputError, InvalidWeightsError
from ..types.color_types import ColorSpace, as_space
from .blend import BlendMode, blend_sequence
from .weighted import weighted_mix

logger = logging.getLogger(__name__)


def equal_weights(count: int) -> list[float]:
    return [1 / count] * count


def validate_weights(
    weights: Sequence[float],
    count: int,
    tolerance: float = DEFAULT_CONFIG.weight_tolerance,
) -> list[float]:
    """
    Check mix weights without normalizing them.

    Raises:
        InvalidWeightsError: on a length mismatch, a negative or non-finite
            weight, or a sum further than ``tolerance`` from 1
    """
    weights = [float(w) for w in weights]
    if len(weights) != count:
        raise InvalidWeightsError(weights, f"expected {count} weights (one per color), got {len(weights)}")
    for w in weights:
        if not math.isfinite(w) or w < 0:
            raise InvalidWeightsError(weights, f"weights must be finite and non-negative, got {w}")
    total = sum(weights)
    if abs(total - 1) > tolerance:
        raise InvalidWeightsError(weights, f"weights must sum to 1 (±{tolerance}), got {total:g}")
    return weights


def mix(
    colors: Sequence[ColorInput],
    weights: Optional[Sequence[float]] = None,
    space: str | ColorSpace = ColorSpace.RGB,
    blend_mode: str | BlendMode = BlendMode.NORMAL,
    config: EngineConfig = DEFAULT_CONFIG,
) -> Color:
    """
    Mix colors.

    With the ``normal`` blend mode the colors are combined as a weighted
    mix in ``space``. Any other mode folds ``blend`` left to right over the
    colors and ignores the weights, which are still validated when given.

    Args:
        colors: one or more colors in any parseable form
        weights: one per color, non-negative, summing to 1; equal by default
        space: rgb, hsl, lab or lch
        blend_mode: one of ``BlendMode``
        config: precision, tolerance and hue-mean settings

    Returns:
        Color

    Raises:
        EmptyInputError: no colors
        InvalidWeightsError: weights fail validation
        InvalidColorFormatError: a color cannot be parsed
    """
    if not colors:
        raise EmptyInputError("mix")
    parsed = [parse_color(c) for c in colors]
    space = as_space(space)
    blend_mode = BlendMode(blend_mode)

    if weights is None:
        weights = equal_weights(len(parsed))
    else:
        weights = validate_weights(weights, len(parsed), config.weight_tolerance)

    if len(parsed) == 1:
        return parsed[0]

    if blend_mode == BlendMode.NORMAL:
        result = weighted_mix(parsed, weights, space, config)
    else:
        result = blend_sequence(parsed, blend_mode)

    logger.debug(
        "Mixed %d colors in %s (blend=%s) -> %s",
        len(parsed), space.value, blend_mode.value, result.hex,
    )
    return result
