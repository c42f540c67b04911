"""
Sampling a ``GradientSpec`` into concrete colors.

Smooth gradients interpolate between neighbouring stops in the chosen
color space; hue channels follow the requested direction around the color
wheel. Stepped gradients are sampled as hard bands.
"""
from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from ..colors import Color
from ..conversions import np_convert
from ..types.color_types import HUE_INDEX, ColorSpace, as_space

if TYPE_CHECKING:
    from .builder import GradientSpec


class HueDirection(str, Enum):
    SHORTEST = "shortest"
    CW = "cw"
    CCW = "ccw"


def _space_values(colors: list[Color], space: ColorSpace) -> np.ndarray:
    rgb = np.array([c.unit_rgb for c in colors], dtype=float)
    return np_convert(rgb, ColorSpace.RGB, space)


def lerp_hue(h0: np.ndarray, h1: np.ndarray, u: np.ndarray, direction: HueDirection = HueDirection.SHORTEST) -> np.ndarray:
    """
    Interpolate hue angles in degrees, wrapping into [0, 360).

    Args:
        h0: start hues
        h1: end hues
        u: interpolation coefficients in [0, 1]
        direction: shortest arc, clockwise (increasing) or counter-clockwise

    Returns:
        interpolated hues in [0, 360)
    """
    h0 = np.asarray(h0, dtype=float) % 360.0
    h1 = np.asarray(h1, dtype=float) % 360.0
    direction = HueDirection(direction)

    if direction == HueDirection.CW:
        h1 = np.where(h1 <= h0, h1 + 360.0, h1)
    elif direction == HueDirection.CCW:
        h1 = np.where(h1 >= h0, h1 - 360.0, h1)
    else:
        delta = h1 - h0
        h1 = np.where(delta > 180.0, h1 - 360.0, np.where(delta < -180.0, h1 + 360.0, h1))

    return (h0 + u * (h1 - h0)) % 360.0


def np_render(
    spec: "GradientSpec",
    samples: int = 256,
    space: Optional[Union[str, ColorSpace]] = None,
    direction: Union[HueDirection, str] = HueDirection.SHORTEST,
) -> np.ndarray:
    """
    Sample a gradient at ``samples`` evenly spaced points over [0, 100].

    Returns:
        array of shape (samples, 4): unit RGB plus alpha
    """
    if samples < 1:
        raise ValueError(f"samples must be at least 1, got {samples}")
    space = as_space(space) if space is not None else spec.color_space
    stops = spec.stops
    positions = np.array([s.position for s in stops], dtype=float)
    alphas = np.array([s.color._alpha for s in stops], dtype=float)
    t = np.linspace(0.0, 100.0, samples) if samples > 1 else np.array([0.0])

    if spec.quantized or len(stops) == 1:
        index = np.clip(np.searchsorted(positions, t, side="right") - 1, 0, len(stops) - 1)
        rgb = np.array([stops[i].color.unit_rgb for i in index], dtype=float)
        return np.concatenate([rgb, alphas[index][:, None]], axis=1)

    values = _space_values([s.color for s in stops], space)

    # segment i spans positions[i]..positions[i + 1]; samples outside the
    # stop range hold the end colors
    seg = np.clip(np.searchsorted(positions, t, side="right") - 1, 0, len(stops) - 2)
    p0 = positions[seg]
    p1 = positions[seg + 1]
    span = p1 - p0
    # eased stops can collapse onto one position; such a segment jumps to its end color
    u = np.where(span > 0, (t - p0) / np.where(span > 0, span, 1.0), 1.0)
    u = np.clip(u, 0.0, 1.0)[:, None]

    start = values[seg]
    end = values[seg + 1]
    out = start * (1 - u) + end * u

    if space in HUE_INDEX:
        hi = HUE_INDEX[space]
        out[:, hi] = lerp_hue(start[:, hi], end[:, hi], u[:, 0], HueDirection(direction))

    rgb = np_convert(out, space, ColorSpace.RGB) if space != ColorSpace.RGB else out
    alpha = alphas[seg] * (1 - u[:, 0]) + alphas[seg + 1] * u[:, 0]
    return np.concatenate([np.clip(rgb, 0, 1), alpha[:, None]], axis=1)


def render_gradient(
    spec: "GradientSpec",
    samples: int = 256,
    space: Optional[Union[str, ColorSpace]] = None,
    direction: Union[HueDirection, str] = HueDirection.SHORTEST,
) -> list[Color]:
    """Sample a gradient into ``Color`` values; see ``np_render``."""
    return [Color(r, g, b, a) for r, g, b, a in np_render(spec, samples, space, direction)]
