"""
Weighted mixing in RGB, HSL, LAB and LCH.

Each mixer takes parsed colors and weights that were already validated (see
``chromamix.mixing.mix``) and returns a new ``Color``. Alpha is mixed as a
plain weighted sum in every space.
"""
from __future__ import annotations
import math
from typing import Callable, Dict, Sequence

import numpy as np
from boundednumbers import clamp

from ..colors import Color
from ..config import DEFAULT_CONFIG, EngineConfig, HueMean
from ..types.color_types import ColorSpace, as_space


def hue_mean(hues: Sequence[float], weights: Sequence[float], method: HueMean = HueMean.CIRCULAR) -> float:
    """
    Weighted mean of angles in degrees, in [0, 360).

    ``CIRCULAR`` averages the unit vectors. ``LEGACY_COSINE`` drops the sine
    term, so the result is always 0 or 180.
    """
    rad = np.radians(np.asarray(hues, dtype=float))
    w = np.asarray(weights, dtype=float)
    cos_sum = float(np.sum(w * np.cos(rad)))
    sin_sum = 0.0 if method == HueMean.LEGACY_COSINE else float(np.sum(w * np.sin(rad)))
    # opposite hues cancel; exact float noise would otherwise pick a random angle
    if abs(cos_sum) < 1e-12 and abs(sin_sum) < 1e-12:
        return 0.0
    hue = math.degrees(math.atan2(sin_sum, cos_sum))
    if hue < 0:
        hue += 360
    return hue % 360


def _weighted_sum(values: np.ndarray, weights: np.ndarray) -> np.ndarray:
    return np.tensordot(weights, values, axes=1)


def _alpha(colors: Sequence[Color], weights: np.ndarray) -> float:
    return float(clamp(float(np.dot(weights, [c._alpha for c in colors])), 0.0, 1.0))


def mix_rgb(colors: Sequence[Color], weights: Sequence[float], config: EngineConfig = DEFAULT_CONFIG) -> Color:
    """Channel-wise weighted sum of 8-bit RGB, rounded half up and clamped."""
    w = np.asarray(weights, dtype=float)
    channels = np.array([c.rgb[:3] for c in colors], dtype=float)
    r, g, b = (clamp(math.floor(v + 0.5), 0, 255) for v in _weighted_sum(channels, w))
    return Color.from_rgb(r, g, b, alpha=_alpha(colors, w))


def mix_hsl(colors: Sequence[Color], weights: Sequence[float], config: EngineConfig = DEFAULT_CONFIG) -> Color:
    """Circular hue mean; saturation and lightness as clamped weighted sums."""
    w = np.asarray(weights, dtype=float)
    hsl = np.array([c.to_hsl(config)[:3] for c in colors], dtype=float)
    h = hue_mean(hsl[:, 0], w, config.hue_mean)
    s, l = (clamp(float(v), 0.0, 100.0) for v in _weighted_sum(hsl[:, 1:], w))
    return Color.from_hsl(h, s, l, alpha=_alpha(colors, w))


def mix_lab(colors: Sequence[Color], weights: Sequence[float], config: EngineConfig = DEFAULT_CONFIG) -> Color:
    """Channel-wise weighted sum in L*a*b*."""
    w = np.asarray(weights, dtype=float)
    lab = np.array([c.to_lab(config) for c in colors], dtype=float)
    l, a, b = (float(v) for v in _weighted_sum(lab, w))
    return Color.from_lab(clamp(l, 0.0, 100.0), a, b, alpha=_alpha(colors, w))


def mix_lch(colors: Sequence[Color], weights: Sequence[float], config: EngineConfig = DEFAULT_CONFIG) -> Color:
    """Lightness and chroma as weighted sums, circular hue mean."""
    w = np.asarray(weights, dtype=float)
    lch = np.array([c.to_lch(config) for c in colors], dtype=float)
    l, c = (float(v) for v in _weighted_sum(lch[:, :2], w))
    h = hue_mean(lch[:, 2], w, config.hue_mean)
    return Color.from_lch(clamp(l, 0.0, 100.0), max(c, 0.0), h, alpha=_alpha(colors, w))


WEIGHTED_MIXERS: Dict[ColorSpace, Callable[[Sequence[Color], Sequence[float], EngineConfig], Color]] = {
    ColorSpace.RGB: mix_rgb,
    ColorSpace.HSL: mix_hsl,
    ColorSpace.LAB: mix_lab,
    ColorSpace.LCH: mix_lch,
}


def weighted_mix(
    colors: Sequence[Color],
    weights: Sequence[float],
    space: str | ColorSpace = ColorSpace.RGB,
    config: EngineConfig = DEFAULT_CONFIG,
) -> Color:
    space = as_space(space)
    if space not in WEIGHTED_MIXERS:
        raise ValueError(f"Mixing is not supported in {space.value!r}")
    return WEIGHTED_MIXERS[space](colors, weights, config)
