"""
Separable blend modes on 8-bit RGB.

``base`` is the accumulated color and ``overlay`` the next one. Every mode
works per channel on values in [0, 255]; results are rounded half up,
clamped and returned as opaque colors.
"""
from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Sequence

import numpy as np

from ..colors import Color
from ..exceptions import EmptyInputError


class BlendMode(str, Enum):
    NORMAL = "normal"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    DIFFERENCE = "difference"
    EXCLUSION = "exclusion"
    COLOR_BURN = "color_burn"
    COLOR_DODGE = "color_dodge"


BlendFunction = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _normal(base: np.ndarray, overlay: np.ndarray) -> np.ndarray:
    return overlay.copy()


def _multiply(base: np.ndarray, overlay: np.ndarray) -> np.ndarray:
    return base * overlay / 255


def _screen(base: np.ndarray, overlay: np.ndarray) -> np.ndarray:
    return 255 - (255 - base) * (255 - overlay) / 255


def _overlay(base: np.ndarray, overlay: np.ndarray) -> np.ndarray:
    return np.where(
        base < 128,
        2 * base * overlay / 255,
        255 - 2 * (255 - base) * (255 - overlay) / 255,
    )


def _darken(base: np.ndarray, overlay: np.ndarray) -> np.ndarray:
    return np.minimum(base, overlay)


def _lighten(base: np.ndarray, overlay: np.ndarray) -> np.ndarray:
    return np.maximum(base, overlay)


def _difference(base: np.ndarray, overlay: np.ndarray) -> np.ndarray:
    return np.abs(base - overlay)


def _exclusion(base: np.ndarray, overlay: np.ndarray) -> np.ndarray:
    return base + overlay - 2 * base * overlay / 255


def _color_burn(base: np.ndarray, overlay: np.ndarray) -> np.ndarray:
    # overlay == 0 resolves to 0
    with np.errstate(divide='ignore', invalid='ignore'):
        burned = 255 - (255 - base) * 255 / overlay
    return np.where(overlay == 0, 0.0, np.maximum(0.0, burned))


def _color_dodge(base: np.ndarray, overlay: np.ndarray) -> np.ndarray:
    # overlay == 255 resolves to 255
    with np.errstate(divide='ignore', invalid='ignore'):
        dodged = base * 255 / (255 - overlay)
    return np.where(overlay == 255, 255.0, np.minimum(255.0, dodged))


BLEND_FUNCTIONS: Dict[BlendMode, BlendFunction] = {
    BlendMode.NORMAL: _normal,
    BlendMode.MULTIPLY: _multiply,
    BlendMode.SCREEN: _screen,
    BlendMode.OVERLAY: _overlay,
    BlendMode.DARKEN: _darken,
    BlendMode.LIGHTEN: _lighten,
    BlendMode.DIFFERENCE: _difference,
    BlendMode.EXCLUSION: _exclusion,
    BlendMode.COLOR_BURN: _color_burn,
    BlendMode.COLOR_DODGE: _color_dodge,
}


def np_blend(base: np.ndarray, overlay: np.ndarray, mode: BlendMode | str) -> np.ndarray:
    """
    Vectorized blend on arrays of 8-bit channels.

    Args:
        base: array of shape (..., 3) in [0, 255]
        overlay: array broadcastable to ``base``
        mode: blend mode name

    Returns:
        integer array of shape (..., 3), rounded half up and clamped
    """
    fn = BLEND_FUNCTIONS[BlendMode(mode)]
    result = fn(np.asarray(base, dtype=float), np.asarray(overlay, dtype=float))
    return np.clip(np.floor(result + 0.5), 0, 255).astype(int)


def blend(base: Color, overlay: Color, mode: BlendMode | str = BlendMode.NORMAL) -> Color:
    """Blend two colors; the result is opaque."""
    r, g, b = np_blend(np.array(base.rgb[:3]), np.array(overlay.rgb[:3]), mode)
    return Color.from_rgb(int(r), int(g), int(b))


def blend_sequence(colors: Sequence[Color], mode: BlendMode | str) -> Color:
    """Fold ``blend`` left to right over ``colors``."""
    if not colors:
        raise EmptyInputError("blend")
    result = colors[0]
    for color in colors[1:]:
        result = blend(result, color, mode)
    return result
