import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import UnitFloat

from ..utils import normalize_hue

## HSL to RGB conversions


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[UnitFloat, UnitFloat, UnitFloat]:
    """
    Convert HSL to RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Args:
        h: Hue in degrees (any real, wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[UnitFloat, UnitFloat, UnitFloat]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)
    m3 = 2 * l - m1

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = m1, m2, m3
    elif hue_section == 1:
        r, g, b = m2, m1, m3
    elif hue_section == 2:
        r, g, b = m3, m1, m2
    elif hue_section == 3:
        r, g, b = m3, m2, m1
    elif hue_section == 4:
        r, g, b = m2, m3, m1
    else:
        r, g, b = m1, m3, m2

    return UnitFloat(r), UnitFloat(g), UnitFloat(b)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    a = s * np.minimum(l, 1 - l)

    def channel(n: int) -> NDArray:
        k = (n + h / 30) % 12
        return l - a * np.clip(np.minimum(k - 3, 9 - k), -1, 1)

    return np.clip(np.stack([channel(0), channel(8), channel(4)], axis=-1), 0, 1)

## HSV to RGB conversions


def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[UnitFloat, UnitFloat, UnitFloat]:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees (any real, wrapped into [0, 360))
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[UnitFloat, UnitFloat, UnitFloat]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = c, x, 0.0
    elif hue_section == 1:
        r, g, b = x, c, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, c, x
    elif hue_section == 3:
        r, g, b = 0.0, x, c
    elif hue_section == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return UnitFloat(r + m), UnitFloat(g + m), UnitFloat(b + m)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        v: array-like or scalar, value in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    def channel(n: int) -> NDArray:
        k = (n + h / 60) % 6
        return v - v * s * np.clip(np.minimum(k, 4 - k), 0, 1)

    return np.clip(np.stack([channel(5), channel(3), channel(1)], axis=-1), 0, 1)
