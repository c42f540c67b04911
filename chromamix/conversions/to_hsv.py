import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import UnitFloat

from ..utils import normalize_hue


def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, UnitFloat, UnitFloat]:
    """
    Convert RGB to HSV.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, UnitFloat, UnitFloat]: (hue [0,360), saturation [0,1], value [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    saturation = 0.0 if max_c == 0 else delta / max_c

    if delta == 0:
        hue = 0.0
    elif max_c == r:
        hue = 60 * ((g - b) / delta)
    elif max_c == g:
        hue = 60 * ((b - r) / delta) + 120
    else:
        hue = 60 * ((r - g) / delta) + 240

    return normalize_hue(hue), UnitFloat(saturation), UnitFloat(max_c)


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    saturation = np.zeros(out_shape)
    nonzero = max_c > 0
    saturation[nonzero] = delta[nonzero] / max_c[nonzero]

    hue = np.zeros(out_shape)
    mask = delta > 0
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = (60 * ((g[mask_r] - b[mask_r]) / delta[mask_r]) + 360) % 360
    hue[mask_g] = (60 * ((b[mask_g] - r[mask_g]) / delta[mask_g]) + 120) % 360
    hue[mask_b] = (60 * ((r[mask_b] - g[mask_b]) / delta[mask_b]) + 240) % 360

    return np.stack([hue, saturation, max_c], axis=-1)


def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, UnitFloat, UnitFloat]:
    """
    Convert HSL to HSV.

    Args:
        h: Hue in degrees
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, UnitFloat, UnitFloat]: (hue [0,360), saturation [0,1], value [0,1])
    """
    value = l + s * min(l, 1 - l)
    saturation = 0.0 if value == 0 else 2 * (1 - l / value)
    return normalize_hue(h), UnitFloat(saturation), UnitFloat(value)


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized: Convert HSL to HSV. Returns array of shape (..., 3)."""
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    value = l + s * np.minimum(l, 1 - l)
    saturation = np.zeros(out_shape)
    mask = value > 0
    saturation[mask] = 2 * (1 - l[mask] / value[mask])

    return np.stack([h, np.clip(saturation, 0, 1), value], axis=-1)
