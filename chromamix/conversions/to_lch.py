import numpy as np
from numpy import ndarray as NDArray

from .to_lab import np_unit_rgb_to_lab, np_lab_to_unit_rgb

# below this chroma the hue angle is noise
ACHROMATIC_CHROMA = 1e-4


def np_lab_to_lch(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: L*a*b* to LCh(ab).

    Returns:
        lch: array of shape (..., 3): (L, chroma >= 0, hue [0,360))
    """
    l = np.asarray(l, dtype=float)
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(l, a, b).shape
    l = np.broadcast_to(l, out_shape)

    c = np.hypot(a, b)
    h = np.degrees(np.arctan2(b, a)) % 360
    h = np.where(c < ACHROMATIC_CHROMA, 0.0, h)
    return np.stack([l, np.broadcast_to(c, out_shape), np.broadcast_to(h, out_shape)], axis=-1)


def np_lch_to_lab(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    """Vectorized: LCh(ab) to L*a*b*. Returns array of shape (..., 3)."""
    l = np.asarray(l, dtype=float)
    c = np.asarray(c, dtype=float)
    rad = np.radians(np.asarray(h, dtype=float))

    out_shape = np.broadcast(l, c, rad).shape
    return np.stack(
        [np.broadcast_to(l, out_shape), np.broadcast_to(c * np.cos(rad), out_shape),
         np.broadcast_to(c * np.sin(rad), out_shape)],
        axis=-1,
    )


def np_unit_rgb_to_lch(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    lab = np_unit_rgb_to_lab(r, g, b)
    return np_lab_to_lch(lab[..., 0], lab[..., 1], lab[..., 2])


def np_lch_to_unit_rgb(l: NDArray, c: NDArray, h: NDArray, clip: bool = True) -> NDArray:
    lab = np_lch_to_lab(l, c, h)
    return np_lab_to_unit_rgb(lab[..., 0], lab[..., 1], lab[..., 2], clip=clip)


def lab_to_lch(l: float, a: float, b: float) -> tuple[float, float, float]:
    """
    Convert L*a*b* to LCh(ab).

    Args:
        l: Lightness in [0, 100]
        a: green-red axis
        b: blue-yellow axis

    Returns:
        Tuple[float, float, float]: (L, chroma, hue [0,360))
    """
    l_, c, h = np_lab_to_lch(l, a, b)
    return float(l_), float(c), float(h)


def lch_to_lab(l: float, c: float, h: float) -> tuple[float, float, float]:
    l_, a, b = np_lch_to_lab(l, c, h)
    return float(l_), float(a), float(b)


def unit_rgb_to_lch(r: float, g: float, b: float) -> tuple[float, float, float]:
    l, c, h = np_unit_rgb_to_lch(r, g, b)
    return float(l), float(c), float(h)


def lch_to_unit_rgb(l: float, c: float, h: float, clip: bool = True) -> tuple[float, float, float]:
    r, g, b = np_lch_to_unit_rgb(l, c, h, clip=clip)
    return float(r), float(g), float(b)
