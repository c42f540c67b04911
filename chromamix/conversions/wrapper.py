import numpy as np
from typing import Callable, Dict, Tuple, Union

from ..types.color_types import ColorElement, ColorSpace, as_space, element_to_array

from .to_rgb import np_hsl_to_unit_rgb, np_hsv_to_unit_rgb
from .to_hsl import np_unit_rgb_to_hsl, np_hsv_to_hsl
from .to_hsv import np_unit_rgb_to_hsv, np_hsl_to_hsv
from .to_lab import np_unit_rgb_to_lab, np_lab_to_unit_rgb
from .to_lch import np_unit_rgb_to_lch, np_lch_to_unit_rgb, np_lab_to_lch, np_lch_to_lab

SpaceLike = Union[str, ColorSpace]
ArrayConverter = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]

# Every space reaches every other one through unit RGB; direct routes skip
# the round trip where one exists.
TO_UNIT_RGB: Dict[ColorSpace, ArrayConverter] = {
    ColorSpace.RGB: lambda r, g, b: np.stack(np.broadcast_arrays(r, g, b), axis=-1),
    ColorSpace.HSL: np_hsl_to_unit_rgb,
    ColorSpace.HSV: np_hsv_to_unit_rgb,
    ColorSpace.LAB: np_lab_to_unit_rgb,
    ColorSpace.LCH: np_lch_to_unit_rgb,
}

FROM_UNIT_RGB: Dict[ColorSpace, ArrayConverter] = {
    ColorSpace.RGB: lambda r, g, b: np.stack(np.broadcast_arrays(r, g, b), axis=-1),
    ColorSpace.HSL: np_unit_rgb_to_hsl,
    ColorSpace.HSV: np_unit_rgb_to_hsv,
    ColorSpace.LAB: np_unit_rgb_to_lab,
    ColorSpace.LCH: np_unit_rgb_to_lch,
}

DIRECT: Dict[Tuple[ColorSpace, ColorSpace], ArrayConverter] = {
    (ColorSpace.HSL, ColorSpace.HSV): np_hsl_to_hsv,
    (ColorSpace.HSV, ColorSpace.HSL): np_hsv_to_hsl,
    (ColorSpace.LAB, ColorSpace.LCH): np_lab_to_lch,
    (ColorSpace.LCH, ColorSpace.LAB): np_lch_to_lab,
}


def _resolve(space: SpaceLike) -> ColorSpace:
    resolved = as_space(space)
    if resolved not in TO_UNIT_RGB:
        raise ValueError(f"Unsupported color space for numeric conversion: {space!r}")
    return resolved


def np_convert(color: ColorElement, from_space: SpaceLike, to_space: SpaceLike) -> np.ndarray:
    """
    Vectorized color space conversion.

    Channels use the unit convention of the conversion functions: RGB in
    [0, 1], HSL/HSV as (degrees, unit, unit), LAB and LCH in CIE units.

    Args:
        color: array of shape (..., 3)
        from_space: source space name
        to_space: target space name

    Returns:
        array of shape (..., 3) in the target space
    """
    src = _resolve(from_space)
    dst = _resolve(to_space)
    arr = element_to_array(color)
    if arr.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {arr.shape}")

    channels = arr[..., 0], arr[..., 1], arr[..., 2]
    if src == dst:
        return arr.copy()
    if (src, dst) in DIRECT:
        return DIRECT[(src, dst)](*channels)

    rgb = TO_UNIT_RGB[src](*channels)
    return FROM_UNIT_RGB[dst](rgb[..., 0], rgb[..., 1], rgb[..., 2])


def convert(color: ColorElement, from_space: SpaceLike, to_space: SpaceLike) -> tuple[float, ...]:
    """Scalar wrapper around ``np_convert`` returning a plain tuple."""
    result = np_convert(color, from_space, to_space)
    return tuple(float(v) for v in result)
