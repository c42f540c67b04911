from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorTriple = Tuple[float, float, float]
ColorElement = Union[ScalarVector, ndarray]


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    LAB = "lab"
    LCH = "lch"
    HEX = "hex"


HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSV, ColorSpace.LCH}
# index of the hue channel within each hue-bearing space
HUE_INDEX = {ColorSpace.HSL: 0, ColorSpace.HSV: 0, ColorSpace.LCH: 2}


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: float = 1.0


class HSLA(NamedTuple):
    h: float
    s: float
    l: float
    a: float = 1.0


class HSVA(NamedTuple):
    h: float
    s: float
    v: float
    a: float = 1.0


class LAB(NamedTuple):
    l: float
    a: float
    b: float


class LCH(NamedTuple):
    l: float
    c: float
    h: float


def as_space(space: Union[str, ColorSpace]) -> ColorSpace:
    """
    Coerce a space name to ``ColorSpace``.

    Accepts alpha-suffixed names ("rgba", "hsla", "hsva") and "hsb".
    """
    if isinstance(space, ColorSpace):
        return space
    name = str(space).strip().lower()
    if name == "hsb":
        name = "hsv"
    if name in ("rgba", "hsla", "hsva"):
        name = name[:-1]
    return ColorSpace(name)


def is_hue_space(space: Union[str, ColorSpace]) -> bool:
    return as_space(space) in HUE_SPACES


def element_to_array(element: ColorElement) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: tuple of channels or an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)
