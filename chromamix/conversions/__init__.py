"""
chromamix Color Space Conversions
=================================

Pure conversion functions between RGB, HSL, HSV, CIE XYZ, CIE L*a*b*,
LCh(ab) and hex, each available as a scalar function returning a tuple and
as an ``np_`` variant that broadcasts over arrays and returns shape (..., 3).

Conventions
-----------
- RGB channels are unit floats in [0, 1]
- HSL/HSV are (hue in degrees [0, 360), saturation [0, 1], lightness/value [0, 1])
- LAB is (L [0, 100], a, b); LCH is (L, chroma >= 0, hue [0, 360))
- LAB/LCH -> RGB clamps into the sRGB cube unless ``clip=False``

High-Level API
--------------
    convert(color, from_space, to_space)
        Scalar conversion through the registry, returns a tuple
    np_convert(color, from_space, to_space)
        Vectorized conversion, returns an ndarray

Examples
--------
>>> from chromamix.conversions import unit_rgb_to_hsl, convert
>>> unit_rgb_to_hsl(1.0, 0.5, 0.0)
(30.0, UnitFloat(1.0), UnitFloat(0.5))
"""

from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl, hsv_to_hsl, np_hsv_to_hsl
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv, hsl_to_hsv, np_hsl_to_hsv
from .to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb, hsv_to_unit_rgb, np_hsv_to_unit_rgb
from .to_lab import (
    unit_rgb_to_xyz,
    xyz_to_unit_rgb,
    xyz_to_lab,
    lab_to_xyz,
    unit_rgb_to_lab,
    lab_to_unit_rgb,
    lab_in_gamut,
    np_unit_rgb_to_xyz,
    np_xyz_to_unit_rgb,
    np_xyz_to_lab,
    np_lab_to_xyz,
    np_unit_rgb_to_lab,
    np_lab_to_unit_rgb,
)
from .to_lch import (
    lab_to_lch,
    lch_to_lab,
    unit_rgb_to_lch,
    lch_to_unit_rgb,
    np_lab_to_lch,
    np_lch_to_lab,
    np_unit_rgb_to_lch,
    np_lch_to_unit_rgb,
)
from .hex import hex_to_rgb, rgb_to_hex, unit_rgb_to_hex
from .wrapper import convert, np_convert

__all__ = [
    'unit_rgb_to_hsl', 'np_unit_rgb_to_hsl', 'hsv_to_hsl', 'np_hsv_to_hsl',
    'unit_rgb_to_hsv', 'np_unit_rgb_to_hsv', 'hsl_to_hsv', 'np_hsl_to_hsv',
    'hsl_to_unit_rgb', 'np_hsl_to_unit_rgb', 'hsv_to_unit_rgb', 'np_hsv_to_unit_rgb',
    'unit_rgb_to_xyz', 'xyz_to_unit_rgb', 'xyz_to_lab', 'lab_to_xyz',
    'unit_rgb_to_lab', 'lab_to_unit_rgb', 'lab_in_gamut',
    'np_unit_rgb_to_xyz', 'np_xyz_to_unit_rgb', 'np_xyz_to_lab', 'np_lab_to_xyz',
    'np_unit_rgb_to_lab', 'np_lab_to_unit_rgb',
    'lab_to_lch', 'lch_to_lab', 'unit_rgb_to_lch', 'lch_to_unit_rgb',
    'np_lab_to_lch', 'np_lch_to_lab', 'np_unit_rgb_to_lch', 'np_lch_to_unit_rgb',
    'hex_to_rgb', 'rgb_to_hex', 'unit_rgb_to_hex',
    'convert', 'np_convert',
]
