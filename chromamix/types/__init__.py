from .color_types import (
    ColorSpace,
    HUE_SPACES,
    HUE_INDEX,
    RGBA,
    HSLA,
    HSVA,
    LAB,
    LCH,
    as_space,
    is_hue_space,
    element_to_array,
)

__all__ = [
    "ColorSpace",
    "HUE_SPACES",
    "HUE_INDEX",
    "RGBA",
    "HSLA",
    "HSVA",
    "LAB",
    "LCH",
    "as_space",
    "is_hue_space",
    "element_to_array",
]
