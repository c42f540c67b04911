from .blend import BlendMode, BLEND_FUNCTIONS, blend, blend_sequence, np_blend
from .weighted import WEIGHTED_MIXERS, hue_mean, mix_rgb, mix_hsl, mix_lab, mix_lch, weighted_mix
from .mix import mix, validate_weights, equal_weights

__all__ = [
    "BlendMode",
    "BLEND_FUNCTIONS",
    "blend",
    "blend_sequence",
    "np_blend",
    "WEIGHTED_MIXERS",
    "hue_mean",
    "mix_rgb",
    "mix_hsl",
    "mix_lab",
    "mix_lch",
    "weighted_mix",
    "mix",
    "validate_weights",
    "equal_weights",
]
