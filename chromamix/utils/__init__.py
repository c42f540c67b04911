from .num_utils import (
    is_close_to_int,
    round_half_up,
    round_channel,
    normalize_hue,
    format_number,
)

__all__ = [
    "is_close_to_int",
    "round_half_up",
    "round_channel",
    "normalize_hue",
    "format_number",
]
