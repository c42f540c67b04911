from __future__ import annotations
import math
from enum import Enum
from typing import Callable, Dict, Sequence

import numpy as np

from ..utils import round_half_up


class Easing(str, Enum):
    LINEAR = "linear"
    EASE = "ease"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    BEZIER = "bezier"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_")
            for member in cls:
                if member.value == normalized:
                    return member
        return None


def _ease(t):
    return 0.25 * np.sin(t * math.pi - math.pi / 2) + 0.25 * t + 0.5


def _smoothstep(t):
    return t * t * (3 - 2 * t)


EASING_FUNCTIONS: Dict[Easing, Callable] = {
    Easing.LINEAR: lambda t: t,
    Easing.EASE: _ease,
    Easing.EASE_IN: lambda t: t * t,
    Easing.EASE_OUT: lambda t: 1 - (1 - t) ** 2,
    Easing.BEZIER: _smoothstep,
}


def ease(t, easing: Easing | str = Easing.LINEAR):
    """Apply an easing curve to ``t`` in [0, 1]; scalars and arrays both work."""
    fn = EASING_FUNCTIONS[Easing(easing)]
    if isinstance(t, np.ndarray):
        return fn(t)
    return float(fn(float(t)))


def ease_positions(positions: Sequence[float], easing: Easing | str, digits: int = 2) -> list[float]:
    """
    Remap interior stop positions through an easing curve.

    The first and last stops keep their positions. Interior positions are
    read as fractions of 100, eased, scaled back and rounded.
    """
    easing = Easing(easing)
    positions = list(positions)
    if easing == Easing.LINEAR or len(positions) <= 2:
        return positions
    eased = positions[:1]
    for p in positions[1:-1]:
        eased.append(round_half_up(ease(p / 100, easing) * 100, digits))
    eased.append(positions[-1])
    return eased
