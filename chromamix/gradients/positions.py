from __future__ import annotations
import math
from typing import Optional, Sequence

from ..exceptions import InvalidParametersError, PositionCountMismatchError, PositionsNotAscendingError
from ..utils import round_half_up


def even_positions(count: int, digits: int = 2) -> list[float]:
    """
    Spread ``count`` stops evenly over [0, 100].

    A single stop sits in the middle.
    """
    if count <= 0:
        return []
    if count == 1:
        return [50.0]
    return [round_half_up(i * 100 / (count - 1), digits) for i in range(count)]


def validate_positions(positions: Sequence[float], count: int) -> list[float]:
    """
    Check explicit stop positions.

    Raises:
        PositionCountMismatchError: not one position per color
        PositionsNotAscendingError: a position does not exceed its predecessor
        InvalidParametersError: a position is outside [0, 100]
    """
    positions = [float(p) for p in positions]
    if len(positions) != count:
        raise PositionCountMismatchError(count, len(positions))
    for i, p in enumerate(positions):
        if not math.isfinite(p) or not 0 <= p <= 100:
            raise InvalidParametersError(
                "gradient", [{"loc": ("positions", i), "msg": "must be in [0, 100]", "input": p}]
            )
    for i in range(1, len(positions)):
        if positions[i] <= positions[i - 1]:
            raise PositionsNotAscendingError(positions, i)
    return positions


def resolve_positions(positions: Optional[Sequence[float]], count: int, digits: int = 2) -> list[float]:
    if positions is None:
        return even_positions(count, digits)
    return validate_positions(positions, count)


def quantized_stops(count: int, steps: int, digits: int = 2) -> list[tuple[int, float]]:
    """
    Hard-stop layout for a stepped gradient.

    Slot ``i`` of ``steps`` takes color index ``floor(i / (steps - 1) * (count - 1))``
    at position ``i * 100 / steps``, so the last color only appears in the
    last slot.

    Returns:
        list of (color_index, position)
    """
    if steps < 2:
        raise InvalidParametersError("gradient", [{"loc": ("steps",), "msg": "must be at least 2", "input": steps}])
    stops = []
    for i in range(steps):
        index = min(math.floor(i / (steps - 1) * (count - 1)), count - 1)
        stops.append((index, round_half_up(i * 100 / steps, digits)))
    return stops
