import math
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal, localcontext

from boundednumbers import clamp
from boundednumbers.functions import cyclic_wrap_float


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round with ties going toward positive infinity.

    Python's ``round`` rounds half to even, which turns 127.5 into 128 but
    126.5 into 126; channel values must round consistently. Rounding works on
    the shortest decimal form of ``value``, so 1.005 rounds to 1.01.
    """
    number = Decimal(repr(float(value)))
    if not number.is_finite():
        return float(value)
    mode = ROUND_HALF_UP if number >= 0 else ROUND_HALF_DOWN
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + digits + 2)
        rounded = number.quantize(Decimal(1).scaleb(-digits), rounding=mode)
    # -0.0 becomes 0.0
    return float(rounded) + 0.0


def round_channel(value: float) -> int:
    """Scale a unit float to an 8-bit channel, rounded half up and clamped."""
    return int(clamp(math.floor(value * 255 + 0.5), 0, 255))


def normalize_hue(h: float, digits: int | None = None) -> float:
    """
    Wrap a hue into ``[0, 360)``.

    When ``digits`` is given the hue is rounded first and wrapped again, so
    359.999 becomes 0 rather than 360.
    """
    h = cyclic_wrap_float(h, 0.0, 360.0)
    if digits is not None:
        h = cyclic_wrap_float(round_half_up(h, digits), 0.0, 360.0)
    # -0.0 % 360 stays -0.0
    return h + 0.0


def format_number(value: float, digits: int = 2) -> str:
    """Render a number without a trailing ``.0`` for integral values."""
    value = round_half_up(value, digits)
    if is_close_to_int(value):
        return str(int(round(value)))
    return f"{value:.{digits}f}".rstrip("0").rstrip(".")
