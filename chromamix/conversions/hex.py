import re

from ..utils import round_channel

# the alpha forms need the leading "#"
HEX_PATTERN = re.compile(
    r"^(?:#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})|([0-9a-fA-F]{3}|[0-9a-fA-F]{6}))$"
)


def expand_hex(digits: str) -> str:
    """Expand 3/4-digit shorthand to 6/8 digits ("f80" -> "ff8800")."""
    if len(digits) in (3, 4):
        return "".join(ch * 2 for ch in digits)
    return digits


def hex_to_rgb(value: str) -> tuple[int, int, int, float]:
    """
    Parse a hex color.

    Accepts ``#rgb``, ``#rgba``, ``#rrggbb`` and ``#rrggbbaa``; the 3 and 6
    digit forms may also omit the leading ``#``.

    Returns:
        Tuple[int, int, int, float]: 8-bit channels and alpha in [0, 1]

    Raises:
        ValueError: if the string is not a hex color
    """
    match = HEX_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"Not a hex color: {value!r}")
    digits = expand_hex(match.group(1) or match.group(2)).lower()
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return r, g, b, alpha


def unit_rgb_to_hex(r: float, g: float, b: float, alpha: float = 1.0) -> str:
    """
    Encode unit RGB as lowercase hex.

    Alpha is appended as a fourth byte only when it is below 1.
    """
    channels = [round_channel(r), round_channel(g), round_channel(b)]
    if alpha < 1:
        channels.append(round_channel(alpha))
    return "#" + "".join(f"{c:02x}" for c in channels)


def rgb_to_hex(r: int, g: int, b: int, alpha: float = 1.0) -> str:
    """Encode 8-bit RGB as lowercase hex."""
    return unit_rgb_to_hex(r / 255, g / 255, b / 255, alpha)
