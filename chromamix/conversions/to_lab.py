"""
sRGB ↔ CIE XYZ ↔ CIE L*a*b* conversions.

All functions assume the sRGB primaries and the D65 reference white. RGB
values are unit floats; XYZ is scaled so that the white point has Y = 1.
"""
import numpy as np
from numpy import ndarray as NDArray

# D65 reference white
WHITE_X = 0.95047
WHITE_Y = 1.00000
WHITE_Z = 1.08883
WHITE_POINT = np.array([WHITE_X, WHITE_Y, WHITE_Z])

RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

# kept as the exact inverse of RGB_TO_XYZ
XYZ_TO_RGB = np.linalg.inv(RGB_TO_XYZ)

_DELTA = 6 / 29
_EPSILON = _DELTA ** 3


def _stack(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    z = np.asarray(z, dtype=float)
    out_shape = np.broadcast(x, y, z).shape
    return np.stack(
        [np.broadcast_to(x, out_shape), np.broadcast_to(y, out_shape), np.broadcast_to(z, out_shape)],
        axis=-1,
    )


def np_srgb_to_linear(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    return np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def np_linear_to_srgb(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    # negative linear values only occur out of gamut; keep the power real
    safe = np.maximum(c, 0.0031308)
    return np.where(c <= 0.0031308, c * 12.92, 1.055 * safe ** (1 / 2.4) - 0.055)


def _lab_f(t: NDArray) -> NDArray:
    return np.where(t > _EPSILON, np.cbrt(t), t / (3 * _DELTA ** 2) + 4 / 29)


def _lab_f_inv(t: NDArray) -> NDArray:
    return np.where(t > _DELTA, t ** 3, 3 * _DELTA ** 2 * (t - 4 / 29))


def np_unit_rgb_to_xyz(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: unit sRGB to XYZ. Returns array of shape (..., 3)."""
    linear = np_srgb_to_linear(_stack(r, g, b))
    return linear @ RGB_TO_XYZ.T


def np_xyz_to_unit_rgb(x: NDArray, y: NDArray, z: NDArray, clip: bool = True) -> NDArray:
    """
    Vectorized: XYZ to unit sRGB.

    Args:
        x, y, z: array-like or scalar tristimulus values
        clip: clamp the result into [0, 1]. Out-of-gamut colors otherwise
            produce channels outside the unit range.

    Returns:
        rgb: array of shape (..., 3)
    """
    linear = _stack(x, y, z) @ XYZ_TO_RGB.T
    rgb = np_linear_to_srgb(linear)
    return np.clip(rgb, 0, 1) if clip else rgb


def np_xyz_to_lab(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    """Vectorized: XYZ to L*a*b*. Returns array of shape (..., 3)."""
    xyz = _stack(x, y, z) / WHITE_POINT
    f = _lab_f(xyz)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def np_lab_to_xyz(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """Vectorized: L*a*b* to XYZ. Returns array of shape (..., 3)."""
    lab = _stack(l, a, b)
    fy = (lab[..., 0] + 16) / 116
    fx = fy + lab[..., 1] / 500
    fz = fy - lab[..., 2] / 200
    return _lab_f_inv(np.stack([fx, fy, fz], axis=-1)) * WHITE_POINT


def np_unit_rgb_to_lab(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: unit sRGB to L*a*b*.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        lab: array of shape (..., 3): (L [0,100], a, b)
    """
    xyz = np_unit_rgb_to_xyz(r, g, b)
    return np_xyz_to_lab(xyz[..., 0], xyz[..., 1], xyz[..., 2])


def np_lab_to_unit_rgb(l: NDArray, a: NDArray, b: NDArray, clip: bool = True) -> NDArray:
    """
    Vectorized: L*a*b* to unit sRGB.

    Args:
        l, a, b: array-like or scalar
        clip: clamp the result into [0, 1]

    Returns:
        rgb: array of shape (..., 3)
    """
    xyz = np_lab_to_xyz(l, a, b)
    return np_xyz_to_unit_rgb(xyz[..., 0], xyz[..., 1], xyz[..., 2], clip=clip)


def lab_in_gamut(l: float, a: float, b: float, tol: float = 1e-6) -> bool:
    """True when a LAB color maps inside the sRGB cube without clipping."""
    rgb = np_lab_to_unit_rgb(l, a, b, clip=False)
    return bool(np.all((rgb >= -tol) & (rgb <= 1 + tol)))


def unit_rgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    x, y, z = np_unit_rgb_to_xyz(r, g, b)
    return float(x), float(y), float(z)


def xyz_to_unit_rgb(x: float, y: float, z: float, clip: bool = True) -> tuple[float, float, float]:
    r, g, b = np_xyz_to_unit_rgb(x, y, z, clip=clip)
    return float(r), float(g), float(b)


def xyz_to_lab(x: float, y: float, z: float) -> tuple[float, float, float]:
    l, a, b = np_xyz_to_lab(x, y, z)
    return float(l), float(a), float(b)


def lab_to_xyz(l: float, a: float, b: float) -> tuple[float, float, float]:
    x, y, z = np_lab_to_xyz(l, a, b)
    return float(x), float(y), float(z)


def unit_rgb_to_lab(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit sRGB to L*a*b*.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (L [0,100], a, b)
    """
    l, a, b_ = np_unit_rgb_to_lab(r, g, b)
    return float(l), float(a), float(b_)


def lab_to_unit_rgb(l: float, a: float, b: float, clip: bool = True) -> tuple[float, float, float]:
    """
    Convert L*a*b* to unit sRGB.

    Args:
        l: Lightness in [0, 100]
        a: green-red axis
        b: blue-yellow axis
        clip: clamp out-of-gamut results into [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b)
    """
    r, g, b_ = np_lab_to_unit_rgb(l, a, b, clip=clip)
    return float(r), float(g), float(b_)
