import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .gamma import srgb_to_linear, np_srgb_to_linear

RGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
])


def unit_rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """CIE XYZ (D65, white Y = 100) from nonlinear sRGB in [0, 1]."""
    r = srgb_to_linear(r) * 100.0
    g = srgb_to_linear(g) * 100.0
    b = srgb_to_linear(b) * 100.0
    return (
        r * 0.4124 + g * 0.3576 + b * 0.1805,
        r * 0.2126 + g * 0.7152 + b * 0.0722,
        r * 0.0193 + g * 0.1192 + b * 0.9505,
    )


def xyz_to_yxy(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Returns (Y, x, y); a zero XYZ sum yields all zeros."""
    total = x + y + z
    if total == 0.0:
        return 0.0, 0.0, 0.0
    return y, x / total, y / total


def yxy_to_xyz(Y: float, x: float, y: float) -> Tuple[float, float, float]:
    if y == 0:
        return 0.0, 0.0, 0.0
    factor = Y / y
    return x * factor, Y, (1.0 - x - y) * factor


def unit_rgb_to_yxy(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return xyz_to_yxy(*unit_rgb_to_xyz(r, g, b))


def np_unit_rgb_to_xyz(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized unit RGB to XYZ; returns shape (..., 3)."""
    linear = np.stack([np_srgb_to_linear(r), np_srgb_to_linear(g), np_srgb_to_linear(b)], axis=-1) * 100.0
    return linear @ RGB_TO_XYZ.T


def np_xyz_to_yxy(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    z = np.asarray(z, dtype=float)
    total = x + y + z
    safe = np.where(total == 0.0, 1.0, total)
    zero = total == 0.0
    return np.stack([
        np.where(zero, 0.0, y),
        np.where(zero, 0.0, x / safe),
        np.where(zero, 0.0, y / safe),
    ], axis=-1)


def np_yxy_to_xyz(Y: NDArray, x: NDArray, y: NDArray) -> NDArray:
    Y = np.asarray(Y, dtype=float)
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    zero = y == 0
    factor = np.where(zero, 0.0, Y / np.where(zero, 1.0, y))
    return np.stack([
        x * factor,
        np.where(zero, 0.0, Y),
        (1.0 - x - y) * factor,
    ], axis=-1)


def np_unit_rgb_to_yxy(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    xyz = np_unit_rgb_to_xyz(r, g, b)
    return np_xyz_to_yxy(xyz[..., 0], xyz[..., 1], xyz[..., 2])
