import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .gamma import linear_to_srgb, np_linear_to_srgb
from .to_xyz import yxy_to_xyz, np_yxy_to_xyz
from .to_cmyk import cmyk_to_cmy

XYZ_TO_RGB = np.array([
    [3.2406, -1.5372, -0.4986],
    [-0.9689, 1.8758, 0.0415],
    [0.0557, -0.2040, 1.0570],
])


def _wrap_unit(h: float) -> float:
    h = math.fmod(h, 1.0)
    if h < 0.0:
        h += 1.0
    return h


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Inverse of ``unit_rgb_to_hsv``; hue outside [0, 1) wraps around."""
    if s == 0:
        return v, v, v
    var_h = _wrap_unit(h) * 6.0
    if var_h == 6.0:
        var_h = 0.0
    var_i = int(var_h)
    var_1 = v * (1.0 - s)
    var_2 = v * (1.0 - s * (var_h - var_i))
    var_3 = v * (1.0 - s * (1.0 - (var_h - var_i)))
    if var_i == 0:
        return v, var_3, var_1
    if var_i == 1:
        return var_2, v, var_1
    if var_i == 2:
        return var_1, v, var_3
    if var_i == 3:
        return var_1, var_2, v
    if var_i == 4:
        return var_3, var_1, v
    return v, var_1, var_2


def _hue_to_channel(v1: float, v2: float, vh: float) -> float:
    if vh < 0.0:
        vh += 1.0
    elif vh > 1.0:
        vh -= 1.0
    if 6.0 * vh < 1.0:
        return v1 + (v2 - v1) * 6.0 * vh
    if 2.0 * vh < 1.0:
        return v2
    if 3.0 * vh < 2.0:
        return v1 + (v2 - v1) * ((2.0 / 3.0) - vh) * 6.0
    return v1


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    if s == 0:
        return l, l, l
    h = _wrap_unit(h)
    var_2 = l * (1.0 + s) if l < 0.5 else l + s - s * l
    var_1 = 2.0 * l - var_2
    return (
        _hue_to_channel(var_1, var_2, h + (1.0 / 3.0)),
        _hue_to_channel(var_1, var_2, h),
        _hue_to_channel(var_1, var_2, h - (1.0 / 3.0)),
    )


def xyz_to_unit_rgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    x /= 100.0
    y /= 100.0
    z /= 100.0
    return (
        linear_to_srgb(x * 3.2406 + y * -1.5372 + z * -0.4986),
        linear_to_srgb(x * -0.9689 + y * 1.8758 + z * 0.0415),
        linear_to_srgb(x * 0.0557 + y * -0.2040 + z * 1.0570),
    )


def yxy_to_unit_rgb(Y: float, x: float, y: float) -> Tuple[float, float, float]:
    if y == 0:
        return 0.0, 0.0, 0.0
    return xyz_to_unit_rgb(*yxy_to_xyz(Y, x, y))


def cmy_to_unit_rgb(c: float, m: float, y: float) -> Tuple[float, float, float]:
    return 1.0 - c, 1.0 - m, 1.0 - y


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    return cmy_to_unit_rgb(*cmyk_to_cmy(c, m, y, k))


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized HSV (all in [0, 1]) to unit RGB; returns shape (..., 3)."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)
    h, s, v = np.broadcast_arrays(h, s, v)
    h = np.fmod(h, 1.0)
    h = np.where(h < 0.0, h + 1.0, h)
    var_h = h * 6.0
    var_h = np.where(var_h == 6.0, 0.0, var_h)
    var_i = var_h.astype(int)
    frac = var_h - var_i
    var_1 = v * (1.0 - s)
    var_2 = v * (1.0 - s * frac)
    var_3 = v * (1.0 - s * (1.0 - frac))
    choices_r = [v, var_2, var_1, var_1, var_3, v]
    choices_g = [var_3, v, v, var_2, var_1, var_1]
    choices_b = [var_1, var_1, var_3, v, v, var_2]
    index = np.clip(var_i, 0, 5)
    r = np.choose(index, choices_r)
    g = np.choose(index, choices_g)
    b = np.choose(index, choices_b)
    gray = s == 0
    return np.stack([
        np.where(gray, v, r),
        np.where(gray, v, g),
        np.where(gray, v, b),
    ], axis=-1)


def _np_hue_to_channel(v1: NDArray, v2: NDArray, vh: NDArray) -> NDArray:
    vh = np.where(vh < 0.0, vh + 1.0, np.where(vh > 1.0, vh - 1.0, vh))
    return np.where(
        6.0 * vh < 1.0,
        v1 + (v2 - v1) * 6.0 * vh,
        np.where(
            2.0 * vh < 1.0,
            v2,
            np.where(3.0 * vh < 2.0, v1 + (v2 - v1) * ((2.0 / 3.0) - vh) * 6.0, v1),
        ),
    )


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized HSL (all in [0, 1]) to unit RGB; returns shape (..., 3)."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)
    h, s, l = np.broadcast_arrays(h, s, l)
    h = np.fmod(h, 1.0)
    h = np.where(h < 0.0, h + 1.0, h)
    var_2 = np.where(l < 0.5, l * (1.0 + s), l + s - s * l)
    var_1 = 2.0 * l - var_2
    r = _np_hue_to_channel(var_1, var_2, h + (1.0 / 3.0))
    g = _np_hue_to_channel(var_1, var_2, h)
    b = _np_hue_to_channel(var_1, var_2, h - (1.0 / 3.0))
    gray = s == 0
    return np.stack([
        np.where(gray, l, r),
        np.where(gray, l, g),
        np.where(gray, l, b),
    ], axis=-1)


def np_xyz_to_unit_rgb(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    xyz = np.stack([np.asarray(x, float), np.asarray(y, float), np.asarray(z, float)], axis=-1) / 100.0
    return np_linear_to_srgb(xyz @ XYZ_TO_RGB.T)


def np_yxy_to_unit_rgb(Y: NDArray, x: NDArray, y: NDArray) -> NDArray:
    xyz = np_yxy_to_xyz(Y, x, y)
    return np_xyz_to_unit_rgb(xyz[..., 0], xyz[..., 1], xyz[..., 2])


def np_cmy_to_unit_rgb(c: NDArray, m: NDArray, y: NDArray) -> NDArray:
    return 1.0 - np.stack([np.asarray(c, float), np.asarray(m, float), np.asarray(y, float)], axis=-1)


def np_cmyk_to_unit_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    k = np.asarray(k, dtype=float)
    inv_k = 1.0 - k
    cmy = np.stack([
        np.asarray(c, float) * inv_k + k,
        np.asarray(m, float) * inv_k + k,
        np.asarray(y, float) * inv_k + k,
    ], axis=-1)
    return 1.0 - cmy
