import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple


def hue_from_extremes(r: float, g: float, b: float, var_max: float, delta: float) -> float:
    """
    Hue in [0, 1) for a color whose channel maximum and max-min spread are known.

    The hue is taken from whichever channel holds the maximum.
    """
    d_r = (((var_max - r) / 6.0) + (delta * 0.5)) / delta
    d_g = (((var_max - g) / 6.0) + (delta * 0.5)) / delta
    d_b = (((var_max - b) / 6.0) + (delta * 0.5)) / delta
    if r == var_max:
        h = d_b - d_g
    elif g == var_max:
        h = (1.0 / 3.0) + d_r - d_b
    else:
        h = (2.0 / 3.0) + d_g - d_r
    h = math.fmod(h, 1.0)
    if h < 0.0:
        h += 1.0
    return h


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSV with every component in [0, 1].

    Gray inputs (no spread between channels) get hue and saturation 0.
    """
    var_min = min(r, g, b)
    var_max = max(r, g, b)
    delta = var_max - var_min
    if delta == 0:
        return 0.0, 0.0, var_max
    return hue_from_extremes(r, g, b, var_max, delta), delta / var_max, var_max


def np_hue_from_extremes(r: NDArray, g: NDArray, b: NDArray, var_max: NDArray, delta: NDArray) -> NDArray:
    """Vectorized hue in [0, 1); entries with zero spread get 0."""
    safe = np.where(delta == 0, 1.0, delta)
    d_r = (((var_max - r) / 6.0) + (delta * 0.5)) / safe
    d_g = (((var_max - g) / 6.0) + (delta * 0.5)) / safe
    d_b = (((var_max - b) / 6.0) + (delta * 0.5)) / safe
    h = np.where(
        r == var_max,
        d_b - d_g,
        np.where(g == var_max, (1.0 / 3.0) + d_r - d_b, (2.0 / 3.0) + d_g - d_r),
    )
    h = np.fmod(h, 1.0)
    h = np.where(h < 0.0, h + 1.0, h)
    return np.where(delta == 0, 0.0, h)


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized unit RGB to HSV.

    Returns:
        array of shape (..., 3) holding (h, s, v), all in [0, 1].
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)
    var_max = np.maximum.reduce([r, g, b])
    var_min = np.minimum.reduce([r, g, b])
    delta = var_max - var_min
    h = np_hue_from_extremes(r, g, b, var_max, delta)
    s = np.where(delta == 0, 0.0, delta / np.where(var_max == 0, 1.0, var_max))
    return np.stack([h, s, var_max], axis=-1)
