import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .to_hsv import hue_from_extremes, np_hue_from_extremes


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert unit RGB to HSL with every component in [0, 1]."""
    var_min = min(r, g, b)
    var_max = max(r, g, b)
    delta = var_max - var_min
    l = (var_max + var_min) * 0.5
    if delta == 0:
        return 0.0, 0.0, l
    if l < 0.5:
        s = delta / (var_max + var_min)
    else:
        s = delta / (2.0 - var_max - var_min)
    return hue_from_extremes(r, g, b, var_max, delta), s, l


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized unit RGB to HSL; returns shape (..., 3)."""
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)
    var_max = np.maximum.reduce([r, g, b])
    var_min = np.minimum.reduce([r, g, b])
    delta = var_max - var_min
    l = (var_max + var_min) * 0.5
    denominator = np.where(l < 0.5, var_max + var_min, 2.0 - var_max - var_min)
    s = np.where(delta == 0, 0.0, delta / np.where(denominator == 0, 1.0, denominator))
    h = np_hue_from_extremes(r, g, b, var_max, delta)
    return np.stack([h, s, l], axis=-1)
