import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple


def unit_rgb_to_cmy(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return 1.0 - r, 1.0 - g, 1.0 - b


def cmy_to_cmyk(c: float, m: float, y: float) -> Tuple[float, float, float, float]:
    """Extract the common black component; pure black gives C = M = Y = 0."""
    k = min(1.0, c, m, y)
    if k == 1.0:
        return 0.0, 0.0, 0.0, 1.0
    inv_k = 1.0 - k
    return (c - k) / inv_k, (m - k) / inv_k, (y - k) / inv_k, k


def cmyk_to_cmy(c: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    inv_k = 1.0 - k
    return c * inv_k + k, m * inv_k + k, y * inv_k + k


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    return cmy_to_cmyk(*unit_rgb_to_cmy(r, g, b))


def np_unit_rgb_to_cmy(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    return 1.0 - np.stack([np.asarray(r, float), np.asarray(g, float), np.asarray(b, float)], axis=-1)


def np_unit_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized unit RGB to CMYK; returns shape (..., 4)."""
    cmy = np_unit_rgb_to_cmy(r, g, b)
    k = np.minimum(cmy.min(axis=-1), 1.0)
    black = k == 1.0
    inv_k = np.where(black, 1.0, 1.0 - k)[..., np.newaxis]
    rest = np.where(black[..., np.newaxis], 0.0, (cmy - k[..., np.newaxis]) / inv_k)
    return np.concatenate([rest, k[..., np.newaxis]], axis=-1)
