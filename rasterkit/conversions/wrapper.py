import numpy as np
from typing import Callable, Dict, Tuple

from ..types.color_types import ColorSpace, space_channels
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_xyz import unit_rgb_to_xyz, unit_rgb_to_yxy, np_unit_rgb_to_xyz, np_unit_rgb_to_yxy
from .to_cmyk import unit_rgb_to_cmy, unit_rgb_to_cmyk, np_unit_rgb_to_cmy, np_unit_rgb_to_cmyk
from .to_rgb import (
    hsv_to_unit_rgb, hsl_to_unit_rgb, xyz_to_unit_rgb, yxy_to_unit_rgb,
    cmy_to_unit_rgb, cmyk_to_unit_rgb,
    np_hsv_to_unit_rgb, np_hsl_to_unit_rgb, np_xyz_to_unit_rgb, np_yxy_to_unit_rgb,
    np_cmy_to_unit_rgb, np_cmyk_to_unit_rgb,
)

FROM_UNIT_RGB: Dict[ColorSpace, Callable[[float, float, float], Tuple[float, ...]]] = {
    ColorSpace.HSV: unit_rgb_to_hsv,
    ColorSpace.HSL: unit_rgb_to_hsl,
    ColorSpace.XYZ: unit_rgb_to_xyz,
    ColorSpace.YXY: unit_rgb_to_yxy,
    ColorSpace.CMY: unit_rgb_to_cmy,
    ColorSpace.CMYK: unit_rgb_to_cmyk,
}

TO_UNIT_RGB: Dict[ColorSpace, Callable[..., Tuple[float, float, float]]] = {
    ColorSpace.HSV: hsv_to_unit_rgb,
    ColorSpace.HSL: hsl_to_unit_rgb,
    ColorSpace.XYZ: xyz_to_unit_rgb,
    ColorSpace.YXY: yxy_to_unit_rgb,
    ColorSpace.CMY: cmy_to_unit_rgb,
    ColorSpace.CMYK: cmyk_to_unit_rgb,
}

NP_FROM_UNIT_RGB: Dict[ColorSpace, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ColorSpace.HSV: np_unit_rgb_to_hsv,
    ColorSpace.HSL: np_unit_rgb_to_hsl,
    ColorSpace.XYZ: np_unit_rgb_to_xyz,
    ColorSpace.YXY: np_unit_rgb_to_yxy,
    ColorSpace.CMY: np_unit_rgb_to_cmy,
    ColorSpace.CMYK: np_unit_rgb_to_cmyk,
}

NP_TO_UNIT_RGB: Dict[ColorSpace, Callable[..., np.ndarray]] = {
    ColorSpace.HSV: np_hsv_to_unit_rgb,
    ColorSpace.HSL: np_hsl_to_unit_rgb,
    ColorSpace.XYZ: np_xyz_to_unit_rgb,
    ColorSpace.YXY: np_yxy_to_unit_rgb,
    ColorSpace.CMY: np_cmy_to_unit_rgb,
    ColorSpace.CMYK: np_cmyk_to_unit_rgb,
}


def convert(rgb: Tuple[float, float, float], to_space: ColorSpace) -> Tuple[float, ...]:
    """Convert a unit RGB triple into the channels of ``to_space`` (alpha excluded)."""
    r, g, b = rgb
    return FROM_UNIT_RGB[ColorSpace(to_space)](r, g, b)


def convert_to_rgb(channels: Tuple[float, ...], from_space: ColorSpace) -> Tuple[float, float, float]:
    """Convert color-space channels (alpha excluded) back into unit RGB."""
    from_space = ColorSpace(from_space)
    if len(channels) != space_channels[from_space]:
        raise ValueError(f"{from_space.value} expects {space_channels[from_space]} channels, got {len(channels)}")
    return TO_UNIT_RGB[from_space](*channels)


def np_convert(rgb: np.ndarray, to_space: ColorSpace) -> np.ndarray:
    """
    Vectorized ``convert``.

    Args:
        rgb: array of shape (..., 3) or (..., 4); a trailing alpha column is
            carried through unchanged.
    """
    rgb = np.asarray(rgb, dtype=float)
    result = NP_FROM_UNIT_RGB[ColorSpace(to_space)](rgb[..., 0], rgb[..., 1], rgb[..., 2])
    if rgb.shape[-1] == 4:
        result = np.concatenate([result, rgb[..., 3:4]], axis=-1)
    return result


def np_convert_to_rgb(values: np.ndarray, from_space: ColorSpace) -> np.ndarray:
    """Vectorized ``convert_to_rgb``; an extra trailing alpha column is kept."""
    from_space = ColorSpace(from_space)
    values = np.asarray(values, dtype=float)
    n = space_channels[from_space]
    if values.shape[-1] not in (n, n + 1):
        raise ValueError(f"{from_space.value} expects {n} or {n + 1} channels, got shape {values.shape}")
    channels = [values[..., i] for i in range(n)]
    result = NP_TO_UNIT_RGB[from_space](*channels)
    if values.shape[-1] == n + 1:
        result = np.concatenate([result, values[..., n:]], axis=-1)
    return result
