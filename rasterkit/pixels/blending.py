"""
Alpha compositing, averaging, interpolation and gray reduction.

Integer precisions use exact integer arithmetic with wide intermediates
(Python ints, or int64 in the vectorized paths); the float precision
computes directly. All functions here are pure.
"""
from __future__ import annotations
from typing import Sequence, Tuple

import numpy as np

from ..types.format_type import Precision, component_max
from ..types.color_types import Component
from ..conversions.numbers import saturate, unit_to_int
from ..conversions.gamma import srgb_to_linear, linear_to_srgb
from .pixel_base import PixelBase


# ---------------------------------------------------------------------------
# Porter-Duff "over"
# ---------------------------------------------------------------------------
def blend_channels(
    dest_colors: Sequence[Component],
    dest_a: Component,
    src_colors: Sequence[Component],
    src_a: Component,
    precision: Precision,
) -> Tuple[Tuple[Component, ...], Component]:
    """
    Composite ``src`` over ``dest`` for any number of color channels.

    Returns:
        (blended color channels, blended alpha)
    """
    if precision == Precision.FLOAT:
        blended_a = src_a + dest_a * (1.0 - src_a)
        if blended_a == 0.0:
            return tuple(0.0 for _ in dest_colors), blended_a
        colors = tuple(
            (sc * src_a + dc * dest_a * (1.0 - src_a)) / blended_a
            for dc, sc in zip(dest_colors, src_colors)
        )
        return colors, blended_a

    maximum = component_max[precision]
    blended_a = src_a + (dest_a * (maximum - src_a) + maximum // 2) // maximum
    if blended_a == 0:
        return tuple(0 for _ in dest_colors), 0
    colors = tuple(
        (sc * src_a * maximum + dc * dest_a * (maximum - src_a)) // blended_a // maximum
        for dc, sc in zip(dest_colors, src_colors)
    )
    return colors, blended_a


def blend(dest: PixelBase, src: PixelBase) -> PixelBase:
    """Draw ``src`` over ``dest``; the result has the precision of ``dest``."""
    src = src.convert(dest.precision)
    colors, a = blend_channels(dest.color, dest.a, src.color, src.a, dest.precision)
    return dest.__class__(*colors, a)


def np_blend(dest: np.ndarray, src: np.ndarray, precision: Precision) -> np.ndarray:
    """
    Vectorized ``blend`` over rows of pixels whose last column is alpha.

    Args:
        dest: array of shape (n, channels) in the storage dtype of ``precision``.
        src: array of shape (n, channels) or (channels,) in the same precision.

    Returns:
        array of shape (n, channels) in the storage dtype.
    """
    if precision == Precision.FLOAT:
        dest = np.asarray(dest, dtype=np.float64)
        src = np.broadcast_to(np.asarray(src, dtype=np.float64), dest.shape)
        dest_a = dest[:, -1:]
        src_a = src[:, -1:]
        blended_a = src_a + dest_a * (1.0 - src_a)
        empty = blended_a == 0.0
        colors = (src[:, :-1] * src_a + dest[:, :-1] * dest_a * (1.0 - src_a)) / np.where(empty, 1.0, blended_a)
        colors = np.where(empty, 0.0, colors)
        return np.concatenate([colors, blended_a], axis=1)

    maximum = component_max[precision]
    dest64 = np.asarray(dest, dtype=np.int64)
    src64 = np.broadcast_to(np.asarray(src, dtype=np.int64), dest64.shape)
    dest_a = dest64[:, -1:]
    src_a = src64[:, -1:]
    blended_a = src_a + (dest_a * (maximum - src_a) + maximum // 2) // maximum
    empty = blended_a == 0
    numerator = src64[:, :-1] * src_a * maximum + dest64[:, :-1] * dest_a * (maximum - src_a)
    colors = numerator // np.where(empty, 1, blended_a) // maximum
    colors = np.where(empty, 0, colors)
    result = np.concatenate([colors, blended_a], axis=1)
    return result.astype(dest.dtype)


# ---------------------------------------------------------------------------
# Averaging
# ---------------------------------------------------------------------------
def average(first: PixelBase, *rest: PixelBase) -> PixelBase:
    """
    Alpha-weighted mean of one or more pixels.

    Colors are weighted by alpha; the result alpha is the plain mean of the
    alphas. If every alpha is zero the result is the zero pixel.
    """
    cls = first.__class__
    pixels = [first] + [p.convert(first.precision) for p in rest]
    count = len(pixels)
    if cls._type is float:
        sum_a = sum(p.a for p in pixels)
        if sum_a == 0:
            return cls(0.0, 0.0, 0.0, 0.0)
        # normalised weights keep average(p, p) == p exact
        weights = [p.a / sum_a for p in pixels]
        return cls(
            *(sum(p.value[i] * w for p, w in zip(pixels, weights)) for i in range(3)),
            sum_a / count,
        )

    sums = [0, 0, 0]
    sum_a = 0
    for p in pixels:
        a = p.a
        sums[0] += p.r * a
        sums[1] += p.g * a
        sums[2] += p.b * a
        sum_a += a

    if sum_a == 0:
        return cls(0, 0, 0, 0)
    return cls(
        *((s + sum_a // 2) // sum_a for s in sums),
        (sum_a + count // 2) // count,
    )


# ---------------------------------------------------------------------------
# Interpolation
# ---------------------------------------------------------------------------
def _weights(pixel: PixelBase, factor: Component) -> Tuple[Component, Component]:
    if pixel._type is float:
        factor = float(factor)
        return 1.0 - factor, factor
    factor = saturate(int(factor), pixel.maximum)
    return pixel.maximum - factor, factor


def raw_interpolate(p1: PixelBase, p2: PixelBase, factor: Component) -> PixelBase:
    """
    Linear interpolation of every channel, alpha included, ignoring alpha weighting.

    ``factor`` runs from 0 (``p1``) to the precision's maximum (``p2``): 0..255,
    0..65535 or 0.0..1.0.
    """
    p2 = p2.convert(p1.precision)
    w1, w2 = _weights(p1, factor)
    if p1._type is float:
        return p1.__class__(*(c1 * w1 + c2 * w2 for c1, c2 in zip(p1, p2)))
    m = p1.maximum
    return p1.__class__(*((c1 * w1 + c2 * w2) // m for c1, c2 in zip(p1, p2)))


def interpolate(p1: PixelBase, p2: PixelBase, factor: Component) -> PixelBase:
    """
    Alpha-aware interpolation: colors are weighted by their alpha and
    un-premultiplied by the interpolated alpha.
    """
    p2 = p2.convert(p1.precision)
    if p1.a == p2.a:
        return raw_interpolate(p1, p2, factor)
    w1, w2 = _weights(p1, factor)
    cls = p1.__class__
    sum_a = p1.a * w1 + p2.a * w2
    if sum_a == 0:
        return cls(0, 0, 0, 0)
    if cls._type is float:
        return cls(
            *((c1 * p1.a * w1 + c2 * p2.a * w2) / sum_a for c1, c2 in zip(p1.color, p2.color)),
            sum_a,
        )
    return cls(
        *((c1 * p1.a * w1 + c2 * p2.a * w2) // sum_a for c1, c2 in zip(p1.color, p2.color)),
        sum_a // p1.maximum,
    )


# ---------------------------------------------------------------------------
# Premultiplication and gray levels
# ---------------------------------------------------------------------------
def premultiply(pixel: PixelBase) -> PixelBase:
    a = pixel.a
    if pixel._type is float:
        return pixel.__class__(*(c * a for c in pixel.color), a)
    m = pixel.maximum
    return pixel.__class__(*((c * a + m // 2) // m for c in pixel.color), a)


def gray_level(pixel: PixelBase, r_weight: Component = 30, g_weight: Component = 59,
               b_weight: Component = 11) -> Component:
    """Weighted mean of the color channels (0 when the weights sum to 0)."""
    total = r_weight + g_weight + b_weight
    if pixel._type is float:
        if total == 0:
            return 0.0
        return (pixel.r * r_weight + pixel.g * g_weight + pixel.b * b_weight) / total
    if total == 0:
        return 0
    return (pixel.r * r_weight + pixel.g * g_weight + pixel.b * b_weight + total // 2) // total


def unit_gray_cie(pixel: PixelBase) -> float:
    """Perceptual gray level (CIE luminance through the sRGB curve) as a unit float."""
    r, g, b, _ = pixel.to_pixel_f().value
    y_linear = srgb_to_linear(r) * 0.2126 + srgb_to_linear(g) * 0.7152 + srgb_to_linear(b) * 0.0722
    return linear_to_srgb(y_linear)


def gray_level_cie(pixel: PixelBase) -> Component:
    level = unit_gray_cie(pixel)
    if pixel._type is float:
        return level
    return unit_to_int(level, pixel.maximum)


# ---------------------------------------------------------------------------
# Method injection
# ---------------------------------------------------------------------------
def _blended(self: PixelBase, src: PixelBase) -> PixelBase:
    return blend(self, src)


def _averaged_with(self: PixelBase, *others: PixelBase) -> PixelBase:
    return average(self, *others)


def _interpolated(self: PixelBase, other: PixelBase, factor: Component, alpha_aware: bool = True) -> PixelBase:
    if alpha_aware:
        return interpolate(self, other, factor)
    return raw_interpolate(self, other, factor)


def _raw_interpolated(self: PixelBase, other: PixelBase, factor: Component) -> PixelBase:
    return raw_interpolate(self, other, factor)


def _gray_pixel(self: PixelBase, r_weight: Component = 30, g_weight: Component = 59,
                b_weight: Component = 11) -> PixelBase:
    level = gray_level(self, r_weight, g_weight, b_weight)
    return self.__class__(level, self.a)


def _gray_cie_pixel(self: PixelBase) -> PixelBase:
    return self.__class__(gray_level_cie(self), self.a)


PixelBase.blended = _blended
PixelBase.averaged_with = _averaged_with
PixelBase.interpolated = _interpolated
PixelBase.raw_interpolated = _raw_interpolated
PixelBase.premultiplied = premultiply
PixelBase.to_gray = gray_level
PixelBase.to_gray_cie = gray_level_cie
PixelBase.gray_pixel = _gray_pixel
PixelBase.gray_cie_pixel = _gray_cie_pixel
