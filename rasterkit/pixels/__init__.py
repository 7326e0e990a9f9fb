"""
Rasterkit Pixel Values
======================

Immutable pixel values in three precisions sharing one arithmetic,
compositing and conversion model.

Classes
-------
    Pixel8, Pixel16, PixelF             r, g, b, a
    GrayPixel8, GrayPixel16, GrayPixelF g, a

>>> from rasterkit.pixels import Pixel8, Pixel16
>>> Pixel16(Pixel8(1, 2, 3))
Pixel16(257, 514, 771, 65535)
>>> Pixel8(62, 150, 200, 220).blended(Pixel8(177, 122, 21, 150))
Pixel8(133, 132, 88, 241)
>>> Pixel8(50, 100, 150, 100) + Pixel8(10, 20, 30, 200)
Pixel8(60, 120, 180, 150)
"""
from .pixel_base import PixelBase, pixel_class_for
from .pixel import Pixel8, Pixel16, PixelF, pixel_classes
from . import arithmetic  # noqa: F401  (installs operators)
from .arithmetic import FLOAT_MAX
from .blending import (
    blend, np_blend, average, interpolate, raw_interpolate, premultiply,
    gray_level, gray_level_cie,
)
from .gray import GrayPixelBase, GrayPixel8, GrayPixel16, GrayPixelF, gray_class_for, gray_classes

__all__ = [
    'PixelBase',
    'Pixel8',
    'Pixel16',
    'PixelF',
    'pixel_classes',
    'pixel_class_for',
    'FLOAT_MAX',
    'blend',
    'np_blend',
    'average',
    'interpolate',
    'raw_interpolate',
    'premultiply',
    'gray_level',
    'gray_level_cie',
    'GrayPixelBase',
    'GrayPixel8',
    'GrayPixel16',
    'GrayPixelF',
    'gray_class_for',
    'gray_classes',
]
