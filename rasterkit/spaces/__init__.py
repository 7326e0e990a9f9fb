"""
Rasterkit Color Spaces
======================

Transient color-space values (HSV, HSL, XYZ, Yxy, CMY, CMYK) converted to
and from the color channels of a pixel. Alpha travels along unchanged.

>>> from rasterkit import PixelF
>>> hsv = PixelF(0.25, 0.75, 0.5, 0.3).to_hsv()
>>> round(hsv.h, 4), round(hsv.s, 3), hsv.a
(0.4167, 0.667, 0.3)
>>> back = PixelF(hsv)  # PixelF(0.25, 0.75, 0.5, 0.3) up to rounding
"""
from .space_base import ColorSpaceValue
from .spaces import HSV, HSL, XYZ, YXY, CMY, CMYK, space_classes, pixel_to_color_space

__all__ = [
    'ColorSpaceValue',
    'HSV',
    'HSL',
    'XYZ',
    'YXY',
    'CMY',
    'CMYK',
    'space_classes',
    'pixel_to_color_space',
]
