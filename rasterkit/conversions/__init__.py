"""
Rasterkit Numeric Conversions
=============================

Pure functions underneath the pixel model: component precision conversion,
the sRGB transfer curve and color-space conversions. Every scalar function
has an ``np_`` counterpart operating on numpy arrays.

Component precision
-------------------
    bit8_to_bit16(v)        v | (v << 8)
    bit16_to_bit8(v)        v >> 8
    int_to_unit(v, max)     v / max
    unit_to_int(v, max)     round-to-nearest, saturating
    convert_component(v, from_precision, to_precision)

Color spaces
------------
Conversions from unit RGB to HSV, HSL, XYZ, Yxy, CMY and CMYK (and back).
Hue, saturation, value and lightness are in [0, 1]; XYZ uses a white point
luminance of 100.

>>> from rasterkit.conversions import convert, ColorSpace
>>> convert((1.0, 0.0, 0.0), ColorSpace.HSV)
(0.0, 1.0, 1.0)
"""
from ..types.color_types import ColorSpace
from .numbers import (
    saturate, bit8_to_bit16, bit16_to_bit8, int_to_unit, unit_to_int,
    convert_component, np_unit_to_int, np_convert_components,
)
from .gamma import srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb
from .wrapper import convert, convert_to_rgb, np_convert, np_convert_to_rgb

__all__ = [
    'ColorSpace',
    'saturate',
    'bit8_to_bit16',
    'bit16_to_bit8',
    'int_to_unit',
    'unit_to_int',
    'convert_component',
    'np_unit_to_int',
    'np_convert_components',
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'convert',
    'convert_to_rgb',
    'np_convert',
    'np_convert_to_rgb',
]
