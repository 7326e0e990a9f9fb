"""
Rasterkit Pixel Buffers
=======================

Six concrete storage formats ({8-bit, 16-bit, float} x {gray+alpha, RGBA})
behind the single :class:`PixelBuffer` interface. Use :func:`create_buffer`
to allocate one by :class:`~rasterkit.types.format_type.PixelFormat`.

>>> from rasterkit.buffers import create_buffer
>>> from rasterkit import Pixel8, PixelFormat
>>> buf = create_buffer(PixelFormat.GA16, 4, Pixel8(255, 255, 255, 128))
>>> buf.get8(0)
Pixel8(255, 255, 255, 128)
"""
from .buffer_base import PixelBuffer
from .formats import (
    RGBABuffer, GrayAlphaBuffer,
    RGBA8Buffer, RGBA16Buffer, RGBAFBuffer, GA8Buffer, GA16Buffer, GAFBuffer,
    buffer_classes, create_buffer,
)

__all__ = [
    'PixelBuffer',
    'RGBABuffer',
    'GrayAlphaBuffer',
    'RGBA8Buffer',
    'RGBA16Buffer',
    'RGBAFBuffer',
    'GA8Buffer',
    'GA16Buffer',
    'GAFBuffer',
    'buffer_classes',
    'create_buffer',
]
