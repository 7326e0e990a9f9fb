"""
Rasterkit I/O
=============

Glue between :class:`~rasterkit.image.Image` and PNG data. Decoding and
encoding are delegated to Pillow; this package only moves raw rows in and
out of images and maps codec failures onto a small error hierarchy.

>>> from rasterkit.io import load_image, save_image
>>> img = load_image("in.png")                       # doctest: +SKIP
>>> save_image(img, "out.png")                       # doctest: +SKIP
"""
from .errors import ImageIOError, CantOpenFileError, NotAContainerFileError, LibraryError
from .rows import ChannelLayout, RowData, image_from_rows, image_to_rows, file_format_for_layout
from .codec import decode_png, encode_png
from .files import (
    load_image, load_image_from_bytes,
    save_image, save_image_to_bytes, save_image_to_stream,
)

__all__ = [
    'ImageIOError',
    'CantOpenFileError',
    'NotAContainerFileError',
    'LibraryError',
    'ChannelLayout',
    'RowData',
    'image_from_rows',
    'image_to_rows',
    'file_format_for_layout',
    'decode_png',
    'encode_png',
    'load_image',
    'load_image_from_bytes',
    'save_image',
    'save_image_to_bytes',
    'save_image_to_stream',
]
