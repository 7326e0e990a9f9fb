"""Rasterkit: in-memory images in 8-bit, 16-bit and float precision."""

from .types.format_type import (
    Precision,
    PixelFormat,
    FileFormat,
    ReadConvert,
    WriteConvert,
    pixel_format_for_read,
    file_format_for_write,
)
from .types.color_types import ColorSpace
from .pixels import (
    PixelBase,
    Pixel8,
    Pixel16,
    PixelF,
    GrayPixelBase,
    GrayPixel8,
    GrayPixel16,
    GrayPixelF,
    blend,
    average,
    interpolate,
    raw_interpolate,
)
from .spaces import ColorSpaceValue, HSV, HSL, XYZ, YXY, CMY, CMYK
from .buffers import PixelBuffer, create_buffer
from .image import Image
from .sequence import ColorSequence, MappingType, SequenceEntry
from .io import (
    ImageIOError,
    CantOpenFileError,
    NotAContainerFileError,
    LibraryError,
    load_image,
    load_image_from_bytes,
    save_image,
    save_image_to_bytes,
    save_image_to_stream,
)

__all__ = [
    # formats
    "Precision",
    "PixelFormat",
    "FileFormat",
    "ReadConvert",
    "WriteConvert",
    "pixel_format_for_read",
    "file_format_for_write",
    "ColorSpace",
    # pixel values
    "PixelBase",
    "Pixel8",
    "Pixel16",
    "PixelF",
    "GrayPixelBase",
    "GrayPixel8",
    "GrayPixel16",
    "GrayPixelF",
    "blend",
    "average",
    "interpolate",
    "raw_interpolate",
    # color spaces
    "ColorSpaceValue",
    "HSV",
    "HSL",
    "XYZ",
    "YXY",
    "CMY",
    "CMYK",
    # storage and images
    "PixelBuffer",
    "create_buffer",
    "Image",
    "ColorSequence",
    "MappingType",
    "SequenceEntry",
    # io
    "ImageIOError",
    "CantOpenFileError",
    "NotAContainerFileError",
    "LibraryError",
    "load_image",
    "load_image_from_bytes",
    "save_image",
    "save_image_to_bytes",
    "save_image_to_stream",
]
