"""Load and save images as PNG files, byte strings or streams."""
from __future__ import annotations
import os
from typing import BinaryIO, Optional, Union

from ..types.format_type import FileFormat, PixelFormat, ReadConvert, WriteConvert
from ..image import Image
from .codec import decode_png, encode_png
from .errors import CantOpenFileError
from .rows import image_from_rows, image_to_rows

PathLike = Union[str, "os.PathLike[str]"]


def load_image_from_bytes(
    data: bytes,
    conversion: ReadConvert = ReadConvert.CLOSEST_MATCH,
    pixel_format: Optional[PixelFormat] = None,
) -> Image:
    width, height, bit_depth, layout, rows = decode_png(data)
    return image_from_rows(width, height, bit_depth, layout, rows, conversion, pixel_format)


def load_image(
    path: PathLike,
    conversion: ReadConvert = ReadConvert.CLOSEST_MATCH,
    pixel_format: Optional[PixelFormat] = None,
) -> Image:
    """
    Load a PNG file.

    Args:
        path: file to read.
        conversion: how the in-memory pixel format is chosen from the file's layout.
        pixel_format: explicit in-memory format, overriding ``conversion``.

    Raises:
        CantOpenFileError: the file could not be read.
        NotAContainerFileError: the file is not a PNG.
        LibraryError: the PNG data could not be decoded.
    """
    try:
        with open(path, "rb") as stream:
            data = stream.read()
    except OSError as exc:
        raise CantOpenFileError(os.fspath(path)) from exc
    return load_image_from_bytes(data, conversion, pixel_format)


def save_image_to_bytes(
    image: Image,
    conversion: WriteConvert = WriteConvert.CLOSEST_MATCH,
    file_format: Optional[FileFormat] = None,
) -> bytes:
    return encode_png(image_to_rows(image, file_format, conversion))


def save_image_to_stream(
    image: Image,
    stream: BinaryIO,
    conversion: WriteConvert = WriteConvert.CLOSEST_MATCH,
    file_format: Optional[FileFormat] = None,
) -> None:
    stream.write(save_image_to_bytes(image, conversion, file_format))


def save_image(
    image: Image,
    path: PathLike,
    conversion: WriteConvert = WriteConvert.CLOSEST_MATCH,
    file_format: Optional[FileFormat] = None,
) -> None:
    """Write ``image`` as a PNG file; the data is encoded before the file is opened."""
    data = save_image_to_bytes(image, conversion, file_format)
    try:
        with open(path, "wb") as stream:
            stream.write(data)
    except OSError as exc:
        raise CantOpenFileError(os.fspath(path)) from exc
