"""
Raw row contract between :class:`~rasterkit.image.Image` and a container codec.

A codec hands over (or receives) ``height`` rows, each a flat sequence of
``width * channels`` right-justified integers of ``bit_depth`` bits, in one
of four channel layouts.
"""
from __future__ import annotations
from enum import Enum
from typing import Iterable, Iterator, NamedTuple, Optional, Sequence

import numpy as np

from ..types.format_type import (
    FileFormat, PixelFormat, Precision, ReadConvert,
    file_bit_depths, file_format_for_write, is_grayscale_file_format,
    pixel_format_for_read, WriteConvert,
)
from ..pixels.pixel import Pixel8
from ..image import Image


class ChannelLayout(str, Enum):
    GRAY = "gray"
    GRAY_ALPHA = "gray_alpha"
    RGB = "rgb"
    RGBA = "rgba"


layout_channels = {
    ChannelLayout.GRAY: 1,
    ChannelLayout.GRAY_ALPHA: 2,
    ChannelLayout.RGB: 3,
    ChannelLayout.RGBA: 4,
}

depth_precision = {
    8: Precision.BIT8,
    16: Precision.BIT16,
}


class RowData(NamedTuple):
    width: int
    height: int
    bit_depth: int
    layout: ChannelLayout
    rows: Iterable[Sequence[int]]


def layout_has_alpha(layout: ChannelLayout) -> bool:
    return layout in (ChannelLayout.GRAY_ALPHA, ChannelLayout.RGBA)


def layout_is_gray(layout: ChannelLayout) -> bool:
    return layout in (ChannelLayout.GRAY, ChannelLayout.GRAY_ALPHA)


def file_format_for_layout(bit_depth: int, layout: ChannelLayout) -> FileFormat:
    if layout_is_gray(layout):
        return FileFormat.GA16 if bit_depth == 16 else FileFormat.GA8
    return FileFormat.RGBA16 if bit_depth == 16 else FileFormat.RGBA8


def _precision_for_depth(bit_depth: int) -> Precision:
    try:
        return depth_precision[bit_depth]
    except KeyError:
        raise ValueError(f"Unsupported bit depth: {bit_depth!r} (expected 8 or 16)") from None


def image_from_rows(
    width: int,
    height: int,
    bit_depth: int,
    layout: ChannelLayout,
    rows: Iterable[Sequence[int]],
    conversion: ReadConvert = ReadConvert.CLOSEST_MATCH,
    pixel_format: Optional[PixelFormat] = None,
) -> Image:
    """
    Build an image from decoded rows.

    The in-memory format is ``pixel_format`` when given, otherwise it is
    chosen from the container layout through ``conversion``. The image's
    file format tag records the container layout.
    """
    layout = ChannelLayout(layout)
    precision = _precision_for_depth(bit_depth)
    file_format = file_format_for_layout(bit_depth, layout)
    if pixel_format is None:
        pixel_format = pixel_format_for_read(conversion, file_format)

    image = Image(width, height, Pixel8(), pixel_format)
    if image.is_empty:
        return image

    channels = layout_channels[layout]
    maximum = (1 << bit_depth) - 1
    buffer = image.buffer
    for y, row in enumerate(rows):
        if y >= height:
            break
        block = np.asarray(row, dtype=np.int64)[:width * channels].reshape(width, channels)
        if not layout_has_alpha(layout):
            block = np.concatenate([block, np.full((width, 1), maximum, dtype=np.int64)], axis=1)
        if layout_is_gray(layout):
            buffer.write_gray(y * width, block, precision)
        else:
            buffer.write_rgba(y * width, block, precision)

    image.file_format = file_format
    return image


def image_to_rows(
    image: Image,
    file_format: Optional[FileFormat] = None,
    conversion: WriteConvert = WriteConvert.CLOSEST_MATCH,
) -> RowData:
    """
    Describe ``image`` as rows ready for a codec.

    ``file_format`` defaults to the one picked by ``conversion``. The alpha
    channel is left out when every pixel is opaque.
    """
    if file_format is None:
        file_format = file_format_for_write(conversion, image.file_format, image.current_pixel_format)
    file_format = FileFormat(file_format)
    if file_format == FileFormat.NONE:
        file_format = FileFormat.RGBA8

    bit_depth = file_bit_depths[file_format]
    gray = is_grayscale_file_format(file_format)
    keep_alpha = not image.all_pixels_opaque()
    if gray:
        layout = ChannelLayout.GRAY_ALPHA if keep_alpha else ChannelLayout.GRAY
    else:
        layout = ChannelLayout.RGBA if keep_alpha else ChannelLayout.RGB

    return RowData(
        image.width,
        image.height,
        bit_depth,
        layout,
        _iter_rows(image, depth_precision[bit_depth], gray, keep_alpha),
    )


def _iter_rows(image: Image, precision: Precision, gray: bool, keep_alpha: bool) -> Iterator[np.ndarray]:
    buffer = image.buffer
    width = image.width
    for y in range(image.height):
        if gray:
            block = buffer.read_gray(y * width, width, precision)
        else:
            block = buffer.read_rgba(y * width, width, precision)
        if not keep_alpha:
            block = block[:, :-1]
        yield block.reshape(-1)
