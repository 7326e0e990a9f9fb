"""
Image Module
============

:class:`Image` owns one :class:`~rasterkit.buffers.PixelBuffer` plus its
width and height, and implements the blit / drawing engine on top of it.

Coordinates outside the image are never an error: reads return the fully
transparent zero pixel and writes are ignored. An image with a zero
dimension owns no buffer at all and every operation on it is a no-op.
"""

from __future__ import annotations
from typing import Any, Callable, Optional

import numpy as np
from numpy import ndarray as NDArray

from .types.format_type import (
    FileFormat, PixelFormat, Precision,
    component_dtypes, format_precision, gray_formats, grayscale_formats, rgba_formats,
)
from .types.color_types import ColorSpace, space_channels
from .conversions.wrapper import np_convert, np_convert_to_rgb
from .pixels.pixel_base import PixelBase, pixel_class_for
from .pixels.pixel import Pixel8
from .pixels.gray import GrayPixelBase, gray_class_for
from .buffers import PixelBuffer, create_buffer


class Image:
    """
    Rectangular image stored in one of six pixel formats.

    Args:
        width, height: dimensions; a non-positive value creates an empty image.
        pixel: initial value of every pixel (any precision, default opaque black).
        pixel_format: storage format; defaults to the RGBA format matching
            the precision of ``pixel``.

    Examples:
        >>> img = Image(20, 20, Pixel8(62, 150, 200, 220))
        >>> patch = Image(10, 10, Pixel8(177, 122, 21, 150))
        >>> img.draw_image(5, 5, patch)
        >>> img.get8(5, 5)
        Pixel8(133, 132, 88, 241)
    """
    __slots__ = ('_width', '_height', '_buffer', '_file_format')

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        pixel: Any = None,
        pixel_format: Optional[PixelFormat] = None,
    ) -> None:
        self._width = 0
        self._height = 0
        self._buffer: Optional[PixelBuffer] = None
        self._file_format = FileFormat.NONE
        self.new_image(width, height, pixel, pixel_format)

    # ------------------ LIFECYCLE ------------------
    def new_image(
        self,
        width: int,
        height: int,
        pixel: Any = None,
        pixel_format: Optional[PixelFormat] = None,
    ) -> None:
        """Replace the contents with a ``width`` x ``height`` image filled with ``pixel``."""
        if pixel is None:
            pixel = Pixel8()
        if pixel_format is None:
            formats = gray_formats if isinstance(pixel, GrayPixelBase) else rgba_formats
            pixel_format = formats[getattr(pixel, 'precision', Precision.BIT8)]

        self.clear()
        if width <= 0 or height <= 0:
            return
        self._buffer = create_buffer(pixel_format, width * height, pixel)
        self._width = width
        self._height = height

    def clear(self) -> None:
        """Release the buffer; the image becomes empty."""
        self._buffer = None
        self._width = 0
        self._height = 0
        self._file_format = FileFormat.NONE

    def clone(self) -> Image:
        """Deep copy: the clone owns its own buffer."""
        other = Image()
        if self._buffer is not None:
            other._buffer = self._buffer.copy()
            other._width = self._width
            other._height = self._height
            other._file_format = self._file_format
        return other

    def __copy__(self) -> Image:
        return self.clone()

    def __deepcopy__(self, memo) -> Image:
        return self.clone()

    def swap(self, other: Image) -> None:
        """Exchange the contents of two images."""
        for name in self.__slots__:
            mine = getattr(self, name)
            setattr(self, name, getattr(other, name))
            setattr(other, name, mine)

    def move_from(self, other: Image) -> None:
        """Take over the buffer of ``other``, which is left empty."""
        if other is self:
            return
        self.clear()
        self.swap(other)

    # ------------------ INFORMATION ------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def is_empty(self) -> bool:
        return self._buffer is None

    @property
    def buffer(self) -> Optional[PixelBuffer]:
        return self._buffer

    @property
    def current_pixel_format(self) -> PixelFormat:
        if self._buffer is None:
            return PixelFormat.RGBA8
        return self._buffer.pixel_format

    @property
    def precision(self) -> Precision:
        return format_precision[self.current_pixel_format]

    @property
    def file_format(self) -> FileFormat:
        """Container format the image was loaded from (metadata only)."""
        return self._file_format if self._buffer is not None else FileFormat.NONE

    @file_format.setter
    def file_format(self, value: FileFormat) -> None:
        if self._buffer is not None:
            self._file_format = FileFormat(value)

    @property
    def is_grayscale(self) -> bool:
        return self.current_pixel_format in grayscale_formats

    @property
    def is_rgba(self) -> bool:
        return not self.is_grayscale

    @property
    def is_8bit(self) -> bool:
        return self.precision == Precision.BIT8

    @property
    def is_16bit(self) -> bool:
        return self.precision == Precision.BIT16

    @property
    def is_float(self) -> bool:
        return self.precision == Precision.FLOAT

    def all_pixels_opaque(self) -> bool:
        return self._buffer is None or self._buffer.all_pixels_opaque()

    def convert_to_pixel_format(self, pixel_format: PixelFormat) -> None:
        """Re-encode every pixel into ``pixel_format``, keeping the file format tag."""
        pixel_format = PixelFormat(pixel_format)
        if self._buffer is None or pixel_format == self._buffer.pixel_format:
            return
        converted = Image(self._width, self._height, Pixel8(), pixel_format)
        self._buffer.copy_all_to(converted._buffer)
        converted._file_format = self._file_format
        self.swap(converted)

    def __repr__(self) -> str:
        return (
            f"Image(width={self._width}, height={self._height}, "
            f"pixel_format={self.current_pixel_format.name})"
        )

    # ------------------ PIXEL ACCESS ------------------
    def _index(self, x: int, y: int) -> Optional[int]:
        if self._buffer is None or not (0 <= x < self._width and 0 <= y < self._height):
            return None
        return y * self._width + x

    def get(self, x: int, y: int, precision: Precision = Precision.BIT8) -> PixelBase:
        index = self._index(x, y)
        if index is None:
            return pixel_class_for(precision)(0, 0, 0, 0)
        return self._buffer.get(index, precision)

    def get8(self, x: int, y: int) -> PixelBase:
        return self.get(x, y, Precision.BIT8)

    def get16(self, x: int, y: int) -> PixelBase:
        return self.get(x, y, Precision.BIT16)

    def get_f(self, x: int, y: int) -> PixelBase:
        return self.get(x, y, Precision.FLOAT)

    def get_gray(self, x: int, y: int, precision: Precision = Precision.BIT8) -> GrayPixelBase:
        index = self._index(x, y)
        if index is None:
            return gray_class_for(precision)(0, 0)
        return self._buffer.get_gray(index, precision)

    def get_gray8(self, x: int, y: int) -> GrayPixelBase:
        return self.get_gray(x, y, Precision.BIT8)

    def get_gray16(self, x: int, y: int) -> GrayPixelBase:
        return self.get_gray(x, y, Precision.BIT16)

    def get_gray_f(self, x: int, y: int) -> GrayPixelBase:
        return self.get_gray(x, y, Precision.FLOAT)

    def set(self, x: int, y: int, pixel: Any) -> None:
        index = self._index(x, y)
        if index is not None:
            self._buffer.set(index, pixel)

    def draw_pixel(self, x: int, y: int, pixel: Any) -> None:
        """Blend ``pixel`` over the pixel at ``(x, y)``."""
        index = self._index(x, y)
        if index is not None:
            self._buffer.draw_line(index, 1, 1, pixel, blend=True)

    def fill(self, pixel: Any) -> None:
        if self._buffer is not None:
            self._buffer.fill(pixel)

    # ------------------ BLITTING ------------------
    def put_image(
        self,
        dest_x: int,
        dest_y: int,
        src: Image,
        src_x: int = 0,
        src_y: int = 0,
        src_width: Optional[int] = None,
        src_height: Optional[int] = None,
        blend: bool = False,
    ) -> None:
        """
        Copy (or blend) a sub-rectangle of ``src`` into this image at ``(dest_x, dest_y)``.

        The rectangle is first clipped against ``src`` (shifting the
        destination accordingly) and then against this image. Anything
        that ends up empty is silently skipped.
        """
        if src_width is None:
            src_width = src.width
        if src_height is None:
            src_height = src.height

        if (self._buffer is None or src._buffer is None
                or src_width <= 0 or src_height <= 0
                or src_x >= src.width or src_y >= src.height
                or src_x + src_width <= 0 or src_y + src_height <= 0):
            return

        # clip against the source image
        if src_x < 0:
            dest_x -= src_x
            src_width += src_x
            src_x = 0
        if src_y < 0:
            dest_y -= src_y
            src_height += src_y
            src_y = 0
        src_width = min(src_width, src.width - src_x)
        src_height = min(src_height, src.height - src_y)

        if (dest_x >= self._width or dest_y >= self._height
                or dest_x + src_width <= 0 or dest_y + src_height <= 0):
            return

        # clip against the destination image
        if dest_x < 0:
            src_x -= dest_x
            src_width += dest_x
            dest_x = 0
        if dest_y < 0:
            src_y -= dest_y
            src_height += dest_y
            dest_y = 0
        src_width = min(src_width, self._width - dest_x)
        src_height = min(src_height, self._height - dest_y)

        if src is self:
            src = self.clone()

        for line in range(src_height):
            src._buffer.copy_pixel_range(
                (src_y + line) * src.width + src_x,
                self._buffer,
                (dest_y + line) * self._width + dest_x,
                src_width,
                blend=blend,
            )

    def draw_image(
        self,
        dest_x: int,
        dest_y: int,
        src: Image,
        src_x: int = 0,
        src_y: int = 0,
        src_width: Optional[int] = None,
        src_height: Optional[int] = None,
    ) -> None:
        """Blend a sub-rectangle of ``src`` over this image."""
        self.put_image(dest_x, dest_y, src, src_x, src_y, src_width, src_height, blend=True)

    # ------------------ LINES AND RECTANGLES ------------------
    def _hor_line(self, x: int, y: int, length: int, pixel: Any, blend: bool) -> None:
        if self._buffer is None or length == 0 or y < 0 or y >= self._height:
            return
        if length < 0:
            length = -length
            x = x - length + 1
        if x >= self._width:
            return
        if x < 0:
            length += x
            x = 0
        if length <= 0:
            return
        length = min(length, self._width - x)
        self._buffer.draw_line(y * self._width + x, length, 1, pixel, blend=blend)

    def _vert_line(self, x: int, y: int, length: int, pixel: Any, blend: bool) -> None:
        if self._buffer is None or length == 0 or x < 0 or x >= self._width:
            return
        if length < 0:
            length = -length
            y = y - length + 1
        if y >= self._height:
            return
        if y < 0:
            length += y
            y = 0
        if length <= 0:
            return
        length = min(length, self._height - y)
        self._buffer.draw_line(y * self._width + x, length, self._width, pixel, blend=blend)

    def put_hor_line(self, x: int, y: int, length: int, pixel: Any) -> None:
        """Assign ``pixel`` to ``|length|`` pixels to the right of ``(x, y)`` (left when negative)."""
        self._hor_line(x, y, length, pixel, False)

    def draw_hor_line(self, x: int, y: int, length: int, pixel: Any) -> None:
        """Blend ``pixel`` over ``|length|`` pixels to the right of ``(x, y)`` (left when negative)."""
        self._hor_line(x, y, length, pixel, True)

    def put_vert_line(self, x: int, y: int, length: int, pixel: Any) -> None:
        self._vert_line(x, y, length, pixel, False)

    def draw_vert_line(self, x: int, y: int, length: int, pixel: Any) -> None:
        self._vert_line(x, y, length, pixel, True)

    def _rect(self, x: int, y: int, width: int, height: int, pixel: Any, filled: bool, blend: bool) -> None:
        if self._buffer is None or width == 0 or height == 0:
            return
        if width < 0:
            width = -width
            x = x - width + 1
        if height < 0:
            height = -height
            y = y - height + 1

        if filled:
            for row in range(y, y + height):
                self._hor_line(x, row, width, pixel, blend)
            return

        # each corner is touched once
        self._hor_line(x, y, width, pixel, blend)
        if height > 1:
            self._hor_line(x, y + height - 1, width, pixel, blend)
        if height > 2:
            self._vert_line(x, y + 1, height - 2, pixel, blend)
            if width > 1:
                self._vert_line(x + width - 1, y + 1, height - 2, pixel, blend)

    def put_rect(self, x: int, y: int, width: int, height: int, pixel: Any, filled: bool = True) -> None:
        """Assign ``pixel`` to a rectangle (or only its 1-pixel border)."""
        self._rect(x, y, width, height, pixel, filled, False)

    def draw_rect(self, x: int, y: int, width: int, height: int, pixel: Any, filled: bool = True) -> None:
        """Blend ``pixel`` over a rectangle (or only its 1-pixel border)."""
        self._rect(x, y, width, height, pixel, filled, True)

    # ------------------ CANVAS ------------------
    def resize_canvas(
        self,
        new_origin_x: int,
        new_origin_y: int,
        new_width: int,
        new_height: int,
        pixel: Any = None,
    ) -> None:
        """
        Change the canvas size without scaling.

        The old content keeps its pixels but moves to ``(-new_origin_x,
        -new_origin_y)`` in the new canvas; uncovered areas are filled with
        ``pixel`` (transparent black by default).
        """
        if self._buffer is None:
            return
        if (new_origin_x == 0 and new_origin_y == 0
                and new_width == self._width and new_height == self._height):
            return
        if pixel is None:
            pixel = Pixel8(0, 0, 0, 0)
        canvas = Image(new_width, new_height, pixel, self.current_pixel_format)
        canvas.put_image(-new_origin_x, -new_origin_y, self)
        canvas.file_format = self._file_format
        self.swap(canvas)

    # ------------------ WHOLE-IMAGE OPERATIONS ------------------
    def transform(
        self,
        func: Callable[[PixelBase], Any],
        dest: Optional[Image] = None,
        precision: Optional[Precision] = None,
    ) -> None:
        """
        Replace every pixel ``p`` with ``func(p)``.

        Pixels are handed to ``func`` in ``precision`` (the image's own by
        default). With ``dest`` the results go there instead; ``dest`` is
        re-created with this image's size and format first.
        """
        if self._buffer is None:
            if dest is not None:
                dest.clear()
            return
        if precision is None:
            precision = self.precision
        target = self
        if dest is not None and dest is not self:
            dest.new_image(self._width, self._height, Pixel8(), self.current_pixel_format)
            dest._file_format = self._file_format
            target = dest
        source = self._buffer
        for index in range(source.size):
            target._buffer.set(index, func(source.get(index, precision)))

    def premultiply_alpha(self) -> None:
        """Multiply the color channels of every pixel by its alpha."""
        self.transform(lambda p: p.premultiplied())

    def pixel_array(self, precision: Optional[Precision] = None) -> NDArray:
        """
        RGBA pixels as a new array of shape (height, width, 4).

        Components are in the storage dtype of ``precision`` (the image's own
        by default).
        """
        if precision is None:
            precision = self.precision
        if self._buffer is None:
            return np.zeros((0, 0, 4), dtype=component_dtypes[precision])
        block = self._buffer.read_rgba(0, self._buffer.size, precision)
        return block.reshape(self._height, self._width, 4)

    # ------------------ COLOR SPACES ------------------
    def color_space_array(self, space: ColorSpace) -> NDArray:
        """
        Every pixel converted to ``space``, shape (height, width, channels + 1).

        The last column is alpha. Fully transparent pixels convert to all-zero
        channels, as :meth:`ColorSpaceValue.from_pixel` does.
        """
        space = ColorSpace(space)
        width = space_channels[space] + 1
        if self._buffer is None:
            return np.zeros((0, 0, width))
        rgba = self._buffer.read_rgba(0, self._buffer.size, Precision.FLOAT)
        values = np_convert(rgba, space)
        values[rgba[:, 3] == 0] = 0.0
        return values.reshape(self._height, self._width, width)

    def set_color_space_array(self, space: ColorSpace, values: NDArray) -> None:
        """
        Store color-space values, one per pixel, converted back to this image's format.

        Raises:
            ValueError: ``values`` does not hold ``width * height`` entries of
                ``channels + 1`` components.
        """
        space = ColorSpace(space)
        if self._buffer is None:
            return
        width = space_channels[space] + 1
        values = np.asarray(values, dtype=float)
        if values.size != self._buffer.size * width:
            raise ValueError(
                f"expected {self._height}x{self._width}x{width} {space.value} values, got shape {values.shape}"
            )
        rgba = np_convert_to_rgb(values.reshape(-1, width), space)
        self._buffer.write_rgba(0, rgba, Precision.FLOAT)
