from __future__ import annotations
from typing import Any, ClassVar, Dict, Tuple

import numpy as np

from ..types.format_type import PixelFormat, Precision, component_dtypes, format_channels
from ..types.color_types import Component
from ..conversions.numbers import np_convert_components
from ..pixels.pixel_base import PixelBase, pixel_class_for
from ..pixels.gray import GrayPixelBase, gray_class_for
from .buffer_base import PixelBuffer


class RGBABuffer(PixelBuffer):
    """Storage layout with r, g, b and a columns."""
    __slots__ = ()
    num_channels: ClassVar[int] = format_channels[PixelFormat.RGBA8]
    is_grayscale: ClassVar[bool] = False

    def native(self, index: int) -> PixelBase:
        return pixel_class_for(self.precision)(*self._data[index].tolist())

    def encode(self, value: Any) -> Tuple[Component, ...]:
        if isinstance(value, PixelBase) and value.precision == self.precision:
            return value.value
        return pixel_class_for(self.precision)(value).value

    def read_rgba(self, start: int, count: int, precision: Precision) -> np.ndarray:
        return np_convert_components(self._data[start:start + count], self.precision, precision)

    def write_rgba(self, start: int, block: np.ndarray, precision: Precision) -> None:
        block = np_convert_components(block, precision, self.precision)
        self._data[start:start + block.shape[0]] = block

    def read_gray(self, start: int, count: int, precision: Precision) -> np.ndarray:
        cls = gray_class_for(precision)
        return np.array(
            [cls(self.native(i)).value for i in range(start, start + count)],
            dtype=component_dtypes[precision],
        ).reshape(-1, 2)

    def write_gray(self, start: int, block: np.ndarray, precision: Precision) -> None:
        block = np_convert_components(block, precision, self.precision)
        self._data[start:start + block.shape[0]] = block[:, [0, 0, 0, 1]]


class GrayAlphaBuffer(PixelBuffer):
    """Storage layout with g and a columns; RGBA input is reduced to its CIE gray level."""
    __slots__ = ()
    num_channels: ClassVar[int] = format_channels[PixelFormat.GA8]
    is_grayscale: ClassVar[bool] = True

    def native(self, index: int) -> GrayPixelBase:
        return gray_class_for(self.precision)(*self._data[index].tolist())

    def encode(self, value: Any) -> Tuple[Component, ...]:
        if isinstance(value, GrayPixelBase) and value.precision == self.precision:
            return value.value
        return gray_class_for(self.precision)(value).value

    def read_rgba(self, start: int, count: int, precision: Precision) -> np.ndarray:
        block = np_convert_components(self._data[start:start + count], self.precision, precision)
        return block[:, [0, 0, 0, 1]]

    def write_rgba(self, start: int, block: np.ndarray, precision: Precision) -> None:
        cls = pixel_class_for(precision)
        for offset, row in enumerate(np.asarray(block).tolist()):
            self.set(start + offset, cls(*row))

    def read_gray(self, start: int, count: int, precision: Precision) -> np.ndarray:
        return np_convert_components(self._data[start:start + count], self.precision, precision)

    def write_gray(self, start: int, block: np.ndarray, precision: Precision) -> None:
        block = np_convert_components(block, precision, self.precision)
        self._data[start:start + block.shape[0]] = block


class RGBA8Buffer(RGBABuffer):
    __slots__ = ()
    pixel_format: ClassVar[PixelFormat] = PixelFormat.RGBA8
    precision: ClassVar[Precision] = Precision.BIT8


class RGBA16Buffer(RGBABuffer):
    __slots__ = ()
    pixel_format: ClassVar[PixelFormat] = PixelFormat.RGBA16
    precision: ClassVar[Precision] = Precision.BIT16


class RGBAFBuffer(RGBABuffer):
    __slots__ = ()
    pixel_format: ClassVar[PixelFormat] = PixelFormat.RGBAF
    precision: ClassVar[Precision] = Precision.FLOAT


class GA8Buffer(GrayAlphaBuffer):
    __slots__ = ()
    pixel_format: ClassVar[PixelFormat] = PixelFormat.GA8
    precision: ClassVar[Precision] = Precision.BIT8


class GA16Buffer(GrayAlphaBuffer):
    __slots__ = ()
    pixel_format: ClassVar[PixelFormat] = PixelFormat.GA16
    precision: ClassVar[Precision] = Precision.BIT16


class GAFBuffer(GrayAlphaBuffer):
    __slots__ = ()
    pixel_format: ClassVar[PixelFormat] = PixelFormat.GAF
    precision: ClassVar[Precision] = Precision.FLOAT


buffer_classes: Dict[PixelFormat, type[PixelBuffer]] = {
    cls.pixel_format: cls
    for cls in (GA8Buffer, GA16Buffer, GAFBuffer, RGBA8Buffer, RGBA16Buffer, RGBAFBuffer)
}


def create_buffer(pixel_format: PixelFormat, size: int, pixel: Any = None) -> PixelBuffer:
    """
    Allocate ``size`` pixels of ``pixel_format`` initialised to ``pixel``.

    ``pixel`` may be any pixel, gray pixel or color-space value; it is
    converted to the native representation once. Defaults to opaque black.
    """
    try:
        cls = buffer_classes[PixelFormat(pixel_format)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown pixel format: {pixel_format!r}") from None
    return cls(size, pixel)
