from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Tuple

import numpy as np

from ..types.format_type import PixelFormat, Precision, component_max, component_dtypes
from ..types.color_types import Component
from ..pixels.pixel_base import PixelBase, pixel_class_for
from ..pixels.pixel import Pixel8
from ..pixels.gray import GrayPixelBase, gray_class_for
from ..pixels.blending import np_blend


class PixelBuffer(ABC):
    """
    Flat, index-addressed pixel storage in exactly one pixel format.

    Pixels live in a numpy array of shape ``(size, channels)``. Every public
    operation is format-agnostic: values are converted to and from the
    native representation on the fly, so callers never need to know which
    of the six concrete buffers they hold.
    """
    __slots__ = ('_data',)

    pixel_format: ClassVar[PixelFormat]
    precision: ClassVar[Precision]
    num_channels: ClassVar[int]
    is_grayscale: ClassVar[bool]

    def __init__(self, size: int, pixel: Any = None) -> None:
        self._data = np.empty((max(0, size), self.num_channels), dtype=self.dtype())
        self.fill(Pixel8() if pixel is None else pixel)

    @classmethod
    def dtype(cls) -> type:
        return component_dtypes[cls.precision]

    @classmethod
    def maximum(cls) -> Component:
        return component_max[cls.precision]

    @classmethod
    def _from_array(cls, data: np.ndarray) -> PixelBuffer:
        buffer = cls.__new__(cls)
        buffer._data = data
        return buffer

    def __len__(self) -> int:
        return self._data.shape[0]

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def copy(self) -> PixelBuffer:
        """Deep copy holding its own storage."""
        return self._from_array(self._data.copy())

    def to_array(self) -> np.ndarray:
        """Copy of the native storage, shape ``(size, channels)``."""
        return self._data.copy()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self.size})"

    # ------------------ LAYOUT SPECIFIC ------------------
    @abstractmethod
    def native(self, index: int) -> Any:
        """The stored value at ``index`` as a pixel of the native class."""

    @abstractmethod
    def encode(self, value: Any) -> Tuple[Component, ...]:
        """Native component tuple for any pixel, gray pixel or color-space value."""

    @abstractmethod
    def read_rgba(self, start: int, count: int, precision: Precision) -> np.ndarray:
        """``count`` pixels as an RGBA array in ``precision``'s storage dtype."""

    @abstractmethod
    def write_rgba(self, start: int, block: np.ndarray, precision: Precision) -> None:
        """Store an RGBA array expressed in ``precision``."""

    @abstractmethod
    def read_gray(self, start: int, count: int, precision: Precision) -> np.ndarray:
        """``count`` pixels as a gray+alpha array in ``precision``'s storage dtype."""

    @abstractmethod
    def write_gray(self, start: int, block: np.ndarray, precision: Precision) -> None:
        """Store a gray+alpha array expressed in ``precision``."""

    # ------------------ ACCESS ------------------
    def get(self, index: int, precision: Precision = Precision.BIT8) -> PixelBase:
        return pixel_class_for(precision)(self.native(index))

    def get8(self, index: int) -> PixelBase:
        return self.get(index, Precision.BIT8)

    def get16(self, index: int) -> PixelBase:
        return self.get(index, Precision.BIT16)

    def get_f(self, index: int) -> PixelBase:
        return self.get(index, Precision.FLOAT)

    def get_gray(self, index: int, precision: Precision = Precision.BIT8) -> GrayPixelBase:
        return gray_class_for(precision)(self.native(index))

    def get_gray8(self, index: int) -> GrayPixelBase:
        return self.get_gray(index, Precision.BIT8)

    def get_gray16(self, index: int) -> GrayPixelBase:
        return self.get_gray(index, Precision.BIT16)

    def get_gray_f(self, index: int) -> GrayPixelBase:
        return self.get_gray(index, Precision.FLOAT)

    def set(self, index: int, value: Any) -> None:
        self._data[index] = self.encode(value)

    def fill(self, value: Any) -> None:
        self._data[:] = self.encode(value)

    def all_pixels_opaque(self) -> bool:
        """True when every alpha is at the maximum (``>= 1.0`` for float storage)."""
        return bool(np.all(self._data[:, -1] >= self.maximum()))

    # ------------------ BULK OPERATIONS ------------------
    def copy_pixel_range(
        self,
        src_start: int,
        dest: PixelBuffer,
        dest_start: int,
        count: int,
        blend: bool = False,
    ) -> None:
        """
        Copy or blend ``count`` consecutive pixels into ``dest``.

        Without blending each source pixel is assigned to ``dest`` as if by
        ``dest.set``. With blending the destination pixel, read in the
        destination's precision, is composited with the source pixel read
        in that same precision.
        """
        if count <= 0:
            return
        dest_precision = dest.precision

        if blend:
            if dest.is_grayscale:
                for i in range(count):
                    under = dest.get(dest_start + i, dest_precision)
                    over = self.get(src_start + i, dest_precision)
                    dest.set(dest_start + i, under.blended(over))
                return
            over = self.read_rgba(src_start, count, dest_precision)
            under = dest._data[dest_start:dest_start + count]
            dest._data[dest_start:dest_start + count] = np_blend(under, over, dest_precision)
            return

        if dest.is_grayscale and self.is_grayscale:
            dest.write_gray(dest_start, self.read_gray(src_start, count, dest_precision), dest_precision)
        elif dest.is_grayscale:
            for i in range(count):
                dest.set(dest_start + i, self.native(src_start + i))
        else:
            dest.write_rgba(dest_start, self.read_rgba(src_start, count, dest_precision), dest_precision)

    def copy_all_to(self, dest: PixelBuffer) -> None:
        """Assign every pixel to ``dest`` (which must be at least as large)."""
        self.copy_pixel_range(0, dest, 0, self.size)

    def draw_line(self, start: int, count: int, step: int, value: Any, blend: bool = True) -> None:
        """
        Assign or blend ``value`` over ``count`` pixels, ``step`` indices apart.

        Blending uses the native precision and layout of this buffer.
        """
        if count <= 0:
            return
        line = slice(start, start + (count - 1) * step + 1, step)
        native = np.array(self.encode(value), dtype=self._data.dtype)
        if blend:
            self._data[line] = np_blend(self._data[line], native, self.precision)
        else:
            self._data[line] = native

