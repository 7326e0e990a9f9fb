from typing import ClassVar

from ..types.format_type import Precision, component_max, component_types
from .pixel_base import PixelBase, build_registry, register_pixel_classes


class Pixel8(PixelBase):
    __slots__ = ()
    precision: ClassVar[Precision] = Precision.BIT8
    maximum: ClassVar[int] = component_max[Precision.BIT8]
    _type: ClassVar[type] = component_types[Precision.BIT8]


class Pixel16(PixelBase):
    __slots__ = ()
    precision: ClassVar[Precision] = Precision.BIT16
    maximum: ClassVar[int] = component_max[Precision.BIT16]
    _type: ClassVar[type] = component_types[Precision.BIT16]


class PixelF(PixelBase):
    __slots__ = ()
    precision: ClassVar[Precision] = Precision.FLOAT
    maximum: ClassVar[float] = component_max[Precision.FLOAT]
    _type: ClassVar[type] = component_types[Precision.FLOAT]


pixel_classes = build_registry(
    Pixel8,
    Pixel16,
    PixelF,
)
register_pixel_classes(Pixel8, Pixel16, PixelF)
