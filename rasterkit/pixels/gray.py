from __future__ import annotations
from numbers import Real
from typing import Any, ClassVar, Iterator

from ..types.format_type import Precision, component_max, component_types
from ..types.color_types import Component, GrayTuple, PixelTuple
from ..conversions.numbers import convert_component, unit_to_int
from .pixel_base import PixelBase, coerce_component, pixel_class_for
from .blending import blend_channels, unit_gray_cie


class GrayPixelBase:
    """
    Immutable grayscale+alpha value, the native element of GA buffers.

    Built from ``(g)``, ``(g, a)`` or from another pixel: a gray pixel of
    any precision is converted channel by channel, an RGBA pixel or a color-space
    value is reduced with its perceptual (CIE) gray level.
    """
    __slots__ = ('_value', '_is_frozen')

    num_channels: ClassVar[int] = 2
    precision: ClassVar[Precision]
    maximum: ClassVar[Component]
    _type: ClassVar[type]

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *components: Any) -> None:
        if (len(components) == 1 and hasattr(components[0], 'rgba_components')
                and not isinstance(components[0], (GrayPixelBase, PixelBase))):
            # color-space values go through float RGBA first
            components = (pixel_class_for(Precision.FLOAT)(components[0]),)

        if len(components) == 1 and isinstance(components[0], GrayPixelBase):
            source = components[0]
            value = tuple(convert_component(c, source.precision, self.precision) for c in source.value)
        elif len(components) == 1 and isinstance(components[0], PixelBase):
            source = components[0]
            level = unit_gray_cie(source)
            if self._type is int:
                level = unit_to_int(level, self.maximum)
            value = (level, convert_component(source.a, source.precision, self.precision))
        elif len(components) == 0:
            value = (0, self.maximum)
        elif len(components) == 1 and isinstance(components[0], Real):
            value = (components[0], self.maximum)
        elif len(components) == 2:
            value = components
        else:
            raise ValueError(f"{self.__class__.__name__} expects (g) or (g, a), got {components!r}")

        self._value = tuple(coerce_component(v, self._type, self.maximum) for v in value)
        super().__setattr__('_is_frozen', True)

    @property
    def value(self) -> GrayTuple:
        return self._value

    @property
    def g(self) -> Component:
        return self._value[0]

    @property
    def a(self) -> Component:
        return self._value[1]

    def rgba_components(self) -> PixelTuple:
        g, a = self._value
        return (g, g, g, a)

    def to_pixel(self) -> PixelBase:
        """RGBA pixel of the same precision with ``g`` replicated."""
        return pixel_class_for(self.precision)(*self.rgba_components())

    def convert(self, precision: Precision) -> GrayPixelBase:
        cls = gray_class_for(precision)
        if cls is self.__class__:
            return self
        return cls(self)

    def blended(self, src: Any) -> GrayPixelBase:
        """Draw ``src`` (gray or RGBA, any precision) over this value."""
        if not isinstance(src, GrayPixelBase):
            src = self.__class__(src)
        src = src.convert(self.precision)
        (g,), a = blend_channels((self.g,), self.a, (src.g,), src.a, self.precision)
        return self.__class__(g, a)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GrayPixelBase):
            return NotImplemented
        return self.__class__ is other.__class__ and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}{self._value!r}"


class GrayPixel8(GrayPixelBase):
    __slots__ = ()
    precision: ClassVar[Precision] = Precision.BIT8
    maximum: ClassVar[int] = component_max[Precision.BIT8]
    _type: ClassVar[type] = component_types[Precision.BIT8]


class GrayPixel16(GrayPixelBase):
    __slots__ = ()
    precision: ClassVar[Precision] = Precision.BIT16
    maximum: ClassVar[int] = component_max[Precision.BIT16]
    _type: ClassVar[type] = component_types[Precision.BIT16]


class GrayPixelF(GrayPixelBase):
    __slots__ = ()
    precision: ClassVar[Precision] = Precision.FLOAT
    maximum: ClassVar[float] = component_max[Precision.FLOAT]
    _type: ClassVar[type] = component_types[Precision.FLOAT]


gray_classes = {
    cls.precision: cls
    for cls in (GrayPixel8, GrayPixel16, GrayPixelF)
}


def gray_class_for(precision: Precision) -> type[GrayPixelBase]:
    return gray_classes[Precision(precision)]


def _to_gray_pixel(self: PixelBase) -> GrayPixelBase:
    return gray_class_for(self.precision)(self)


PixelBase.to_gray_pixel = _to_gray_pixel
