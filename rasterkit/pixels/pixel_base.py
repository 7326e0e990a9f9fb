from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Tuple
from numbers import Real

from ..types.format_type import Precision
from ..types.color_types import Component, PixelTuple
from ..conversions.numbers import convert_component, saturate


def coerce_component(value: Any, _type: type, maximum: Component) -> Component:
    """Cast to the storage type; integer components are clamped into range."""
    value = _type(value)
    if _type is int:
        return saturate(value, maximum)
    return value


class PixelBase:
    """
    Immutable four-channel (r, g, b, a) pixel value.

    Concrete subclasses fix the precision through class variables. Accepted
    constructor forms::

        Pixel8()                  -> (0, 0, 0, 255)
        Pixel8(v)                 -> (v, v, v, 255)
        Pixel8(v, a)              -> (v, v, v, a)
        Pixel8(r, g, b)           -> (r, g, b, 255)
        Pixel8(r, g, b, a)
        Pixel8((r, g, b, a))      any of the above as one sequence
        Pixel8(other)             any pixel, gray pixel or color-space value
    """
    __slots__ = ('_value', '_is_frozen')

    num_channels: ClassVar[int] = 4
    precision: ClassVar[Precision]
    maximum: ClassVar[Component]
    _type: ClassVar[type]

    # injected by arithmetic.py / blending.py / spaces
    blended: Callable[[PixelBase, PixelBase], PixelBase]
    to_gray_cie: Callable[[PixelBase], Component]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *components: Any) -> None:
        if len(components) == 1 and not isinstance(components[0], Real):
            source = components[0]
            if hasattr(source, 'rgba_components'):
                value = tuple(
                    convert_component(c, source.precision, self.precision)
                    for c in source.rgba_components()
                )
            else:
                try:
                    components = tuple(source)
                except TypeError:
                    raise TypeError(
                        f"{self.__class__.__name__} cannot be built from {type(source).__name__}"
                    ) from None
                value = self._expand(components)
        else:
            value = self._expand(components)

        self._value = tuple(coerce_component(v, self._type, self.maximum) for v in value)

        # frozen from here on
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _expand(cls, components: Tuple[Any, ...]) -> Tuple[Any, ...]:
        count = len(components)
        if count == 0:
            return (0, 0, 0, cls.maximum)
        if count == 1:
            v = components[0]
            return (v, v, v, cls.maximum)
        if count == 2:
            v, a = components
            return (v, v, v, a)
        if count == 3:
            return (*components, cls.maximum)
        if count == 4:
            return tuple(components)
        raise ValueError(f"{cls.__name__} expects 0 to 4 components, got {count}")

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> PixelTuple:
        return self._value

    @property
    def r(self) -> Component:
        return self._value[0]

    @property
    def g(self) -> Component:
        return self._value[1]

    @property
    def b(self) -> Component:
        return self._value[2]

    @property
    def a(self) -> Component:
        return self._value[3]

    @property
    def color(self) -> Tuple[Component, Component, Component]:
        return self._value[:3]

    def rgba_components(self) -> PixelTuple:
        return self._value

    def is_opaque(self) -> bool:
        return self._value[3] >= self.maximum

    # ------------------ CONVERSIONS ------------------
    def convert(self, precision: Precision) -> PixelBase:
        """Return this pixel in another precision (a no-op for the same one)."""
        cls = pixel_class_for(precision)
        if cls is self.__class__:
            return self
        return cls(self)

    def to_pixel8(self) -> PixelBase:
        return self.convert(Precision.BIT8)

    def to_pixel16(self) -> PixelBase:
        return self.convert(Precision.BIT16)

    def to_pixel_f(self) -> PixelBase:
        return self.convert(Precision.FLOAT)

    def with_alpha(self, alpha: Component) -> PixelBase:
        return self.__class__(*self._value[:3], alpha)

    # ------------------ PROTOCOLS ------------------
    def __iter__(self) -> Iterator[Component]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBase):
            return NotImplemented
        return self.__class__ is other.__class__ and self._value == other._value

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}{self._value!r}"


_PIXEL_REGISTRY: dict = {}


def build_registry(*classes: type) -> dict:
    return {
        cls.precision: cls
        for cls in classes
    }


def register_pixel_classes(*classes: type[PixelBase]) -> None:
    _PIXEL_REGISTRY.update(build_registry(*classes))


def pixel_class_for(precision: Precision) -> type[PixelBase]:
    try:
        return _PIXEL_REGISTRY[Precision(precision)]
    except KeyError:
        raise ValueError(f"No pixel class registered for precision {precision!r}") from None
