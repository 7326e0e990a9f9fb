from __future__ import annotations
from numbers import Real
from typing import Any, ClassVar, Iterator, Tuple

from ..types.format_type import Precision
from ..types.color_types import ColorSpace, space_channels
from ..conversions.wrapper import convert, convert_to_rgb


def _channel_property(index: int, name: str) -> property:
    def getter(self):
        return self._value[index]
    getter.__name__ = name
    return property(getter)


class ColorSpaceValue:
    """
    Immutable color-space tuple plus alpha.

    Values are plain floats; alpha defaults to 1.0 and is carried through
    every conversion unchanged.
    """
    __slots__ = ('_value', '_is_frozen')

    space: ClassVar[ColorSpace]
    channel_names: ClassVar[Tuple[str, ...]]
    precision: ClassVar[Precision] = Precision.FLOAT

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *values: Any, alpha: float | None = None) -> None:
        n = space_channels[self.space]
        if len(values) == 1 and not isinstance(values[0], Real):
            values = tuple(values[0])
        if len(values) == n:
            values = (*values, 1.0 if alpha is None else alpha)
        elif len(values) != n + 1:
            raise ValueError(
                f"{self.__class__.__name__} expects {n} channels (+ optional alpha), got {len(values)}"
            )
        elif alpha is not None:
            raise ValueError("alpha given both positionally and by keyword")
        self._value = tuple(float(v) for v in values)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_pixel(cls, pixel: Any) -> ColorSpaceValue:
        """
        Build from any RGBA pixel (converted to float precision first).

        A fully transparent pixel has no color: every channel is 0.
        """
        r, g, b, a = pixel.to_pixel_f().value
        if a == 0:
            return cls(*((0.0,) * space_channels[cls.space]), 0.0)
        return cls(*convert((r, g, b), cls.space), a)

    @property
    def value(self) -> Tuple[float, ...]:
        return self._value

    @property
    def channels(self) -> Tuple[float, ...]:
        return self._value[:-1]

    @property
    def alpha(self) -> float:
        return self._value[-1]

    a = alpha

    def rgba_components(self) -> Tuple[float, float, float, float]:
        return (*convert_to_rgb(self.channels, self.space), self.alpha)

    def to_pixel(self, precision: Precision = Precision.FLOAT):
        # local import to avoid cycles
        from ..pixels.pixel_base import pixel_class_for
        return pixel_class_for(precision)(self)

    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorSpaceValue):
            return NotImplemented
        return self.__class__ is other.__class__ and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.channel_names + ('a',), self._value))
        return f"{self.__class__.__name__}({fields})"
