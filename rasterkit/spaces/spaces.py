from typing import ClassVar, Dict, Tuple

from ..types.color_types import ColorSpace
from ..pixels.pixel_base import PixelBase
from .space_base import ColorSpaceValue, _channel_property


class HSV(ColorSpaceValue):
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HSV
    channel_names: ClassVar[Tuple[str, ...]] = ('h', 's', 'v')
    h = _channel_property(0, 'h')
    s = _channel_property(1, 's')
    v = _channel_property(2, 'v')


class HSL(ColorSpaceValue):
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HSL
    channel_names: ClassVar[Tuple[str, ...]] = ('h', 's', 'l')
    h = _channel_property(0, 'h')
    s = _channel_property(1, 's')
    l = _channel_property(2, 'l')


class XYZ(ColorSpaceValue):
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.XYZ
    channel_names: ClassVar[Tuple[str, ...]] = ('x', 'y', 'z')
    x = _channel_property(0, 'x')
    y = _channel_property(1, 'y')
    z = _channel_property(2, 'z')


class YXY(ColorSpaceValue):
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.YXY
    channel_names: ClassVar[Tuple[str, ...]] = ('Y', 'x', 'y')
    Y = _channel_property(0, 'Y')
    x = _channel_property(1, 'x')
    y = _channel_property(2, 'y')


class CMY(ColorSpaceValue):
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.CMY
    channel_names: ClassVar[Tuple[str, ...]] = ('c', 'm', 'y')
    c = _channel_property(0, 'c')
    m = _channel_property(1, 'm')
    y = _channel_property(2, 'y')


class CMYK(ColorSpaceValue):
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.CMYK
    channel_names: ClassVar[Tuple[str, ...]] = ('c', 'm', 'y', 'k')
    c = _channel_property(0, 'c')
    m = _channel_property(1, 'm')
    y = _channel_property(2, 'y')
    k = _channel_property(3, 'k')


space_classes: Dict[ColorSpace, type] = {
    cls.space: cls
    for cls in (HSV, HSL, XYZ, YXY, CMY, CMYK)
}


def pixel_to_color_space(self: PixelBase, to_space: ColorSpace) -> ColorSpaceValue:
    """Convert a pixel of any precision into a color-space value."""
    return space_classes[ColorSpace(to_space)].from_pixel(self)


def _from_color_space(cls, value: ColorSpaceValue) -> PixelBase:
    return cls(value)


# Inject color-space conversions into PixelBase
PixelBase.to_color_space = pixel_to_color_space
PixelBase.from_color_space = classmethod(_from_color_space)
PixelBase.to_hsv = lambda self: HSV.from_pixel(self)
PixelBase.to_hsl = lambda self: HSL.from_pixel(self)
PixelBase.to_xyz = lambda self: XYZ.from_pixel(self)
PixelBase.to_yxy = lambda self: YXY.from_pixel(self)
PixelBase.to_cmy = lambda self: CMY.from_pixel(self)
PixelBase.to_cmyk = lambda self: CMYK.from_pixel(self)
