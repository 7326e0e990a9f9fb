from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

Component = Union[int, float]
PixelTuple = Tuple[Component, Component, Component, Component]
GrayTuple = Tuple[Component, Component]


class ColorSpace(str, Enum):
    HSV = "hsv"
    HSL = "hsl"
    XYZ = "xyz"
    YXY = "yxy"
    CMY = "cmy"
    CMYK = "cmyk"

# number of color channels, alpha excluded
space_channels = {
    ColorSpace.HSV: 3,
    ColorSpace.HSL: 3,
    ColorSpace.XYZ: 3,
    ColorSpace.YXY: 3,
    ColorSpace.CMY: 3,
    ColorSpace.CMYK: 4,
}
