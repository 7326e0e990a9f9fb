"""
Root conftest.py - puts the project root on the path and provides shared image fixtures.
"""
import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def checkerboard():
    """Factory for a 5x4 opaque two-color checkerboard in any pixel format."""
    from rasterkit import Image, Pixel8, PixelFormat

    def make(pixel_format=PixelFormat.RGBA8):
        img = Image(5, 4, Pixel8(10, 20, 30, 255), pixel_format)
        for y in range(img.height):
            for x in range(img.width):
                if (x + y) % 2:
                    img.set(x, y, Pixel8(200, 150, 100, 255))
        return img

    return make
