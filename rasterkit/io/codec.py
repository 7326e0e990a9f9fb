"""
PNG codec built on Pillow.

Only the raw-row contract of :mod:`rasterkit.io.rows` crosses this module:
``decode_png`` turns bytes into :class:`RowData` and ``encode_png`` turns
:class:`RowData` back into bytes.
"""
from __future__ import annotations
import io
import warnings

import numpy as np
from PIL import Image as PILImage, UnidentifiedImageError

from .errors import LibraryError, NotAContainerFileError
from .rows import ChannelLayout, RowData, layout_channels

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

# Pillow mode -> (bit depth, layout)
MODE_LAYOUTS = {
    "L": (8, ChannelLayout.GRAY),
    "LA": (8, ChannelLayout.GRAY_ALPHA),
    "RGB": (8, ChannelLayout.RGB),
    "RGBA": (8, ChannelLayout.RGBA),
    "I": (16, ChannelLayout.GRAY),
    "I;16": (16, ChannelLayout.GRAY),
    "I;16B": (16, ChannelLayout.GRAY),
    "I;16L": (16, ChannelLayout.GRAY),
}

# modes Pillow can open but not hand over as rows directly
MODE_CONVERSIONS = {
    "1": "L",
    "La": "LA",
    "PA": "RGBA",
    "RGBa": "RGBA",
    "RGBX": "RGB",
}


def _normalized(image: PILImage.Image) -> PILImage.Image:
    mode = image.mode
    if mode == "P":
        return image.convert("RGBA" if "transparency" in image.info else "RGB")
    if mode in MODE_CONVERSIONS:
        return image.convert(MODE_CONVERSIONS[mode])
    if mode not in MODE_LAYOUTS:
        raise LibraryError(f"Unsupported PNG pixel mode: {mode}")
    return image


def decode_png(data: bytes) -> RowData:
    """
    Decode PNG bytes into rows.

    Raises:
        NotAContainerFileError: the data does not start with the PNG signature.
        LibraryError: the PNG data is malformed or uses an unsupported mode.
    """
    if not bytes(data[:len(PNG_SIGNATURE)]) == PNG_SIGNATURE:
        raise NotAContainerFileError()
    try:
        with PILImage.open(io.BytesIO(data), formats=["PNG"]) as image:
            image.load()
            image = _normalized(image)
            bit_depth, layout = MODE_LAYOUTS[image.mode]
            pixels = np.asarray(image)
    except UnidentifiedImageError as exc:
        raise NotAContainerFileError() from exc
    except (OSError, EOFError, SyntaxError, ValueError) as exc:
        raise LibraryError(str(exc)) from exc

    height, width = pixels.shape[:2]
    rows = pixels.astype(np.int64).reshape(height, width * layout_channels[layout])
    return RowData(width, height, bit_depth, layout, rows)


def encode_png(rows: RowData) -> bytes:
    """
    Encode rows into PNG bytes.

    Pillow writes 16-bit PNGs only for gray without alpha; other 16-bit
    layouts are stored at 8 bits per component with a warning.
    """
    width, height, bit_depth, layout, row_iter = rows
    layout = ChannelLayout(layout)
    if width <= 0 or height <= 0:
        raise ValueError("Cannot encode an empty image")

    channels = layout_channels[layout]
    pixels = np.asarray(list(row_iter), dtype=np.int64).reshape(height, width, channels)

    if bit_depth == 16 and layout != ChannelLayout.GRAY:
        warnings.warn(
            f"16-bit {layout.value} PNG output is not supported by Pillow; "
            "writing 8 bits per component",
            stacklevel=2,
        )
        pixels = pixels >> 8
        bit_depth = 8

    if bit_depth == 16:
        array = pixels[:, :, 0].astype(np.uint16)
    elif channels == 1:
        array = pixels[:, :, 0].astype(np.uint8)
    else:
        array = pixels.astype(np.uint8)

    out = io.BytesIO()
    try:
        PILImage.fromarray(array).save(out, format="PNG")
    except (OSError, ValueError) as exc:
        raise LibraryError(str(exc)) from exc
    return out.getvalue()
