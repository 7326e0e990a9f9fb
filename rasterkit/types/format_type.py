# No dependencies
from enum import Enum
import numpy as np


class Precision(str, Enum):
    BIT8 = "8bit"
    BIT16 = "16bit"
    FLOAT = "float"


class PixelFormat(str, Enum):
    GA8 = "ga8"
    GA16 = "ga16"
    GAF = "gaf"
    RGBA8 = "rgba8"
    RGBA16 = "rgba16"
    RGBAF = "rgbaf"


class FileFormat(str, Enum):
    NONE = "none"
    GA8 = "ga8"
    GA16 = "ga16"
    RGBA8 = "rgba8"
    RGBA16 = "rgba16"


class ReadConvert(str, Enum):
    CLOSEST_MATCH = "closest_match"
    BIT8 = "8bit"
    BIT16 = "16bit"
    FLOAT = "float"
    GRAYSCALE = "grayscale"
    RGBA = "rgba"


class WriteConvert(str, Enum):
    CLOSEST_MATCH = "closest_match"
    ORIGINAL = "original"


component_max = {
    Precision.BIT8: 255,
    Precision.BIT16: 65535,
    Precision.FLOAT: 1.0,
}

component_types = {
    Precision.BIT8: int,
    Precision.BIT16: int,
    Precision.FLOAT: float,
}

component_dtypes = {
    Precision.BIT8: np.uint8,
    Precision.BIT16: np.uint16,
    Precision.FLOAT: np.float64,
}

format_precision = {
    PixelFormat.GA8: Precision.BIT8,
    PixelFormat.GA16: Precision.BIT16,
    PixelFormat.GAF: Precision.FLOAT,
    PixelFormat.RGBA8: Precision.BIT8,
    PixelFormat.RGBA16: Precision.BIT16,
    PixelFormat.RGBAF: Precision.FLOAT,
}

format_channels = {
    PixelFormat.GA8: 2,
    PixelFormat.GA16: 2,
    PixelFormat.GAF: 2,
    PixelFormat.RGBA8: 4,
    PixelFormat.RGBA16: 4,
    PixelFormat.RGBAF: 4,
}

grayscale_formats = {PixelFormat.GA8, PixelFormat.GA16, PixelFormat.GAF}

rgba_formats = {
    Precision.BIT8: PixelFormat.RGBA8,
    Precision.BIT16: PixelFormat.RGBA16,
    Precision.FLOAT: PixelFormat.RGBAF,
}

gray_formats = {
    Precision.BIT8: PixelFormat.GA8,
    Precision.BIT16: PixelFormat.GA16,
    Precision.FLOAT: PixelFormat.GAF,
}

file_bit_depths = {
    FileFormat.NONE: 8,
    FileFormat.GA8: 8,
    FileFormat.GA16: 16,
    FileFormat.RGBA8: 8,
    FileFormat.RGBA16: 16,
}

# (conversion, file format) -> pixel format used for the decoded image
READ_CONVERT_TABLE = {
    ReadConvert.CLOSEST_MATCH: {
        FileFormat.NONE: PixelFormat.RGBA8,
        FileFormat.GA8: PixelFormat.GA8,
        FileFormat.GA16: PixelFormat.GA16,
        FileFormat.RGBA8: PixelFormat.RGBA8,
        FileFormat.RGBA16: PixelFormat.RGBA16,
    },
    ReadConvert.BIT8: {
        FileFormat.NONE: PixelFormat.RGBA8,
        FileFormat.GA8: PixelFormat.GA8,
        FileFormat.GA16: PixelFormat.GA8,
        FileFormat.RGBA8: PixelFormat.RGBA8,
        FileFormat.RGBA16: PixelFormat.RGBA8,
    },
    ReadConvert.BIT16: {
        FileFormat.NONE: PixelFormat.RGBA16,
        FileFormat.GA8: PixelFormat.GA16,
        FileFormat.GA16: PixelFormat.GA16,
        FileFormat.RGBA8: PixelFormat.RGBA16,
        FileFormat.RGBA16: PixelFormat.RGBA16,
    },
    ReadConvert.FLOAT: {
        FileFormat.NONE: PixelFormat.RGBAF,
        FileFormat.GA8: PixelFormat.GAF,
        FileFormat.GA16: PixelFormat.GAF,
        FileFormat.RGBA8: PixelFormat.RGBAF,
        FileFormat.RGBA16: PixelFormat.RGBAF,
    },
    ReadConvert.GRAYSCALE: {
        FileFormat.NONE: PixelFormat.GA8,
        FileFormat.GA8: PixelFormat.GA8,
        FileFormat.GA16: PixelFormat.GA16,
        FileFormat.RGBA8: PixelFormat.GA8,
        FileFormat.RGBA16: PixelFormat.GA16,
    },
    ReadConvert.RGBA: {
        FileFormat.NONE: PixelFormat.RGBA8,
        FileFormat.GA8: PixelFormat.RGBA8,
        FileFormat.GA16: PixelFormat.RGBA16,
        FileFormat.RGBA8: PixelFormat.RGBA8,
        FileFormat.RGBA16: PixelFormat.RGBA16,
    },
}

CLOSEST_FILE_FORMAT = {
    PixelFormat.GA8: FileFormat.GA8,
    PixelFormat.GA16: FileFormat.GA16,
    PixelFormat.GAF: FileFormat.GA16,
    PixelFormat.RGBA8: FileFormat.RGBA8,
    PixelFormat.RGBA16: FileFormat.RGBA16,
    PixelFormat.RGBAF: FileFormat.RGBA16,
}


def pixel_format_for_read(conversion: ReadConvert, file_format: FileFormat) -> PixelFormat:
    """Pick the in-memory pixel format for a decoded container of ``file_format``."""
    return READ_CONVERT_TABLE[ReadConvert(conversion)][FileFormat(file_format)]


def file_format_for_write(
    conversion: WriteConvert,
    original: FileFormat,
    current: PixelFormat,
) -> FileFormat:
    """Pick the container layout used when writing an image."""
    if WriteConvert(conversion) == WriteConvert.ORIGINAL and original != FileFormat.NONE:
        return FileFormat(original)
    return CLOSEST_FILE_FORMAT[PixelFormat(current)]


def is_grayscale_file_format(file_format: FileFormat) -> bool:
    return file_format in (FileFormat.GA8, FileFormat.GA16)
