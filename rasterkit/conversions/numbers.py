import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import Precision, component_max, component_dtypes


def saturate(value: int, maximum: int) -> int:
    """Clamp an integer component into ``[0, maximum]``."""
    return max(0, min(value, maximum))


def bit8_to_bit16(value: int) -> int:
    """Replicate an 8-bit component into both bytes of a 16-bit one."""
    return value | (value << 8)


def bit16_to_bit8(value: int) -> int:
    """Keep the high byte of a 16-bit component."""
    return value >> 8


def int_to_unit(value: int, maximum: int) -> float:
    return value / maximum


def unit_to_int(value: float, maximum: int) -> int:
    """
    Scale a unit float to ``[0, maximum]`` with round-to-nearest.

    Out-of-range values saturate instead of wrapping; NaN maps to 0.
    """
    if not value > 0.0:
        return 0
    if value >= 1.0:
        return maximum
    return int(value * maximum + 0.5)


def convert_component(value, from_precision: Precision, to_precision: Precision):
    """Convert one channel value between two precisions."""
    if from_precision == to_precision:
        return value
    if from_precision == Precision.FLOAT:
        return unit_to_int(value, component_max[to_precision])
    if to_precision == Precision.FLOAT:
        return int_to_unit(value, component_max[from_precision])
    if from_precision == Precision.BIT8:
        return bit8_to_bit16(value)
    return bit16_to_bit8(value)


def np_unit_to_int(values: NDArray, maximum: int) -> NDArray:
    """Vectorized: scale unit floats to integers with round-to-nearest and saturation."""
    values = np.asarray(values, dtype=np.float64)
    scaled = np.floor(values * maximum + 0.5)
    result = np.where(values >= 1.0, maximum, scaled)
    # also catches NaN
    result = np.where(values > 0.0, result, 0)
    return result.astype(np.int64)


def np_convert_components(values: NDArray, from_precision: Precision, to_precision: Precision) -> NDArray:
    """
    Vectorized: convert an array of channel values between precisions.

    Returns an array of the target precision's storage dtype.
    """
    target = component_dtypes[to_precision]
    if from_precision == to_precision:
        return np.array(values, dtype=target)
    if from_precision == Precision.FLOAT:
        return np_unit_to_int(values, component_max[to_precision]).astype(target)
    if to_precision == Precision.FLOAT:
        return np.asarray(values, dtype=np.float64) / component_max[from_precision]
    wide = np.asarray(values, dtype=np.uint32)
    if from_precision == Precision.BIT8:
        return (wide | (wide << 8)).astype(target)
    return (wide >> 8).astype(target)
