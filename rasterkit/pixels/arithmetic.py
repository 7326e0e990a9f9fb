import sys
from numbers import Integral, Real
from typing import Callable, Dict

from ..conversions.numbers import saturate
from .pixel_base import PixelBase

FLOAT_MAX = sys.float_info.max

# ---------------------------------------------------------------------------
# Component level operations: (component, operand, maximum) -> component
# ---------------------------------------------------------------------------


def add_int(c: int, v: int, maximum: int) -> int:
    return saturate(c + v, maximum)


def sub_int(c: int, v: int, maximum: int) -> int:
    return saturate(c - v, maximum)


def mul_int(c: int, v: int, maximum: int) -> int:
    return saturate(c * v, maximum)


def div_int(c: int, v: int, maximum: int) -> int:
    """Round-to-nearest division; dividing by zero gives ``maximum``."""
    if v == 0:
        return maximum
    if v < 0:
        return 0
    return saturate((c + v // 2) // v, maximum)


def rsub_int(c: int, v: int, maximum: int) -> int:
    return saturate(v - c, maximum)


def rdiv_int(c: int, v: int, maximum: int) -> int:
    if c == 0:
        return maximum
    return saturate((v + c // 2) // c, maximum)


def add_float(c: float, v: float, maximum: float) -> float:
    return c + v


def sub_float(c: float, v: float, maximum: float) -> float:
    return c - v


def mul_float(c: float, v: float, maximum: float) -> float:
    return c * v


def div_float(c: float, v: float, maximum: float) -> float:
    if v == 0:
        return FLOAT_MAX
    return c / v


def rsub_float(c: float, v: float, maximum: float) -> float:
    return v - c


def rdiv_float(c: float, v: float, maximum: float) -> float:
    if c == 0:
        return FLOAT_MAX
    return v / c


INT_OPERATIONS: Dict[str, Callable] = {
    '__add__': add_int,
    '__radd__': add_int,
    '__sub__': sub_int,
    '__rsub__': rsub_int,
    '__mul__': mul_int,
    '__rmul__': mul_int,
    '__truediv__': div_int,
    '__rtruediv__': rdiv_int,
}

FLOAT_OPERATIONS: Dict[str, Callable] = {
    '__add__': add_float,
    '__radd__': add_float,
    '__sub__': sub_float,
    '__rsub__': rsub_float,
    '__mul__': mul_float,
    '__rmul__': mul_float,
    '__truediv__': div_float,
    '__rtruediv__': rdiv_float,
}


def average_alpha(a1, a2, is_int: bool):
    if is_int:
        return (a1 + a2) // 2
    return (a1 + a2) * 0.5


# ---------------------------------------------------------------------------
# Pixel level operations
# ---------------------------------------------------------------------------


def scalar_operation(pixel: PixelBase, value: Real, op_name: str) -> PixelBase:
    """
    Apply a scalar operator to the color channels of ``pixel``.

    Alpha is left unchanged. Integer pixels saturate at their bounds and only
    accept integral operands.
    """
    is_int = pixel._type is int
    if is_int and not isinstance(value, Integral):
        raise TypeError(
            f"{pixel.__class__.__name__} arithmetic needs an integer operand, got {type(value).__name__}"
        )
    op = (INT_OPERATIONS if is_int else FLOAT_OPERATIONS)[op_name]
    v = int(value) if is_int else float(value)
    r, g, b, a = pixel.value
    m = pixel.maximum
    return pixel.__class__(op(r, v, m), op(g, v, m), op(b, v, m), a)


def pixel_operation(pixel: PixelBase, other: PixelBase, op_name: str) -> PixelBase:
    """
    Combine two pixels channel by channel.

    ``other`` is first converted to the precision of ``pixel``. The result
    alpha is the average of both alphas.
    """
    other = other.convert(pixel.precision)
    is_int = pixel._type is int
    op = (INT_OPERATIONS if is_int else FLOAT_OPERATIONS)[op_name]
    m = pixel.maximum
    channels = tuple(op(c1, c2, m) for c1, c2 in zip(pixel.color, other.color))
    return pixel.__class__(*channels, average_alpha(pixel.a, other.a, is_int))


def _auto_arithmetic_operation(op_name: str):
    """Create an operator dispatching on scalar or pixel operands."""
    def operation(self, other):
        if isinstance(other, PixelBase):
            if op_name.startswith('__r'):
                return NotImplemented
            return pixel_operation(self, other, op_name)
        if isinstance(other, Real):
            return scalar_operation(self, other, op_name)
        return NotImplemented
    operation.__name__ = op_name
    return operation


# Inject arithmetic operators into PixelBase
PixelBase.__add__ = _auto_arithmetic_operation('__add__')
PixelBase.__sub__ = _auto_arithmetic_operation('__sub__')
PixelBase.__mul__ = _auto_arithmetic_operation('__mul__')
PixelBase.__truediv__ = _auto_arithmetic_operation('__truediv__')
PixelBase.__radd__ = _auto_arithmetic_operation('__radd__')
PixelBase.__rsub__ = _auto_arithmetic_operation('__rsub__')
PixelBase.__rmul__ = _auto_arithmetic_operation('__rmul__')
PixelBase.__rtruediv__ = _auto_arithmetic_operation('__rtruediv__')
