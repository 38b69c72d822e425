"""
Channel arithmetic between two colors of the same class.

- Unit-float colors: float32 IEEE arithmetic, no clamping. Division by zero
  yields inf/nan.
- Byte colors: exact integer arithmetic truncated back to 8 bits, so add,
  subtract and multiply wrap modulo 256. Division is floor division and a
  zero divisor raises ZeroDivisionError.
- Alpha is never computed: the left operand's alpha is carried over.
"""
from __future__ import annotations
from typing import Callable
import operator
import numpy as np

from ..types.channel_domain import BYTE_MASK
from .color_base import ColorBase


ChannelOp = Callable[[object, object], object]


def _byte_op(op: ChannelOp) -> ChannelOp:
    def wrapped(x, y):
        return op(x, y) & BYTE_MASK
    return wrapped


UNIT_OPS: dict[str, ChannelOp] = {
    "add": np.add,
    "sub": np.subtract,
    "mul": np.multiply,
    "div": np.divide,
}

BYTE_OPS: dict[str, ChannelOp] = {
    "add": _byte_op(operator.add),
    "sub": _byte_op(operator.sub),
    "mul": _byte_op(operator.mul),
    "div": _byte_op(operator.floordiv),
}


def _operate(color: ColorBase, other: ColorBase, op_name: str) -> ColorBase:
    a = color.value
    b = other.value

    if color.is_unit:
        op = UNIT_OPS[op_name]
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            result = tuple(np.float32(op(x, y)) for x, y in zip(a[:3], b[:3]))
    else:
        op = BYTE_OPS[op_name]
        result = tuple(op(x, y) for x, y in zip(a[:3], b[:3]))

    if color.has_alpha:
        result += (a[-1],)

    return color.__class__(result)


def _arithmetic_operation(op_name: str):
    """Create an operator restricted to operands of the exact same color class."""
    def operation(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return _operate(self, other, op_name)
    operation.__name__ = f"__{op_name}__"
    return operation


# Inject arithmetic operators into ColorBase
ColorBase.__add__ = _arithmetic_operation("add")
ColorBase.__sub__ = _arithmetic_operation("sub")
ColorBase.__mul__ = _arithmetic_operation("mul")
ColorBase.__truediv__ = _arithmetic_operation("div")
