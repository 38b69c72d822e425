from __future__ import annotations

from ..conversions import (
    byte_to_unit,
    unit_to_byte,
    pack_rgb,
    pack_rgba,
    unit_gray,
    byte_gray,
)
from ..conversions.numbers import OverflowPolicy
from ..types.channel_domain import ChannelDomain
from ..types.color_types import Channel
from .color_base import ColorBase
from .rgb import rgb_tuple_to_class


def to_unit(self: ColorBase) -> ColorBase:
    """Widen a byte color to unit floats (``v / 255``); unit colors are returned as is."""
    if self.is_unit:
        return self
    cls = rgb_tuple_to_class[(self.mode, ChannelDomain.UNIT_FLOAT)]
    return cls(tuple(byte_to_unit(v) for v in self.value))


def to_byte(self: ColorBase, overflow_function: OverflowPolicy = None) -> ColorBase:
    """
    Narrow a unit-float color to bytes; byte colors are returned as is.

    Channels are truncated, not rounded, and channels outside ``[0, 1]`` wrap
    unless an ``overflow_function`` is given (``"clamp"``, ``"bounce"`` or a
    ``f(value, lo, hi)`` callable).
    """
    if self.is_byte:
        return self
    cls = rgb_tuple_to_class[(self.mode, ChannelDomain.BYTE)]
    return cls(tuple(unit_to_byte(v, overflow_function) for v in self.value))


def color_convert(self: ColorBase, to_domain: ChannelDomain | str) -> ColorBase:
    """
    Convert this color to another channel domain.

    Args:
        to_domain: Target domain (``ChannelDomain`` or its value, ``"float"``/``"int"``)

    Returns:
        Color of the same mode in the target domain
    """
    to_domain = ChannelDomain(to_domain)
    if to_domain is ChannelDomain.UNIT_FLOAT:
        return to_unit(self)
    return to_byte(self)


def to_gray(self: ColorBase) -> Channel:
    if self.is_unit:
        return unit_gray(self.r, self.g, self.b)
    return byte_gray(self.r, self.g, self.b)


def as_u32(self: ColorBase) -> int:
    """Packed integer form (``0xRRGGBB`` / ``0xRRGGBBAA``); unit colors are narrowed first."""
    color = to_byte(self)
    if color.has_alpha:
        return pack_rgba(*color.value)
    return pack_rgb(*color.value)


ColorBase.to_unit = to_unit
ColorBase.to_byte = to_byte
ColorBase.convert = color_convert
ColorBase.to_gray = to_gray
ColorBase.as_u32 = as_u32
