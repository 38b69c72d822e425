"""
Porter-Duff and simple blend formulas for unit-float colors.

Every function takes a source and a destination color of the same class
and returns a new color of that class. ``src.a``/``dst.a`` refer to the
alpha channels; on three-channel colors only the alpha-free modes apply.
"""
from __future__ import annotations
from enum import Enum
from typing import Tuple
import numpy as np

from ..colors.color_base import ColorBase

ONE = np.float32(1.0)


class BlendMode(str, Enum):
    CLEAR = "clear"
    SRC = "src"
    DST = "dst"
    SRC_OVER = "src_over"
    DST_OVER = "dst_over"
    SRC_IN = "src_in"
    DST_IN = "dst_in"
    SRC_OUT = "src_out"
    DST_OUT = "dst_out"
    SRC_ATOP = "src_atop"
    DST_ATOP = "dst_atop"
    XOR = "xor"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    MULTIPLY = "multiply"
    SCREEN = "screen"


def _scale(channels: Tuple[np.float32, ...], factor: np.float32) -> Tuple[np.float32, ...]:
    return tuple(c * factor for c in channels)


def _add(x: Tuple[np.float32, ...], y: Tuple[np.float32, ...]) -> Tuple[np.float32, ...]:
    return tuple(a + b for a, b in zip(x, y))


def clear(src: ColorBase, dst: ColorBase) -> ColorBase:
    return src.__class__()


def src(src: ColorBase, dst: ColorBase) -> ColorBase:
    return src


def dst(src: ColorBase, dst: ColorBase) -> ColorBase:
    return dst


def src_over(src: ColorBase, dst: ColorBase) -> ColorBase:
    """``src + dst * (1 - src.a)``"""
    return src.__class__(_add(src.value, _scale(dst.value, ONE - src.alpha)))


def dst_over(src: ColorBase, dst: ColorBase) -> ColorBase:
    """``src * (1 - dst.a) + dst``"""
    return src.__class__(_add(_scale(src.value, ONE - dst.alpha), dst.value))


def src_in(src: ColorBase, dst: ColorBase) -> ColorBase:
    """``src * dst.a``"""
    return src.__class__(_scale(src.value, dst.alpha))


def dst_in(src: ColorBase, dst: ColorBase) -> ColorBase:
    """``dst * src.a``"""
    return src.__class__(_scale(dst.value, src.alpha))


def src_out(src: ColorBase, dst: ColorBase) -> ColorBase:
    """``src * (1 - dst.a)``"""
    return src.__class__(_scale(src.value, ONE - dst.alpha))


def dst_out(src: ColorBase, dst: ColorBase) -> ColorBase:
    """``dst * (1 - src.a)``"""
    return src.__class__(_scale(dst.value, ONE - src.alpha))


def src_atop(src: ColorBase, dst: ColorBase) -> ColorBase:
    """``src * dst.a + dst * (1 - src.a)``"""
    return src.__class__(
        _add(_scale(src.value, dst.alpha), _scale(dst.value, ONE - src.alpha))
    )


def dst_atop(src: ColorBase, dst: ColorBase) -> ColorBase:
    """``src * (1 - dst.a) + dst * src.a``"""
    return src.__class__(
        _add(_scale(src.value, ONE - dst.alpha), _scale(dst.value, src.alpha))
    )


def xor(src: ColorBase, dst: ColorBase) -> ColorBase:
    """``src * (1 - dst.a) + dst * (1 - src.a)``"""
    return src.__class__(
        _add(_scale(src.value, ONE - dst.alpha), _scale(dst.value, ONE - src.alpha))
    )


def _opaque(color: ColorBase) -> ColorBase:
    # four-channel winners are forced fully opaque
    if color.has_alpha:
        return color.__class__(color.value[:-1] + (ONE,))
    return color


def darken(src: ColorBase, dst: ColorBase) -> ColorBase:
    """The color with the lower gray value; ties go to ``dst``."""
    return _opaque(src if src.to_gray() < dst.to_gray() else dst)


def lighten(src: ColorBase, dst: ColorBase) -> ColorBase:
    """The color with the higher gray value; ties go to ``dst``."""
    return _opaque(src if src.to_gray() > dst.to_gray() else dst)


def multiply(src: ColorBase, dst: ColorBase) -> ColorBase:
    """``src * dst``, alpha included."""
    return src.__class__(tuple(s * d for s, d in zip(src.value, dst.value)))


def screen(src: ColorBase, dst: ColorBase) -> ColorBase:
    """``1 - (1 - src) * (1 - dst)``, alpha included."""
    return src.__class__(
        tuple(ONE - (ONE - s) * (ONE - d) for s, d in zip(src.value, dst.value))
    )
