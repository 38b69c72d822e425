from __future__ import annotations
from typing import Tuple
import numpy as np

from ..types.channel_domain import BYTE_MASK, U32_MAX


def _validate_packed(packed: int) -> int:
    if isinstance(packed, bool) or not isinstance(packed, (int, np.integer)):
        raise TypeError(f"Packed color must be an integer, got {type(packed).__name__}")
    packed = int(packed)
    if not 0 <= packed <= U32_MAX:
        raise ValueError(f"Packed color {packed:#x} does not fit in 32 bits")
    return packed


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack three byte channels as ``0xRRGGBB``."""
    return (r << 16) | (g << 8) | b


def unpack_rgb(packed: int) -> Tuple[int, int, int]:
    """Unpack ``0xRRGGBB``; bits above 23 are ignored."""
    packed = _validate_packed(packed)
    return (
        (packed >> 16) & BYTE_MASK,
        (packed >> 8) & BYTE_MASK,
        packed & BYTE_MASK,
    )


def pack_rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack four byte channels as ``0xRRGGBBAA``."""
    return (r << 24) | (g << 16) | (b << 8) | a


def unpack_rgba(packed: int) -> Tuple[int, int, int, int]:
    packed = _validate_packed(packed)
    return (
        (packed >> 24) & BYTE_MASK,
        (packed >> 16) & BYTE_MASK,
        (packed >> 8) & BYTE_MASK,
        packed & BYTE_MASK,
    )
