from .numbers import byte_to_unit, unit_to_byte, saturate_u32, resolve_overflow_function, BYTE_SCALE
from .packing import pack_rgb, unpack_rgb, pack_rgba, unpack_rgba
from .gray import unit_gray, byte_gray

__all__ = [
    "byte_to_unit",
    "unit_to_byte",
    "saturate_u32",
    "resolve_overflow_function",
    "BYTE_SCALE",
    "pack_rgb",
    "unpack_rgb",
    "pack_rgba",
    "unpack_rgba",
    "unit_gray",
    "byte_gray",
]
