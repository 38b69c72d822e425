"""Chromablend: fixed-arity colors and per-pixel compositing math."""

from .types.channel_domain import ChannelDomain
from .colors.rgb import (
    UnitRGB,
    UnitRGBA,
    ByteRGB,
    ByteRGBA,
    rgb,
    rgba,
)
from .colors.color_base import ColorBase
from .colors.color import color_convert
from .blend import BlendMode, blend, supported_modes
from .conversions import (
    byte_to_unit,
    unit_to_byte,
    pack_rgb,
    unpack_rgb,
    pack_rgba,
    unpack_rgba,
    unit_gray,
    byte_gray,
)

# Friendly aliases for the common byte variants
RGB = ByteRGB
RGBA = ByteRGBA

__version__ = "0.1.0"

__all__ = [
    # domains and color types
    "ChannelDomain",
    "ColorBase",
    "UnitRGB",
    "UnitRGBA",
    "ByteRGB",
    "ByteRGBA",
    "RGB",
    "RGBA",
    "rgb",
    "rgba",
    "color_convert",
    # blending
    "BlendMode",
    "blend",
    "supported_modes",
    # conversions
    "byte_to_unit",
    "unit_to_byte",
    "pack_rgb",
    "unpack_rgb",
    "pack_rgba",
    "unpack_rgba",
    "unit_gray",
    "byte_gray",
    "__version__",
]
