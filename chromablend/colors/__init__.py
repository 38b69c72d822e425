"""
Chromablend Color Classes
=========================

Immutable three- and four-channel colors over two channel domains.

Color Classes
-------------
    - UnitRGB:  float32 RGB, nominally 0.0-1.0, never clamped
    - UnitRGBA: float32 RGBA
    - ByteRGB:  8-bit RGB (0-255)
    - ByteRGBA: 8-bit RGBA

Usage
-----
>>> from chromablend.colors import rgba
>>> a = rgba(255, 255, 0, 255)
>>> a + rgba(0xFFFF00FF)          # channels wrap, alpha kept from the left
ByteRGBA(254, 254, 0, 255)
>>> a.to_unit()
UnitRGBA(1, 1, 0, 1)

Notes
-----
- Arithmetic acts on r, g, b only; alpha comes from the left operand
- Byte arithmetic wraps modulo 256, byte division by zero raises
- Narrowing to bytes truncates; out-of-range floats wrap with a RuntimeWarning
"""

from .color_base import ColorBase, WithAlpha
from .rgb import UnitRGB, UnitRGBA, ByteRGB, ByteRGBA, rgb, rgba, rgb_tuple_to_class
from . import arithmetic  # noqa: F401  (installs operators)
from .color import color_convert


__all__ = [
    "ColorBase",
    "WithAlpha",
    "UnitRGB",
    "UnitRGBA",
    "ByteRGB",
    "ByteRGBA",
    "rgb",
    "rgba",
    "rgb_tuple_to_class",
    "color_convert",
]
