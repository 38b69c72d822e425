from typing import ClassVar, Optional, Tuple
import numpy as np

from ..types.channel_domain import ChannelDomain
from ..types.color_types import ColorMode
from .color_base import ColorBase, WithAlpha, build_registry, null_value_for


class UnitRGB(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorMode] = "rgb"
    domain: ClassVar[ChannelDomain] = ChannelDomain.UNIT_FLOAT
    null_value: ClassVar[Tuple[np.float32, ...]] = null_value_for(ChannelDomain.UNIT_FLOAT, 3)


class UnitRGBA(ColorBase, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorMode] = "rgba"
    domain: ClassVar[ChannelDomain] = ChannelDomain.UNIT_FLOAT
    null_value: ClassVar[Tuple[np.float32, ...]] = null_value_for(ChannelDomain.UNIT_FLOAT, 4)


class ByteRGB(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorMode] = "rgb"
    domain: ClassVar[ChannelDomain] = ChannelDomain.BYTE
    null_value: ClassVar[Tuple[int, ...]] = null_value_for(ChannelDomain.BYTE, 3)


class ByteRGBA(ColorBase, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorMode] = "rgba"
    domain: ClassVar[ChannelDomain] = ChannelDomain.BYTE
    null_value: ClassVar[Tuple[int, ...]] = null_value_for(ChannelDomain.BYTE, 4)


UnitRGBA.without_alpha_class = UnitRGB
ByteRGBA.without_alpha_class = ByteRGB


rgb_tuple_to_class = build_registry(
    UnitRGB,
    UnitRGBA,
    ByteRGB,
    ByteRGBA,
)


def _infer_domain(components: tuple) -> ChannelDomain:
    if any(isinstance(c, (float, np.floating)) for c in components):
        return ChannelDomain.UNIT_FLOAT
    return ChannelDomain.BYTE


def _build(mode: ColorMode, components: tuple, domain: Optional[ChannelDomain]) -> ColorBase:
    num_channels = 4 if mode == "rgba" else 3

    if len(components) == 1 and isinstance(components[0], ColorBase):
        # another color: drop alpha and/or change domain through the constructor
        source = components[0]
        target = ChannelDomain(domain) if domain is not None else source.domain
        return rgb_tuple_to_class[(mode, target)](source)

    if len(components) == 1:
        # packed integer form
        color = rgb_tuple_to_class[(mode, ChannelDomain.BYTE)].from_u32(components[0])
    elif len(components) == num_channels:
        color = rgb_tuple_to_class[(mode, _infer_domain(components))](components)
    else:
        raise TypeError(f"{mode}() takes 1 or {num_channels} components, got {len(components)}")

    return color.convert(ChannelDomain(domain)) if domain is not None else color


def rgb(*components, domain: Optional[ChannelDomain] = None) -> ColorBase:
    """
    Build a three-channel color.

    >>> rgb(255, 255, 0)        # ByteRGB
    >>> rgb(1.0, 1.0, 0.0)      # UnitRGB
    >>> rgb(0xFFFF00)           # ByteRGB from 0xRRGGBB

    >>> rgb(rgba(1, 2, 3, 4))   # ByteRGB, alpha dropped

    Integer components give a byte color, any float component gives a
    unit-float color. ``domain`` converts the result into that domain, so
    ``rgb(128, 255, 0, domain="float")`` equals ``rgb(0x80FF00, domain="float")``.
    """
    return _build("rgb", components, domain)


def rgba(*components, domain: Optional[ChannelDomain] = None) -> ColorBase:
    """
    Build a four-channel color from ``r, g, b, a`` or a packed ``0xRRGGBBAA``.

    Domain inference follows :func:`rgb`.
    """
    return _build("rgba", components, domain)
