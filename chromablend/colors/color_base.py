from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Optional, Tuple, cast

from ..types.channel_domain import (
    ChannelDomain,
    domain_maxima,
    domain_scalar_types,
    domain_valid_types,
    domain_zero,
)
from ..types.color_types import Channel, ChannelVector, ColorMode, RealNumber, has_alpha_mode
from ..conversions.packing import unpack_rgb, unpack_rgba
from ..utils import get_dimension


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorMode]
    domain:       ClassVar[ChannelDomain]
    null_value:   ClassVar[ChannelVector]
    # set once the concrete classes exist (see rgb.py)
    without_alpha_class: ClassVar[Optional[type[ColorBase]]] = None

    # injected by color.py
    convert: Callable[[ColorBase, ChannelDomain], ColorBase]
    to_unit: Callable[[ColorBase], ColorBase]
    to_byte: Callable[..., ColorBase]
    to_gray: Callable[[ColorBase], Channel]
    as_u32: Callable[[ColorBase], int]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Any = None) -> None:
        if value is None:
            value = self.null_value

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            value = self._channels_from_color(value)

        value_dim = get_dimension(value)
        if value_dim != self.num_channels:
            raise ValueError(
                f"{self.__class__.__name__} expects {self.num_channels} channels, got {value_dim}"
            )

        # type enforcement, no clamping
        self._value = tuple(self._coerce_channel(v) for v in cast(Tuple[Any, ...], value))

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _coerce_channel(cls, channel: Any) -> Channel:
        valid_types = domain_valid_types[cls.domain]
        if isinstance(channel, bool) or not isinstance(channel, valid_types):
            raise TypeError(
                f"{cls.__name__} channels must be {cls.domain.value} values, "
                f"got {type(channel).__name__}"
            )
        channel = domain_scalar_types[cls.domain](channel)
        if cls.domain is ChannelDomain.BYTE and not 0 <= channel <= domain_maxima[ChannelDomain.BYTE]:
            raise ValueError(f"{cls.__name__} channel {channel} is outside 0..255")
        return channel

    def _channels_from_color(self, color: ColorBase) -> ChannelVector:
        if color.domain is not self.domain:
            color = color.convert(self.domain)
        if color.num_channels == self.num_channels:
            return color.value
        if color.num_channels == 4 and self.num_channels == 3:
            # dropping alpha
            return color.value[:3]
        raise ValueError(
            f"{self.__class__.__name__} cannot be built from {color.__class__.__name__} "
            f"without an alpha value; use from_rgb()"
        )

    @classmethod
    def from_u32(cls, packed: int) -> ColorBase:
        """
        Build a byte color from its packed integer form.

        ``0xRRGGBB`` for three-channel colors, ``0xRRGGBBAA`` for four-channel ones.
        """
        if cls.domain is not ChannelDomain.BYTE:
            raise TypeError(f"{cls.__name__} cannot be unpacked from an integer; use its byte variant")
        unpack = unpack_rgba if cls.num_channels == 4 else unpack_rgb
        return cls(unpack(packed))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ChannelVector:
        return self._value

    @property
    def r(self) -> Channel:
        return self._value[0]

    @property
    def g(self) -> Channel:
        return self._value[1]

    @property
    def b(self) -> Channel:
        return self._value[2]

    @property
    def has_alpha(self) -> bool:
        """Check if this color includes an alpha channel."""
        return has_alpha_mode(self.mode)

    @property
    def is_unit(self) -> bool:
        return self.domain is ChannelDomain.UNIT_FLOAT

    @property
    def is_byte(self) -> bool:
        return self.domain is ChannelDomain.BYTE

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Channel]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == cast(ColorBase, other)._value

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._value))

    def __lt__(self, other: ColorBase) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: ColorBase) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: ColorBase) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: ColorBase) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value >= other._value

    def __repr__(self) -> str:
        if self.is_unit:
            channels = ", ".join(f"{float(v):g}" for v in self._value)
        else:
            channels = ", ".join(str(v) for v in self._value)
        return f"{self.__class__.__name__}({channels})"


class WithAlpha:
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    domain: ClassVar[ChannelDomain]
    without_alpha_class: ClassVar[Optional[type[ColorBase]]]
    value: ChannelVector

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Channel:
        return self.value[self.alpha_index]

    @property
    def a(self) -> Channel:
        return self.value[self.alpha_index]

    def rgb(self) -> ColorBase:
        """Return the color channels without alpha."""
        return cast(type[ColorBase], self.without_alpha_class)(self.value[:-1])

    def with_alpha(self, alpha: RealNumber):
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value in this color's domain.

        Returns:
            New color instance with updated alpha.
        """
        return self.__class__(self.value[:-1] + (alpha,))  # type: ignore[call-arg]

    @classmethod
    def from_rgb(cls, color: ColorBase, alpha: RealNumber):
        """
        Create a color from a three-channel color and an explicit alpha.

        A color of the other domain is converted first; ``alpha`` is always
        taken in this class's domain.
        """
        if color.num_channels != 3:
            raise ValueError(f"{cls.__name__}.from_rgb expects a 3-channel color, got {color.__class__.__name__}")
        base = cast(type[ColorBase], cls.without_alpha_class)(color)
        return cls(base.value + (alpha,))  # type: ignore[call-arg]


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.domain): cls
        for cls in classes
    }


def null_value_for(domain: ChannelDomain, num_channels: int) -> ChannelVector:
    return (domain_zero[domain],) * num_channels
