from __future__ import annotations
from typing import Callable, FrozenSet, Union
import numpy as np

from ..colors.color_base import ColorBase
from ..types.channel_domain import ChannelDomain
from . import modes
from .modes import BlendMode

BlendFunction = Callable[[ColorBase, ColorBase], ColorBase]

BLEND_FUNCTIONS: dict[BlendMode, BlendFunction] = {
    BlendMode.CLEAR: modes.clear,
    BlendMode.SRC: modes.src,
    BlendMode.DST: modes.dst,
    BlendMode.SRC_OVER: modes.src_over,
    BlendMode.DST_OVER: modes.dst_over,
    BlendMode.SRC_IN: modes.src_in,
    BlendMode.DST_IN: modes.dst_in,
    BlendMode.SRC_OUT: modes.src_out,
    BlendMode.DST_OUT: modes.dst_out,
    BlendMode.SRC_ATOP: modes.src_atop,
    BlendMode.DST_ATOP: modes.dst_atop,
    BlendMode.XOR: modes.xor,
    BlendMode.DARKEN: modes.darken,
    BlendMode.LIGHTEN: modes.lighten,
    BlendMode.MULTIPLY: modes.multiply,
    BlendMode.SCREEN: modes.screen,
}

# Modes that do not read an alpha channel
ALPHA_FREE_MODES: FrozenSet[BlendMode] = frozenset({
    BlendMode.CLEAR,
    BlendMode.SRC,
    BlendMode.DST,
    BlendMode.DARKEN,
    BlendMode.LIGHTEN,
    BlendMode.MULTIPLY,
    BlendMode.SCREEN,
})

ALL_MODES: FrozenSet[BlendMode] = frozenset(BlendMode)


def to_blend_mode(mode: Union[BlendMode, str]) -> BlendMode:
    """Accept a BlendMode or its name (``"src_over"``, ``"src-over"``, ``"SRC_OVER"``)."""
    if isinstance(mode, BlendMode):
        return mode
    name = str(mode).strip().lower().replace("-", "_")
    try:
        return BlendMode(name)
    except ValueError:
        raise ValueError(f"Unknown blend mode: {mode!r}") from None


def supported_modes(color: Union[ColorBase, type[ColorBase]]) -> FrozenSet[BlendMode]:
    """
    Blend modes available for a color class.

    Only unit-float colors blend: four-channel ones support every mode,
    three-channel ones only the alpha-free modes. Byte colors support none.
    """
    cls = color if isinstance(color, type) else type(color)
    if cls.domain is not ChannelDomain.UNIT_FLOAT:
        return frozenset()
    if cls.num_channels == 4:
        return ALL_MODES
    return ALPHA_FREE_MODES


def blend(src: ColorBase, dst: ColorBase, mode: Union[BlendMode, str]) -> ColorBase:
    """
    Blend ``src`` onto ``dst`` with the given mode.

    Args:
        src: Source color
        dst: Destination color, same class as ``src``
        mode: BlendMode or its name

    Returns:
        New color of the same class

    Raises:
        ValueError: Unknown mode name
        TypeError: Mismatched classes, byte colors, or a mode that needs an
            alpha channel on a three-channel color
    """
    mode = to_blend_mode(mode)

    if not isinstance(src, ColorBase) or type(dst) is not type(src):
        raise TypeError(
            f"Cannot blend {type(src).__name__} with {type(dst).__name__}; "
            f"both colors must share the same class"
        )

    if mode not in supported_modes(src):
        if src.is_byte:
            raise TypeError(
                f"{type(src).__name__} colors cannot be blended; convert them with to_unit() first"
            )
        raise TypeError(f"{type(src).__name__} does not support the {mode.value} blend mode")

    with np.errstate(over="ignore", invalid="ignore"):
        return BLEND_FUNCTIONS[mode](src, dst)


def _blend_method(mode: BlendMode):
    def method(self: ColorBase, other: ColorBase) -> ColorBase:
        return blend(self, other, mode)
    method.__name__ = mode.value
    method.__doc__ = f"Blend this color (source) with ``other`` (destination) using {mode.value}."
    return method


# Inject one method per mode into ColorBase (a.src_over(b), ...)
for _mode in BlendMode:
    setattr(ColorBase, _mode.value, _blend_method(_mode))
del _mode
