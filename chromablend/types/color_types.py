from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np

Channel = Union[int, np.float32]
ChannelVector = Tuple[Channel, ...]
RealNumber = Union[int, float, np.integer, np.floating]
ColorMode = Literal["rgb", "rgba"]
ALPHA_MODES = {"rgba"}


def has_alpha_mode(mode: ColorMode) -> bool:
    """
    Check if the given color mode carries an alpha channel.

    Args:
        mode: Color mode string
    Returns:
        True if the mode has an alpha channel, False otherwise
    """
    return mode.lower() in ALPHA_MODES
