from __future__ import annotations
import numpy as np

from ..types.channel_domain import BYTE_MASK

UNIT_GRAY_WEIGHTS = (np.float32(0.33), np.float32(0.59), np.float32(0.11))
BYTE_GRAY_WEIGHTS = (28, 151, 77)


def unit_gray(r: np.float32, g: np.float32, b: np.float32) -> np.float32:
    """Gray value of a unit-float color: ``r*0.33 + g*0.59 + b*0.11``."""
    wr, wg, wb = UNIT_GRAY_WEIGHTS
    with np.errstate(over="ignore", invalid="ignore"):
        return np.float32(r) * wr + np.float32(g) * wg + np.float32(b) * wb


def byte_gray(r: int, g: int, b: int) -> int:
    """Gray value of a byte color: ``(r*28 + g*151 + b*77) >> 8``."""
    wr, wg, wb = BYTE_GRAY_WEIGHTS
    return ((r * wr + g * wg + b * wb) >> 8) & BYTE_MASK
