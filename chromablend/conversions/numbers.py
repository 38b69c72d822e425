from __future__ import annotations
import math
import warnings
from typing import Callable, Optional, Union
import numpy as np
from boundednumbers import clamp, bounce

from ..types.channel_domain import BYTE_MASK, U32_MAX
from ..types.color_types import RealNumber

OverflowFunction = Callable[[float, float, float], float]
OverflowPolicy = Union[str, OverflowFunction, None]

# "wrap" keeps the truncating cast and its modulo-256 wraparound
OVERFLOW_FUNCTIONS: dict[str, Optional[OverflowFunction]] = {
    "wrap": None,
    "clamp": clamp,
    "bounce": bounce,
}

BYTE_SCALE = np.float32(255.0)


def byte_to_unit(value: int) -> np.float32:
    """Widen an 8-bit channel onto the ``{0, 1/255, ..., 1}`` float lattice."""
    return np.float32(value) / BYTE_SCALE


def resolve_overflow_function(policy: OverflowPolicy) -> Optional[OverflowFunction]:
    """Map a policy name ('wrap', 'clamp', 'bounce') or callable to an overflow function."""
    if policy is None or callable(policy):
        return policy
    try:
        return OVERFLOW_FUNCTIONS[policy.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown overflow policy: {policy!r}, expected one of {sorted(OVERFLOW_FUNCTIONS)}"
        ) from None


def saturate_u32(value: RealNumber) -> int:
    """
    Truncate toward zero into an unsigned 32-bit integer.

    NaN and negative values saturate to 0, values beyond the 32-bit range
    saturate to ``0xFFFFFFFF``.
    """
    value = float(value)
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= U32_MAX:
        return U32_MAX
    return int(value)


def unit_to_byte(value: RealNumber, overflow_function: OverflowPolicy = None) -> int:
    """
    Narrow a unit-float channel to an 8-bit channel.

    The channel is scaled by 255 in float32, truncated through an unsigned
    32-bit intermediate and then cut down to its low 8 bits. Values that
    scale outside ``[0, 256)`` are not rejected: they wrap (``1.5`` becomes
    ``126``) and a ``RuntimeWarning`` is issued.

    Args:
        value: Channel value, nominally in ``[0, 1]``.
        overflow_function: Optional ``f(value, lo, hi)`` applied to the scaled
            value before truncation, or one of the policy names ``"wrap"``,
            ``"clamp"``, ``"bounce"``. ``"clamp"`` saturates instead of wrapping.

    Returns:
        Integer channel in ``0..255``.
    """
    overflow_function = resolve_overflow_function(overflow_function)

    with np.errstate(over="ignore", invalid="ignore"):
        scaled = np.float32(value) * BYTE_SCALE

    if overflow_function is not None:
        scaled = overflow_function(float(scaled), 0.0, 255.0)
    elif not 0.0 <= scaled < 256.0:
        warnings.warn(
            f"Channel value {value!r} scales outside [0, 256); narrowing to a byte wraps around",
            RuntimeWarning,
            stacklevel=2,
        )

    return saturate_u32(scaled) & BYTE_MASK
