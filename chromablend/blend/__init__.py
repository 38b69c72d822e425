from .modes import BlendMode
from .engine import (
    blend,
    supported_modes,
    to_blend_mode,
    BLEND_FUNCTIONS,
    ALPHA_FREE_MODES,
    ALL_MODES,
)

__all__ = [
    "BlendMode",
    "blend",
    "supported_modes",
    "to_blend_mode",
    "BLEND_FUNCTIONS",
    "ALPHA_FREE_MODES",
    "ALL_MODES",
]
