# No dependencies
from enum import Enum
import numpy as np


class ChannelDomain(str, Enum):
    UNIT_FLOAT = "float"
    BYTE = "int"


domain_maxima = {
    ChannelDomain.UNIT_FLOAT: np.float32(1.0),
    ChannelDomain.BYTE: 255,
}

domain_scalar_types = {
    ChannelDomain.UNIT_FLOAT: np.float32,
    ChannelDomain.BYTE: int,
}

domain_zero = {
    ChannelDomain.UNIT_FLOAT: np.float32(0.0),
    ChannelDomain.BYTE: 0,
}

# bool is excluded explicitly where these are checked
domain_valid_types = {
    ChannelDomain.UNIT_FLOAT: (int, float, np.integer, np.floating),
    ChannelDomain.BYTE: (int, np.integer),
}

BYTE_MASK = 0xFF
U32_MAX = 0xFFFFFFFF
