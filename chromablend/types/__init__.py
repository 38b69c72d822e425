from .channel_domain import ChannelDomain
from .color_types import Channel, ChannelVector, ColorMode

__all__ = ["ChannelDomain", "Channel", "ChannelVector", "ColorMode"]
