"""Channel feature - inspect channel metadata defaults."""

from .commands import channel
from .display import show_channel_profile

__all__ = ["channel", "show_channel_profile"]
