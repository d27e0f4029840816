"""Channel defaults and per-item metadata resolution."""

from .channel import (
    DEFAULT_DESCRIPTION,
    DEFAULT_TAGS,
    ChannelProfile,
    get_channel_meta_path,
    load_channel_profile,
    parse_channel_meta,
)
from .resolver import PublishableRecord, apply_title_suffix, resolve_record, unique_tags

__all__ = [
    "ChannelProfile",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_TAGS",
    "get_channel_meta_path",
    "load_channel_profile",
    "parse_channel_meta",
    "PublishableRecord",
    "apply_title_suffix",
    "resolve_record",
    "unique_tags",
]
