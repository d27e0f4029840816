"""Per-channel publishing defaults read from data/channel_meta/<channel>.txt.

File format (one ``key = value`` per line):

    # comment
    title_suffix = " | Daily"
    description = First line
    continuation lines belong to description until the next key
    tags = small success, mindset
    tags_extra = #shorts #mindset

Values may be wrapped in double or single quotes to keep leading or
trailing spaces. Unknown keys are ignored; a missing file yields the
built-in defaults.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from shorts_publisher.constants import (
    CHANNEL_META_EXTENSION,
    DESCRIPTION_MAX_LENGTH,
    TAGS_MAX_COUNT,
)

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "📌 Daily 10s 'Small Success'. Save and try one today."
DEFAULT_TAGS: tuple[str, ...] = ("small success", "mindset", "self help")

_KEY_LINE = re.compile(r"^([a-zA-Z_]+)\s*=\s*(.*)$")
_KNOWN_KEYS = ("title_suffix", "description", "tags", "tags_extra")


@dataclass(frozen=True)
class ChannelProfile:
    """Immutable channel defaults, loaded once per run."""

    channel: str
    title_suffix: str = ""
    description: str = DEFAULT_DESCRIPTION
    tags: tuple[str, ...] = field(default=DEFAULT_TAGS)
    tags_extra: str = ""
    source: Optional[Path] = None


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _split_tags(value: str) -> tuple[str, ...]:
    return tuple(t.strip() for t in value.split(",") if t.strip())


def parse_channel_meta(channel: str, text: str, source: Optional[Path] = None) -> ChannelProfile:
    """Parse channel metadata text into a ChannelProfile.

    Pure function.
    """
    values: dict = {
        "title_suffix": "",
        "description": DEFAULT_DESCRIPTION,
        "tags": DEFAULT_TAGS,
        "tags_extra": "",
    }

    current_key: Optional[str] = None
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        match = _KEY_LINE.match(line)
        if match:
            current_key = match.group(1)
            value = match.group(2)
            if current_key == "tags":
                values["tags"] = _split_tags(value)
            elif current_key in _KNOWN_KEYS:
                values[current_key] = _unquote(value)
            continue

        if current_key == "description":
            values["description"] += f"\n{line}"

    return ChannelProfile(
        channel=channel,
        title_suffix=values["title_suffix"],
        description=values["description"][:DESCRIPTION_MAX_LENGTH],
        tags=tuple(values["tags"])[:TAGS_MAX_COUNT],
        tags_extra=values["tags_extra"],
        source=source,
    )


def get_channel_meta_path(channel_meta_dir: Path, channel: str) -> Path:
    """Pure function."""
    return channel_meta_dir / f"{channel}{CHANNEL_META_EXTENSION}"


def load_channel_profile(channel_meta_dir: Path, channel: str) -> ChannelProfile:
    """Load a channel profile, falling back to defaults when no file exists."""
    meta_path = get_channel_meta_path(channel_meta_dir, channel)
    if not meta_path.exists():
        logger.info(f"[channel meta] no file for '{channel}', using defaults")
        return ChannelProfile(channel=channel)

    text = meta_path.read_text(encoding="utf-8")
    profile = parse_channel_meta(channel, text, source=meta_path)
    logger.info(
        f"[channel meta] {channel}: suffix={profile.title_suffix!r} tags={len(profile.tags)}"
    )
    return profile
