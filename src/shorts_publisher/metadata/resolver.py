"""Merge channel defaults and sidecar overrides into a publishable record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from shorts_publisher.constants import (
    DESCRIPTION_MAX_LENGTH,
    TAGS_MAX_COUNT,
    TITLE_MAX_LENGTH,
)
from shorts_publisher.queue.models import Sidecar

from .channel import ChannelProfile


@dataclass(frozen=True)
class PublishableRecord:
    """Title, description and tags exactly as sent to the platform."""

    title: str
    description: str
    tags: tuple[str, ...]


def apply_title_suffix(title: str, suffix: str, max_length: int = TITLE_MAX_LENGTH) -> str:
    """Append a suffix once, keeping the result within max_length.

    A title that already contains the suffix is only truncated. When the
    suffix would not fit, the base is shortened so the suffix survives.
    Applying this to its own output returns the same string.
    """
    if not suffix or len(suffix) >= max_length:
        return title[:max_length]

    if suffix in title:
        truncated = title[:max_length]
        if suffix in truncated:
            return truncated

    return title[: max_length - len(suffix)] + suffix


def unique_tags(tags: Iterable[str], limit: int = TAGS_MAX_COUNT) -> tuple[str, ...]:
    """De-duplicate preserving first occurrence, capped at limit."""
    seen: set[str] = set()
    result: list[str] = []
    for tag in tags:
        if tag in seen:
            continue
        seen.add(tag)
        result.append(tag)
    return tuple(result[:limit])


def resolve_record(
    stem: str,
    profile: ChannelProfile,
    sidecar: Optional[Sidecar] = None,
) -> PublishableRecord:
    """Resolve the record for one media file.

    Pure function: identical inputs give identical records.

    Args:
        stem: Media file name without extension.
        profile: Channel defaults.
        sidecar: Optional per-file override.
    """
    sidecar = sidecar or Sidecar()

    title = apply_title_suffix(sidecar.title or stem, profile.title_suffix)

    description = sidecar.description or profile.description or ""
    if profile.tags_extra:
        description = f"{description}\n{profile.tags_extra}"
    description = description[:DESCRIPTION_MAX_LENGTH]

    tags = unique_tags(sidecar.tags if sidecar.tags else profile.tags)

    return PublishableRecord(title=title, description=description, tags=tags)
