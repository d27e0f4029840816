"""Data models for queued media files and their sidecars."""

from __future__ import annotations

import json
import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from shorts_publisher.constants import (
    DATE_PARTITION_PATTERN,
    QUEUE_DIR_NAME,
    SIDECAR_EXTENSION,
    UNKNOWN_DATE_PARTITION,
)

logger = logging.getLogger(__name__)


class NotInQueueError(ValueError):
    """Path is not under a <root>/<channel>/queue/ directory."""


def _absolute(path: Path | str) -> Path:
    # Normalizes ".." without following symlinks
    return Path(os.path.abspath(Path(path).expanduser()))


def _find_queue_index(parts: tuple[str, ...]) -> Optional[int]:
    """Index of the last 'queue' segment that has a channel before it and a file after it."""
    for index in range(len(parts) - 2, 0, -1):
        if parts[index] == QUEUE_DIR_NAME:
            return index
    return None


@dataclass(frozen=True)
class QueueItem:
    """One media file awaiting publication.

    Channel and date partition are captured once, at discovery time.
    The item is never mutated; once moved its path is stale.
    """

    path: Path
    channel: str
    date_partition: str
    videos_root: Path

    @classmethod
    def from_path(cls, path: Path | str, videos_root: Path | None = None) -> "QueueItem":
        """Build a QueueItem from a file path.

        Args:
            path: Path to the media file.
            videos_root: Optional intake root the path must lie under.

        Raises:
            NotInQueueError: If the path is not inside an intake queue.
        """
        absolute = _absolute(path)
        parts = absolute.parts

        queue_index = _find_queue_index(parts)
        if queue_index is None or queue_index < 2:
            raise NotInQueueError(f"Not inside an intake queue: {path}")

        root = Path(*parts[: queue_index - 1])
        if videos_root is not None:
            expected_root = _absolute(videos_root)
            if root != expected_root:
                raise NotInQueueError(f"Not under intake root {videos_root}: {path}")

        # videos/<ch>/queue/<date>/<file> or videos/<ch>/queue/<file>
        date_partition = UNKNOWN_DATE_PARTITION
        if len(parts) - queue_index > 2:
            candidate = parts[queue_index + 1]
            if DATE_PARTITION_PATTERN.match(candidate):
                date_partition = candidate

        return cls(
            path=absolute,
            channel=parts[queue_index - 1],
            date_partition=date_partition,
            videos_root=root,
        )

    @staticmethod
    def is_queue_path(path: Path | str) -> bool:
        """Check if a path lies inside a <root>/<channel>/queue/ directory."""
        try:
            QueueItem.from_path(path)
        except NotInQueueError:
            return False
        return True

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        return self.path.stem

    @property
    def sidecar_path(self) -> Path:
        return self.path.with_suffix(SIDECAR_EXTENSION)

    def outcome_dir(self, outcome: str) -> Path:
        """Destination folder for an outcome, mirroring the date partition."""
        return self.videos_root / self.channel / str(outcome) / self.date_partition

    def __str__(self) -> str:
        return f"{self.channel}/{self.date_partition}/{self.name}"


class Sidecar(BaseModel):
    """Optional per-file metadata override written by the content pipeline."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    tags: tuple[str, ...] = ()

    @field_validator("title", "description", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if not isinstance(value, (list, tuple)):
            value = [value]
        tags = []
        for tag in value:
            if tag is None:
                continue
            text = str(tag).strip()
            if text:
                tags.append(text)
        return tuple(tags)


def read_sidecar(item: QueueItem) -> Sidecar:
    """Read the sidecar next to a queue item.

    Missing, unreadable or malformed sidecars are treated as absent.
    """
    sidecar_path = item.sidecar_path
    if not sidecar_path.exists():
        return Sidecar()

    try:
        with open(sidecar_path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("sidecar is not a JSON object")
        return Sidecar(**data)
    except (OSError, ValueError, ValidationError) as e:
        logger.warning(f"[sidecar parse fail] {sidecar_path}: {e}")
        return Sidecar()
