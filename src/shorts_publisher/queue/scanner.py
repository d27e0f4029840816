"""Intake queue scanning - read-only enumeration of queued media files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from shorts_publisher.constants import (
    DATE_PARTITION_PATTERN,
    MEDIA_EXTENSIONS,
    QUEUE_DIR_NAME,
)

from .models import NotInQueueError, QueueItem

logger = logging.getLogger(__name__)


def get_queue_dir(videos_root: Path, channel: str) -> Path:
    """Get the intake queue directory for a channel.

    Pure function.
    """
    return videos_root / channel / QUEUE_DIR_NAME


def list_date_partitions(queue_dir: Path) -> List[Path]:
    """List YYYY-MM-DD partitions, oldest first."""
    if not queue_dir.is_dir():
        return []
    partitions = [
        d for d in queue_dir.iterdir()
        if d.is_dir() and DATE_PARTITION_PATTERN.match(d.name)
    ]
    return sorted(partitions, key=lambda d: d.name)


def _media_files(directory: Path, extensions: Sequence[str]) -> List[Path]:
    allowed = {ext.lower() for ext in extensions}
    files = [
        f for f in directory.iterdir()
        if f.is_file() and f.suffix.lower() in allowed
    ]
    return sorted(files, key=lambda f: f.name)


def scan_queue(
    videos_root: Path,
    channel: str,
    limit: Optional[int] = None,
    media_extensions: Sequence[str] = MEDIA_EXTENSIONS,
) -> List[QueueItem]:
    """Find queued media files for a channel.

    Partitions are visited oldest date first and files are sorted by
    name inside each partition. Does not touch the filesystem beyond
    listing directories.

    Args:
        videos_root: Intake root (e.g. videos/).
        channel: Channel key (e.g. 'fr').
        limit: Maximum number of items. None lists everything.
        media_extensions: Accepted file extensions.

    Returns:
        Ordered list of QueueItem, empty when nothing is queued.
    """
    if limit is not None and limit <= 0:
        return []

    queue_dir = get_queue_dir(videos_root, channel)
    if not queue_dir.is_dir():
        logger.info(f"[scan] no queue directory: {queue_dir}")
        return []

    items: List[QueueItem] = []

    for partition in list_date_partitions(queue_dir):
        for media_path in _media_files(partition, media_extensions):
            try:
                item = QueueItem.from_path(media_path, videos_root=videos_root)
            except NotInQueueError as e:
                logger.warning(f"[scan] skipping {media_path.name}: {e}")
                continue
            items.append(item)
            if limit is not None and len(items) >= limit:
                return items

    return items
