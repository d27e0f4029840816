"""Stateless service for queue listing."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Sequence

from shorts_publisher.constants import MEDIA_EXTENSIONS
from shorts_publisher.queue import QueueItem, scan_queue


@dataclass(frozen=True)
class QueuedVideo:
    """Information about a queued video."""

    item: QueueItem
    size_bytes: int
    age_seconds: float
    has_sidecar: bool
    cooling_down: bool


def find_queued_videos(
    videos_root: Path,
    channel: str,
    cooldown_seconds: float,
    media_extensions: Sequence[str] = MEDIA_EXTENSIONS,
    clock: Callable[[], float] = time.time,
) -> List[QueuedVideo]:
    """List every queued video for a channel, in upload order.

    Args:
        videos_root: Intake root directory
        channel: Channel key
        cooldown_seconds: Preflight mtime cooldown
        media_extensions: Accepted extensions
        clock: Time source

    Returns:
        List of QueuedVideo, oldest date first
    """
    now = clock()
    videos = []
    for item in scan_queue(videos_root, channel, None, media_extensions):
        stat = item.path.stat()
        age = now - stat.st_mtime
        videos.append(QueuedVideo(
            item=item,
            size_bytes=stat.st_size,
            age_seconds=age,
            has_sidecar=item.sidecar_path.exists(),
            cooling_down=age < cooldown_seconds,
        ))
    return videos
