"""Queue feature - inspect the intake queue."""

from .commands import queue
from .display import show_queue_table
from .service import QueuedVideo, find_queued_videos

__all__ = [
    "queue",
    "show_queue_table",
    "QueuedVideo",
    "find_queued_videos",
]
