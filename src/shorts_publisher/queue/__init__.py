"""Intake queue: discovery, sidecars and terminal filing."""

from .models import NotInQueueError, QueueItem, Sidecar, read_sidecar
from .mover import FileSystemMoveError, move_to_outcome, safe_move
from .scanner import get_queue_dir, list_date_partitions, scan_queue

__all__ = [
    "QueueItem",
    "Sidecar",
    "NotInQueueError",
    "read_sidecar",
    "scan_queue",
    "get_queue_dir",
    "list_date_partitions",
    "move_to_outcome",
    "safe_move",
    "FileSystemMoveError",
]
