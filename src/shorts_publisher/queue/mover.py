"""Lifecycle mover - files queue items into their terminal directory."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

from shorts_publisher.constants import Outcome

from .models import QueueItem

logger = logging.getLogger(__name__)


class FileSystemMoveError(OSError):
    """A file could not be relocated to its outcome directory."""

    def __init__(self, src: Path, dest: Path, cause: Exception):
        self.src = src
        self.dest = dest
        self.cause = cause
        super().__init__(f"Failed to move {src} -> {dest}: {cause}")


def safe_move(src: Path, dest: Path) -> None:
    """Move a file, falling back to copy-then-delete across devices.

    Raises:
        FileSystemMoveError: If both rename and copy fail.
    """
    dest.parent.mkdir(parents=True, exist_ok=True)
    try:
        os.rename(src, dest)
        return
    except OSError as rename_error:
        logger.debug(f"[move] rename failed ({rename_error}), copying instead")

    try:
        shutil.copy2(src, dest)
        os.unlink(src)
    except OSError as e:
        raise FileSystemMoveError(src, dest, e) from e


def move_to_outcome(item: QueueItem, outcome: Outcome | str) -> Optional[Path]:
    """Relocate a queue item and its sidecar into <root>/<channel>/<outcome>/<date>/.

    A leftover sidecar is filed even when the media file is already gone.
    A missing source file is otherwise a no-op, so calling this twice for
    the same item leaves the filesystem unchanged after the first call.

    Args:
        item: Item captured at discovery time.
        outcome: Terminal outcome folder name.

    Returns:
        New path of the media file, or None when nothing was moved.

    Raises:
        FileSystemMoveError: If the media file could not be moved.
    """
    outcome_value = outcome.value if isinstance(outcome, Outcome) else str(outcome)
    src = item.path
    dest_dir = item.outcome_dir(outcome_value)

    sidecar = item.sidecar_path
    if sidecar.exists():
        safe_move(sidecar, dest_dir / sidecar.name)

    if not src.exists():
        logger.debug(f"[move] source already gone: {src}")
        return None

    dest = dest_dir / src.name
    safe_move(src, dest)

    logger.info(f"[move] {item.name} -> {outcome_value}/{item.date_partition}/")
    return dest
