"""Path-related constants for the shorts publisher.

This module contains the directory layout and file naming conventions:
- Intake queue and outcome folders
- Date partition format
- Media and sidecar extensions

AI CONTEXT:
-----------
The intake layout is channel-scoped and date-partitioned:
  videos/<channel>/queue/YYYY-MM-DD/<name>.mp4
  videos/<channel>/queue/YYYY-MM-DD/<name>.json   (optional sidecar)

Outcome folders mirror the queue partition:
  videos/<channel>/{sent,failed,dups}/YYYY-MM-DD/<name>.mp4

A file's folder IS its state. Nothing else is persisted.
"""

import re
from typing import Final

# =============================================================================
# MAIN DIRECTORIES
# =============================================================================

VIDEOS_DIR_NAME: Final[str] = "videos"
"""Default intake root, relative to the working directory."""

CHANNEL_META_DIR: Final[str] = "data/channel_meta"
"""Directory holding per-channel metadata files (<channel>.txt)."""

CONFIG_DIR_NAME: Final[str] = "config"
"""Name of the configuration directory."""

CONFIG_FILE_NAME: Final[str] = "publisher.yaml"
"""Optional YAML configuration file inside CONFIG_DIR_NAME."""

LOGS_DIR_NAME: Final[str] = "logs"
"""Name of the logs directory."""

LOG_FILE_NAME: Final[str] = "publisher.log"
"""Log file written by the CLI."""


# =============================================================================
# QUEUE LAYOUT
# =============================================================================

QUEUE_DIR_NAME: Final[str] = "queue"
"""Per-channel folder holding items awaiting publication."""

DATE_PARTITION_PATTERN: Final[re.Pattern] = re.compile(r"^\d{4}-\d{2}-\d{2}$")
"""Date partition folder names (YYYY-MM-DD)."""

UNKNOWN_DATE_PARTITION: Final[str] = "unknown-date"
"""Partition used when a queued file sits outside any date folder."""


# =============================================================================
# FILE PATTERNS
# =============================================================================

MEDIA_EXTENSIONS: Final[tuple[str, ...]] = (".mp4",)
"""Extensions recognized as publishable media."""

SIDECAR_EXTENSION: Final[str] = ".json"
"""Extension of the optional per-file metadata sidecar."""

CHANNEL_META_EXTENSION: Final[str] = ".txt"
"""Extension of channel metadata files."""
