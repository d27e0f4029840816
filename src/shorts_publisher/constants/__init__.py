"""Global constants package for the shorts publisher.

PACKAGE STRUCTURE:
-----------------
- paths.py    : Queue layout, outcome folders, file patterns
- limits.py   : Metadata limits, preflight thresholds, retry settings
- status.py   : Outcome and item state enums, transition table

USAGE EXAMPLES:
--------------
    from shorts_publisher.constants import TITLE_MAX_LENGTH, Outcome
"""

# =============================================================================
# PATH CONSTANTS
# =============================================================================
from .paths import (
    VIDEOS_DIR_NAME,
    CHANNEL_META_DIR,
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    LOGS_DIR_NAME,
    LOG_FILE_NAME,
    QUEUE_DIR_NAME,
    DATE_PARTITION_PATTERN,
    UNKNOWN_DATE_PARTITION,
    MEDIA_EXTENSIONS,
    SIDECAR_EXTENSION,
    CHANNEL_META_EXTENSION,
)

# =============================================================================
# LIMIT CONSTANTS
# =============================================================================
from .limits import (
    TITLE_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    TAGS_MAX_COUNT,
    PREFLIGHT_MIN_SIZE_BYTES,
    PREFLIGHT_MIN_DURATION_SECONDS,
    PREFLIGHT_MAX_DURATION_SECONDS,
    PREFLIGHT_MIN_WIDTH,
    PREFLIGHT_MIN_HEIGHT,
    PREFLIGHT_MTIME_COOLDOWN_SECONDS,
    PROBE_TIMEOUT_SECONDS,
    BLACKDETECT_TIMEOUT_SECONDS,
    BLACKDETECT_FILTER,
    PUBLISH_MAX_ATTEMPTS,
    PUBLISH_RETRY_BASE_DELAY_SECONDS,
    BATCH_THROTTLE_SECONDS,
    BATCH_SCAN_MULTIPLIER,
    RECENT_TITLES_LIMIT,
    YOUTUBE_CATEGORY_EDUCATION,
    DEFAULT_PRIVACY_STATUS,
)

# =============================================================================
# STATUS ENUMS
# =============================================================================
from .status import (
    Outcome,
    ItemState,
    TERMINAL_STATES,
    ALLOWED_TRANSITIONS,
    OUTCOME_STYLES,
)

__all__ = [
    # Paths
    "VIDEOS_DIR_NAME",
    "CHANNEL_META_DIR",
    "CONFIG_DIR_NAME",
    "CONFIG_FILE_NAME",
    "LOGS_DIR_NAME",
    "LOG_FILE_NAME",
    "QUEUE_DIR_NAME",
    "DATE_PARTITION_PATTERN",
    "UNKNOWN_DATE_PARTITION",
    "MEDIA_EXTENSIONS",
    "SIDECAR_EXTENSION",
    "CHANNEL_META_EXTENSION",
    # Limits
    "TITLE_MAX_LENGTH",
    "DESCRIPTION_MAX_LENGTH",
    "TAGS_MAX_COUNT",
    "PREFLIGHT_MIN_SIZE_BYTES",
    "PREFLIGHT_MIN_DURATION_SECONDS",
    "PREFLIGHT_MAX_DURATION_SECONDS",
    "PREFLIGHT_MIN_WIDTH",
    "PREFLIGHT_MIN_HEIGHT",
    "PREFLIGHT_MTIME_COOLDOWN_SECONDS",
    "PROBE_TIMEOUT_SECONDS",
    "BLACKDETECT_TIMEOUT_SECONDS",
    "BLACKDETECT_FILTER",
    "PUBLISH_MAX_ATTEMPTS",
    "PUBLISH_RETRY_BASE_DELAY_SECONDS",
    "BATCH_THROTTLE_SECONDS",
    "BATCH_SCAN_MULTIPLIER",
    "RECENT_TITLES_LIMIT",
    "YOUTUBE_CATEGORY_EDUCATION",
    "DEFAULT_PRIVACY_STATUS",
    # Status
    "Outcome",
    "ItemState",
    "TERMINAL_STATES",
    "ALLOWED_TRANSITIONS",
    "OUTCOME_STYLES",
]
