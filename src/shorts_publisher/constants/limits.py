"""Limit constants for the shorts publisher.

This module contains all limits and constraints:
- Platform metadata limits (title, description, tags)
- Preflight thresholds
- Retry, throttle and history settings

AI CONTEXT:
-----------
Metadata limits follow YouTube Data API constraints. Preflight defaults
target vertical Shorts (<= 60s, portrait 720x1280 or better). All preflight
values can be overridden with PREFLIGHT_* environment variables (see
shorts_publisher.config.PreflightSettings).
"""

from typing import Final

# =============================================================================
# PLATFORM METADATA LIMITS
# =============================================================================

TITLE_MAX_LENGTH: Final[int] = 100
"""Maximum title length in characters."""

DESCRIPTION_MAX_LENGTH: Final[int] = 4900
"""Maximum description length (YouTube allows 5000, keep a margin)."""

TAGS_MAX_COUNT: Final[int] = 10
"""Maximum number of tags sent per video."""


# =============================================================================
# PREFLIGHT DEFAULTS
# =============================================================================

PREFLIGHT_MIN_SIZE_BYTES: Final[int] = 1_000_000
"""Files smaller than this are treated as truncated writes."""

PREFLIGHT_MIN_DURATION_SECONDS: Final[float] = 8.0
"""Minimum accepted duration."""

PREFLIGHT_MAX_DURATION_SECONDS: Final[float] = 60.0
"""Maximum accepted duration."""

PREFLIGHT_MIN_WIDTH: Final[int] = 720
"""Minimum video width in pixels."""

PREFLIGHT_MIN_HEIGHT: Final[int] = 1280
"""Minimum video height in pixels."""

PREFLIGHT_MTIME_COOLDOWN_SECONDS: Final[int] = 30
"""A file must not have been modified for this long before it is read."""

PROBE_TIMEOUT_SECONDS: Final[int] = 60
"""Timeout for a single ffprobe invocation."""

BLACKDETECT_TIMEOUT_SECONDS: Final[int] = 300
"""Timeout for the optional ffmpeg blackdetect scan."""

BLACKDETECT_FILTER: Final[str] = "blackdetect=d=0.2:pic_th=0.98"
"""ffmpeg filter used for black segment detection."""


# =============================================================================
# PUBLISHING
# =============================================================================

PUBLISH_MAX_ATTEMPTS: Final[int] = 3
"""Total upload attempts per item (first try included)."""

PUBLISH_RETRY_BASE_DELAY_SECONDS: Final[float] = 1.5
"""Linear backoff base: wait attempt * base between attempts."""

BATCH_THROTTLE_SECONDS: Final[float] = 1.2
"""Pause between successful publishes in batch mode."""

BATCH_SCAN_MULTIPLIER: Final[int] = 10
"""Batch mode scans up to max * multiplier candidates."""

RECENT_TITLES_LIMIT: Final[int] = 50
"""Number of recent channel uploads used to seed duplicate detection."""

YOUTUBE_CATEGORY_EDUCATION: Final[str] = "27"
"""Default YouTube category id."""

DEFAULT_PRIVACY_STATUS: Final[str] = "public"
"""Default privacy status for new uploads."""
