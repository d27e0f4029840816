"""YouTube Data API v3 platform implementation."""

from .auth import (
    FALLBACK_TOKEN_ENV,
    YouTubeCredentials,
    build_youtube_service,
    channel_token_env,
)
from .client import YouTubeAPIError, YouTubeClient, build_upload_body
from .publisher import YouTubePublisher, extract_status

__all__ = [
    "YouTubeCredentials",
    "build_youtube_service",
    "channel_token_env",
    "FALLBACK_TOKEN_ENV",
    "YouTubeClient",
    "YouTubeAPIError",
    "build_upload_body",
    "YouTubePublisher",
    "extract_status",
]
