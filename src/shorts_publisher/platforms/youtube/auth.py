"""YouTube OAuth credentials from environment variables.

Environment variables:
    YT_CLIENT_ID            OAuth client id (shared by all channels)
    YT_CLIENT_SECRET        OAuth client secret
    YT_REFRESH_TOKEN_<CH>   Refresh token for one channel (e.g. YT_REFRESH_TOKEN_FR)
    YT_REFRESH_TOKEN        Fallback refresh token
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from shorts_publisher.config import ConfigError

logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"
FALLBACK_TOKEN_ENV = "YT_REFRESH_TOKEN"


def channel_token_env(channel: str) -> str:
    """Name of the per-channel refresh token variable.

    Pure function.

    Example:
        channel_token_env("fr") -> "YT_REFRESH_TOKEN_FR"
    """
    return f"{FALLBACK_TOKEN_ENV}_{(channel or 'en').upper()}"


@dataclass(frozen=True)
class YouTubeCredentials:
    """OAuth client + refresh token for one channel."""

    client_id: str
    client_secret: str
    refresh_token: str
    token_env: str

    @classmethod
    def from_env(
        cls,
        channel: str,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "YouTubeCredentials":
        """Read credentials for a channel.

        Raises:
            ConfigError: Naming every missing variable.
        """
        env = os.environ if environ is None else environ
        channel_env = channel_token_env(channel)

        client_id = env.get("YT_CLIENT_ID", "").strip()
        client_secret = env.get("YT_CLIENT_SECRET", "").strip()

        token_env = channel_env
        refresh_token = env.get(channel_env, "").strip()
        if not refresh_token:
            token_env = FALLBACK_TOKEN_ENV
            refresh_token = env.get(FALLBACK_TOKEN_ENV, "").strip()

        missing = []
        if not client_id:
            missing.append("YT_CLIENT_ID")
        if not client_secret:
            missing.append("YT_CLIENT_SECRET")
        if not refresh_token:
            missing.append(f"{channel_env} (or {FALLBACK_TOKEN_ENV})")

        if missing:
            raise ConfigError(f"YouTube credentials missing: {', '.join(missing)}")

        return cls(
            client_id=client_id,
            client_secret=client_secret,
            refresh_token=refresh_token,
            token_env=token_env,
        )

    def to_google_credentials(self) -> Credentials:
        # No scopes: the refresh token keeps the scopes it was granted with
        return Credentials(
            token=None,
            refresh_token=self.refresh_token,
            token_uri=TOKEN_URI,
            client_id=self.client_id,
            client_secret=self.client_secret,
            scopes=None,
        )


def build_youtube_service(credentials: YouTubeCredentials) -> Any:
    """Build a YouTube Data API v3 service object."""
    logger.info(f"[yt auth] using {credentials.token_env}")
    return build(
        "youtube",
        "v3",
        credentials=credentials.to_google_credentials(),
        cache_discovery=False,
    )
