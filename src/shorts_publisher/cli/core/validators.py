"""Pure validation functions for CLI arguments."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Mapping, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from shorts_publisher.config import ConfigError, PublisherConfig, load_publisher_config
from shorts_publisher.platforms.youtube import YouTubeCredentials

from .types import Failure, Result, Success

_CHANNEL_KEY = re.compile(r"^[A-Za-z0-9_-]+$")


def _list_channels(videos_root: Path) -> List[str]:
    if not videos_root.is_dir():
        return []
    return sorted(d.name for d in videos_root.iterdir() if d.is_dir())


def validate_channel(channel: str, videos_root: Optional[Path] = None) -> Result[str]:
    """Validate a channel key (e.g. 'fr').

    Pure function - only reads filesystem, no side effects.

    Args:
        channel: Channel key as given on the command line
        videos_root: Optional intake root, used to list known channels

    Returns:
        Result containing the channel key or failure
    """
    if not channel or not _CHANNEL_KEY.match(channel):
        details = {"allowed": "letters, digits, '-' and '_'"}
        if videos_root is not None:
            details["available"] = _list_channels(videos_root)
        return Failure(f"Invalid channel: {channel!r}", details)
    return Success(channel)


def validate_max_count(max_count: int) -> Result[int]:
    """Validate the batch size.

    Pure function - no side effects.
    """
    if max_count < 1:
        return Failure(
            f"--max must be at least 1 (got {max_count})",
            {"max": max_count},
        )
    return Success(max_count)


def validate_credentials(
    channel: str,
    environ: Optional[Mapping[str, str]] = None,
) -> Result[YouTubeCredentials]:
    """Validate that YouTube credentials are present for a channel.

    Pure function - only reads environment, no side effects.
    """
    try:
        return Success(YouTubeCredentials.from_env(channel, environ))
    except ConfigError as e:
        return Failure(str(e), {"hint": "set them in .env or the environment"})


def validate_config(config_path: Optional[Path] = None) -> Result[PublisherConfig]:
    """Load and validate the publisher config.

    Only reads the filesystem, no side effects. An explicit path must
    exist; the default path may be absent (defaults apply).
    """
    if config_path is not None and not config_path.exists():
        return Failure(f"Config file not found: {config_path}", {"path": str(config_path)})

    try:
        return Success(load_publisher_config(config_path))
    except (ConfigError, PydanticValidationError, yaml.YAMLError) as e:
        return Failure(
            "Invalid configuration",
            {"path": str(config_path or "config/publisher.yaml"), "reason": str(e)},
        )
