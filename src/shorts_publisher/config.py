"""Publisher configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shorts_publisher.constants import (
    BATCH_SCAN_MULTIPLIER,
    BATCH_THROTTLE_SECONDS,
    CHANNEL_META_DIR,
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_PRIVACY_STATUS,
    MEDIA_EXTENSIONS,
    PREFLIGHT_MAX_DURATION_SECONDS,
    PREFLIGHT_MIN_DURATION_SECONDS,
    PREFLIGHT_MIN_HEIGHT,
    PREFLIGHT_MIN_SIZE_BYTES,
    PREFLIGHT_MIN_WIDTH,
    PREFLIGHT_MTIME_COOLDOWN_SECONDS,
    PUBLISH_MAX_ATTEMPTS,
    PUBLISH_RETRY_BASE_DELAY_SECONDS,
    RECENT_TITLES_LIMIT,
    VIDEOS_DIR_NAME,
    YOUTUBE_CATEGORY_EDUCATION,
)


class ConfigError(Exception):
    """Fatal configuration problem (e.g. missing credentials).

    Raised before any queue item is touched.
    """


class PreflightSettings(BaseSettings):
    """Preflight thresholds, overridable with PREFLIGHT_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="PREFLIGHT_", extra="ignore")

    min_size: int = Field(default=PREFLIGHT_MIN_SIZE_BYTES, ge=0)
    min_dur: float = Field(default=PREFLIGHT_MIN_DURATION_SECONDS, ge=0)
    max_dur: float = Field(default=PREFLIGHT_MAX_DURATION_SECONDS, gt=0)
    min_w: int = Field(default=PREFLIGHT_MIN_WIDTH, ge=0)
    min_h: int = Field(default=PREFLIGHT_MIN_HEIGHT, ge=0)
    mtime_cooldown_s: int = Field(default=PREFLIGHT_MTIME_COOLDOWN_SECONDS, ge=0)
    check_black: bool = False


class PublishSettings(BaseModel):
    """Remote publish and batch pacing settings."""

    category_id: str = YOUTUBE_CATEGORY_EDUCATION
    privacy_status: str = DEFAULT_PRIVACY_STATUS
    made_for_kids: bool = False
    max_attempts: int = Field(default=PUBLISH_MAX_ATTEMPTS, ge=1)
    retry_base_delay: float = Field(default=PUBLISH_RETRY_BASE_DELAY_SECONDS, ge=0)
    throttle_seconds: float = Field(default=BATCH_THROTTLE_SECONDS, ge=0)
    recent_titles_limit: int = Field(default=RECENT_TITLES_LIMIT, ge=0, le=50)
    scan_multiplier: int = Field(default=BATCH_SCAN_MULTIPLIER, ge=1)


class PublisherConfig(BaseModel):
    """Full publisher configuration."""

    videos_root: Path = Path(VIDEOS_DIR_NAME)
    channel_meta_dir: Path = Path(CHANNEL_META_DIR)
    media_extensions: tuple[str, ...] = MEDIA_EXTENSIONS
    preflight: PreflightSettings = Field(default_factory=PreflightSettings)
    publish: PublishSettings = Field(default_factory=PublishSettings)

    @field_validator("preflight", mode="before")
    @classmethod
    def _merge_preflight_env(cls, value):
        # Partial YAML sections keep PREFLIGHT_* env values for unset keys
        if isinstance(value, dict):
            return PreflightSettings(**value)
        return value


def get_default_config_path(base_dir: Path | None = None) -> Path:
    """Default location of the YAML config (config/publisher.yaml under cwd)."""
    if base_dir is None:
        base_dir = Path.cwd()
    return base_dir / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_publisher_config(config_path: Path | None = None) -> PublisherConfig:
    """Load publisher configuration from YAML file.

    Missing file yields defaults. Values given in the YAML win over
    PREFLIGHT_* environment variables.
    """
    if config_path is None:
        config_path = get_default_config_path()

    if not config_path.exists():
        return PublisherConfig()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file (expected a mapping): {config_path}")

    return PublisherConfig(**data)
