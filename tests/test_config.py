"""Unit tests for publisher configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from shorts_publisher.config import (
    ConfigError,
    PublisherConfig,
    get_default_config_path,
    load_publisher_config,
)


class TestLoadPublisherConfig:
    """Tests for load_publisher_config."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """Test an absent file yields the built-in defaults."""
        config = load_publisher_config(tmp_path / "publisher.yaml")

        assert config == PublisherConfig()
        assert config.videos_root == Path("videos")
        assert config.channel_meta_dir == Path("data/channel_meta")
        assert config.publish.category_id == "27"
        assert config.publish.privacy_status == "public"
        assert config.publish.max_attempts == 3
        assert config.publish.throttle_seconds == 1.2

    def test_yaml_values(self, tmp_path):
        """Test values from YAML override defaults."""
        path = tmp_path / "publisher.yaml"
        path.write_text(
            "videos_root: /data/videos\n"
            "publish:\n"
            "  privacy_status: unlisted\n"
            "preflight:\n"
            "  check_black: true\n",
            encoding="utf-8",
        )

        config = load_publisher_config(path)

        assert config.videos_root == Path("/data/videos")
        assert config.publish.privacy_status == "unlisted"
        assert config.preflight.check_black is True
        assert config.preflight.min_size == 1_000_000

    def test_partial_preflight_keeps_env(self, tmp_path, monkeypatch):
        """Test unset YAML preflight keys still read PREFLIGHT_* env vars."""
        monkeypatch.setenv("PREFLIGHT_MIN_W", "540")
        path = tmp_path / "publisher.yaml"
        path.write_text("preflight:\n  min_h: 960\n", encoding="utf-8")

        config = load_publisher_config(path)

        assert config.preflight.min_w == 540
        assert config.preflight.min_h == 960

    def test_non_mapping_rejected(self, tmp_path):
        """Test a YAML list is a ConfigError."""
        path = tmp_path / "publisher.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_publisher_config(path)

    def test_empty_file_gives_defaults(self, tmp_path):
        """Test an empty YAML file yields defaults."""
        path = tmp_path / "publisher.yaml"
        path.write_text("", encoding="utf-8")

        assert load_publisher_config(path) == PublisherConfig()

    def test_default_path(self, tmp_path):
        """Test the default location under a base dir."""
        assert get_default_config_path(tmp_path) == tmp_path / "config" / "publisher.yaml"
