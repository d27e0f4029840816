"""Shared test fixtures and configuration.

Provides a temporary intake tree (videos/<channel>/queue/<date>/...),
a fake media probe and environment isolation for the publisher tests.
"""

from __future__ import annotations

import json
import os
import time
from pathlib import Path
from typing import Any, Optional

import pytest

from shorts_publisher.preflight import ProbeError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove PREFLIGHT_* and YT_* variables so defaults apply."""
    for key in list(os.environ):
        if key.startswith("PREFLIGHT_") or key.startswith("YT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def videos_root(tmp_path: Path) -> Path:
    """Intake root inside a temporary directory."""
    root = tmp_path / "videos"
    root.mkdir()
    return root


@pytest.fixture
def make_queue_file(videos_root: Path):
    """Factory creating a queued media file (sparse, so large sizes are cheap).

    Usage:
        path = make_queue_file("0001.mp4", size=2_000_000, age_seconds=300)
    """
    def _make(
        name: str = "0001.mp4",
        channel: str = "fr",
        date: Optional[str] = "2025-10-15",
        size: int = 2_000_000,
        age_seconds: float = 300,
        sidecar: Any = None,
    ) -> Path:
        directory = videos_root / channel / "queue"
        if date:
            directory = directory / date
        directory.mkdir(parents=True, exist_ok=True)

        path = directory / name
        with open(path, "wb") as f:
            f.truncate(size)

        if sidecar is not None:
            sidecar_path = path.with_suffix(".json")
            text = sidecar if isinstance(sidecar, str) else json.dumps(sidecar)
            sidecar_path.write_text(text, encoding="utf-8")

        mtime = time.time() - age_seconds
        os.utime(path, (mtime, mtime))
        return path

    return _make


class FakeProbe:
    """Media probe returning canned ffprobe output."""

    def __init__(
        self,
        duration: Any = "15.0",
        width: int = 1080,
        height: int = 1920,
        black_segments: int = 0,
        error: Optional[str] = None,
        has_video: bool = True,
    ):
        self.duration = duration
        self.width = width
        self.height = height
        self.black_segments = black_segments
        self.error = error
        self.has_video = has_video
        self.probed: list[Path] = []
        self.black_checked: list[Path] = []

    def probe(self, path: Path) -> dict:
        self.probed.append(path)
        if self.error:
            raise ProbeError(self.error)
        streams = [{"codec_type": "audio", "codec_name": "aac"}]
        if self.has_video:
            streams.append({
                "codec_type": "video",
                "codec_name": "h264",
                "width": self.width,
                "height": self.height,
            })
        return {"streams": streams, "format": {"duration": self.duration}}

    def count_black_segments(self, path: Path) -> int:
        self.black_checked.append(path)
        return self.black_segments


@pytest.fixture
def fake_probe() -> FakeProbe:
    """Probe reporting a valid 15s 1080x1920 video."""
    return FakeProbe()


@pytest.fixture
def probe_factory():
    """Build a FakeProbe with custom output, e.g. probe_factory(duration="4.0")."""
    return FakeProbe
