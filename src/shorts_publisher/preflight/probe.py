"""Media inspection through ffprobe / ffmpeg subprocesses."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Protocol

from shorts_publisher.constants import (
    BLACKDETECT_FILTER,
    BLACKDETECT_TIMEOUT_SECONDS,
    PROBE_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)


class ProbeError(Exception):
    """ffprobe/ffmpeg could not inspect a file."""


class MediaProbe(Protocol):
    """Anything able to inspect a media file."""

    def probe(self, path: Path) -> dict[str, Any]: ...

    def count_black_segments(self, path: Path) -> int: ...


class FFprobeMediaProbe:
    """Inspect media with the ffprobe and ffmpeg binaries on PATH."""

    def __init__(self, ffprobe_bin: str = "ffprobe", ffmpeg_bin: str = "ffmpeg"):
        self.ffprobe_bin = ffprobe_bin
        self.ffmpeg_bin = ffmpeg_bin

    def probe(self, path: Path) -> dict[str, Any]:
        """Return ffprobe JSON output (streams + format).

        Raises:
            ProbeError: If ffprobe is missing, times out or exits non-zero.
        """
        cmd = [
            self.ffprobe_bin, "-v", "error",
            "-print_format", "json",
            "-show_streams", "-show_format",
            str(path),
        ]
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=PROBE_TIMEOUT_SECONDS
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ProbeError(f"ffprobe failed to run: {e}") from e

        if result.returncode != 0:
            raise ProbeError(f"ffprobe exit {result.returncode}: {result.stderr.strip()}")

        try:
            data = json.loads(result.stdout or "{}")
        except json.JSONDecodeError as e:
            raise ProbeError(f"ffprobe returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ProbeError("ffprobe returned unexpected output")
        return data

    def count_black_segments(self, path: Path) -> int:
        """Run ffmpeg blackdetect and count reported black segments."""
        cmd = [
            self.ffmpeg_bin, "-hide_banner", "-nostats", "-v", "error",
            "-i", str(path),
            "-vf", BLACKDETECT_FILTER,
            "-f", "null", "-",
        ]
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=BLACKDETECT_TIMEOUT_SECONDS
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ProbeError(f"ffmpeg blackdetect failed to run: {e}") from e

        return (result.stderr or "").count("black_start")


def first_video_stream(probe_data: dict[str, Any]) -> dict[str, Any] | None:
    """Pick the first video stream from ffprobe output."""
    for stream in probe_data.get("streams") or []:
        if stream.get("codec_type") == "video":
            return stream
    return None


def extract_duration(probe_data: dict[str, Any], stream: dict[str, Any] | None) -> float:
    """Container duration, else stream duration. NaN when neither parses."""
    candidates = [(probe_data.get("format") or {}).get("duration")]
    if stream is not None:
        candidates.append(stream.get("duration"))

    for value in candidates:
        if value in (None, "", "N/A"):
            continue
        try:
            return float(value)
        except (TypeError, ValueError):
            continue
    return float("nan")
