"""Preflight validation - local checks run before any network cost.

Rules run in a fixed order and the first violation wins:

1. exists   - path exists and is a regular file
2. size     - at least min_size bytes
3. cooldown - not modified within the last mtime_cooldown_s seconds
4. probe    - ffprobe succeeds and finds a video stream
5. duration - finite and within [min_dur, max_dur]
6. resolution - at least min_w x min_h
7. black    - optional, no black segment reported by blackdetect
"""

from __future__ import annotations

import asyncio
import logging
import math
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from shorts_publisher.config import PreflightSettings

from .probe import (
    FFprobeMediaProbe,
    MediaProbe,
    ProbeError,
    extract_duration,
    first_video_stream,
)

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """A preflight rule rejected the file."""

    def __init__(self, rule: str, message: str):
        self.rule = rule
        self.message = message
        super().__init__(f"{rule}: {message}")


@dataclass(frozen=True)
class PreflightReport:
    """Facts gathered about a file that passed preflight."""

    duration: float
    width: int
    height: int
    size: int


class PreflightValidator:
    """Check a media file against the configured thresholds."""

    def __init__(
        self,
        settings: Optional[PreflightSettings] = None,
        probe: Optional[MediaProbe] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.settings = settings or PreflightSettings()
        self.probe = probe or FFprobeMediaProbe()
        self.clock = clock

    def validate(self, path: Path) -> PreflightReport:
        """Run all rules against a file.

        Raises:
            ValidationError: For the first violated rule.
        """
        s = self.settings

        if not path.exists() or not path.is_file():
            raise ValidationError("exists", f"not a regular file: {path}")

        stat = path.stat()
        if stat.st_size < s.min_size:
            raise ValidationError("size", f"too small: {stat.st_size} bytes < {s.min_size}")

        age = self.clock() - stat.st_mtime
        if age < s.mtime_cooldown_s:
            raise ValidationError(
                "cooldown", f"modified {age:.0f}s ago (< {s.mtime_cooldown_s}s)"
            )

        try:
            data = self.probe.probe(path)
        except ProbeError as e:
            raise ValidationError("probe", str(e)) from e

        stream = first_video_stream(data)
        if stream is None:
            raise ValidationError("probe", "no video stream")

        duration = extract_duration(data, stream)
        if not math.isfinite(duration) or duration < s.min_dur or duration > s.max_dur:
            raise ValidationError(
                "duration", f"duration {duration:.2f}s outside [{s.min_dur}, {s.max_dur}]"
            )

        width = int(stream.get("width") or 0)
        height = int(stream.get("height") or 0)
        if width < s.min_w or height < s.min_h:
            raise ValidationError(
                "resolution", f"resolution {width}x{height} < {s.min_w}x{s.min_h}"
            )

        if s.check_black:
            try:
                segments = self.probe.count_black_segments(path)
            except ProbeError as e:
                raise ValidationError("black", str(e)) from e
            if segments > 0:
                raise ValidationError("black", f"{segments} black segment(s) detected")

        report = PreflightReport(
            duration=duration, width=width, height=height, size=stat.st_size
        )
        logger.debug(f"[preflight ok] {path.name}: {report}")
        return report

    async def validate_async(self, path: Path) -> PreflightReport:
        """Run validate() in a worker thread (probe is a blocking subprocess)."""
        return await asyncio.to_thread(self.validate, path)
