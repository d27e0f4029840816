"""Immutable parameter dataclass for the upload command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class UploadParams:
    """Immutable parameters for an upload run."""

    channel: str
    file: Optional[Path]
    max_count: int
    config_path: Optional[Path]

    @property
    def is_single(self) -> bool:
        return self.file is not None

    @classmethod
    def from_cli(
        cls,
        lang: str = "en",
        file: Optional[str] = None,
        max_count: int = 1,
        config: Optional[str] = None,
    ) -> "UploadParams":
        """Create from CLI arguments with parsing and defaults."""
        return cls(
            channel=lang.strip(),
            file=Path(file) if file else None,
            max_count=max_count,
            config_path=Path(config) if config else None,
        )
