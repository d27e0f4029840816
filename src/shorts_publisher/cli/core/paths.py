"""Path utilities for CLI - pure functions for path manipulation."""

from __future__ import annotations

from pathlib import Path

from shorts_publisher.constants import LOG_FILE_NAME, LOGS_DIR_NAME


def resolve_under(path: Path, base_dir: Path | None = None) -> Path:
    """Resolve a relative path against base_dir (defaults to cwd).

    Pure function.
    """
    if path.is_absolute():
        return path
    if base_dir is None:
        base_dir = Path.cwd()
    return base_dir / path


def get_logs_dir(base_dir: Path | None = None) -> Path:
    """Get the logs directory.

    Pure function.

    Args:
        base_dir: Base directory (defaults to cwd)

    Returns:
        Path to logs directory
    """
    if base_dir is None:
        base_dir = Path.cwd()
    return base_dir / LOGS_DIR_NAME


def get_log_file(base_dir: Path | None = None) -> Path:
    """Pure function."""
    return get_logs_dir(base_dir) / LOG_FILE_NAME
