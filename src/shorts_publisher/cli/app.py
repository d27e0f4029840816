"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from shorts_publisher.constants import LOG_FILE_NAME

from .core.paths import get_logs_dir

# Load environment variables from .env file
load_dotenv()

PACKAGE_LOGGER = "shorts_publisher"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

# Create Typer app
app = typer.Typer(
    name="shorts",
    help="Publish queued short videos to YouTube",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands from feature modules."""
    from .upload.commands import upload

    app.command(name="upload")(upload)

    from .queue.commands import queue

    app.command(name="queue")(queue)

    from .channel.commands import channel

    app.command(name="channel")(channel)


def setup_logging(log_dir: Optional[Path] = None, level: int = logging.INFO) -> Path:
    """Configure logging for CLI.

    - Suppresses console output from the root logger and google libraries
    - Writes the package log to logs/publisher.log

    Returns:
        Path of the log file.
    """
    if log_dir is None:
        log_dir = get_logs_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    for logger_name in ["googleapiclient", "google_auth_httplib2", "urllib3", "asyncio"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.propagate = False
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers = []

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(file_handler)

    return log_file


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to the log file"),
) -> None:
    """Publish queued short videos to YouTube."""
    setup_logging(level=logging.DEBUG if verbose else logging.INFO)


def main() -> None:
    """Console script entry point."""
    app()


# Register all commands
register_commands()
