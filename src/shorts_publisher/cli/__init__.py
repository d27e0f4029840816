"""CLI package - feature-based command modules.

- core/: Shared utilities (console, Result types, validators, paths)
- upload/: Publish queued videos
- queue/: Inspect the intake queue
- channel/: Inspect channel metadata defaults

Usage:
    shorts upload --lang fr --max 2
    shorts upload --lang fr --file videos/fr/queue/2025-10-15/0001.mp4
    python -m shorts_publisher --help
"""

from .app import app, main

__all__ = ["app", "main"]
