"""Upload feature - publish queued videos."""

from .commands import upload
from .service import BatchSummary, ItemResult, ItemRun, UploadService

__all__ = [
    "upload",
    "UploadService",
    "ItemRun",
    "ItemResult",
    "BatchSummary",
]
