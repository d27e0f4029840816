"""Platform publishers.

Currently only YouTube is implemented; the base classes keep the
upload service independent of it.
"""

from .base import PlatformPublisher, ProgressCallback, PublishError, PublishResult
from .retry import ErrorClass, PublishAttempt, classify_status, retry_delay, should_retry

__all__ = [
    "PlatformPublisher",
    "ProgressCallback",
    "PublishError",
    "PublishResult",
    "ErrorClass",
    "PublishAttempt",
    "classify_status",
    "retry_delay",
    "should_retry",
]
