"""Retry policy for remote publish calls.

Pure decision functions over an explicit attempt record. Only rate
limiting (429) and server errors (5xx) are retried; everything else
fails immediately.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorClass(str, Enum):
    """Classification of a failed publish attempt."""

    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    FATAL = "fatal"

    @property
    def is_retryable(self) -> bool:
        return self in (ErrorClass.RATE_LIMITED, ErrorClass.SERVER_ERROR)


@dataclass(frozen=True)
class PublishAttempt:
    """One publish attempt and how it ended."""

    number: int
    succeeded: bool
    status: Optional[int] = None
    classification: Optional[ErrorClass] = None
    error: Optional[str] = None


def classify_status(status: Optional[int]) -> ErrorClass:
    """Map an HTTP status (None when unknown) to an error class.

    Pure function.
    """
    if status == 429:
        return ErrorClass.RATE_LIMITED
    if status is not None and 500 <= status < 600:
        return ErrorClass.SERVER_ERROR
    return ErrorClass.FATAL


def should_retry(classification: ErrorClass, attempt: int, max_attempts: int) -> bool:
    """Whether another attempt follows attempt number `attempt` (1-based).

    Pure function.
    """
    return classification.is_retryable and attempt < max_attempts


def retry_delay(attempt: int, base_delay: float) -> float:
    """Seconds to wait after attempt number `attempt` (1-based).

    Pure function. Linear backoff: 1x, 2x, ... base_delay.
    """
    return attempt * base_delay
