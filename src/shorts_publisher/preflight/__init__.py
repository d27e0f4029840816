"""Preflight checks for queued media files."""

from .probe import FFprobeMediaProbe, MediaProbe, ProbeError
from .validator import PreflightReport, PreflightValidator, ValidationError

__all__ = [
    "PreflightValidator",
    "PreflightReport",
    "ValidationError",
    "FFprobeMediaProbe",
    "MediaProbe",
    "ProbeError",
]
