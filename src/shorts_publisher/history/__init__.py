"""Channel history used for duplicate suppression."""

from .recent_titles import DuplicateGuard, TitleHistorySource, normalize_title

__all__ = [
    "DuplicateGuard",
    "TitleHistorySource",
    "normalize_title",
]
