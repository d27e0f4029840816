"""Duplicate title guard seeded from the channel's recent uploads.

Titles are compared after normalization (lowercase, whitespace
collapsed, trimmed). The guard belongs to one run and is only mutated
by the sequential upload loop.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Iterable, Protocol

from shorts_publisher.constants import RECENT_TITLES_LIMIT

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize_title(title: str) -> str:
    """Normalize a title for duplicate comparison.

    Pure function.

    Example:
        normalize_title("  Tired   Today Go SLOW ") -> "tired today go slow"
    """
    return _WHITESPACE.sub(" ", (title or "").lower()).strip()


class TitleHistorySource(Protocol):
    """Anything that can list a channel's recent titles (blocking)."""

    def recent_titles(self, limit: int) -> list[str]: ...


class DuplicateGuard:
    """Set of normalized titles already used on the channel."""

    def __init__(self, titles: Iterable[str] = ()):
        self._titles: set[str] = set()
        for title in titles:
            self.record(title)

    def is_duplicate(self, title: str) -> bool:
        return normalize_title(title) in self._titles

    def record(self, title: str) -> None:
        normalized = normalize_title(title)
        if normalized:
            self._titles.add(normalized)

    def __len__(self) -> int:
        return len(self._titles)

    def __contains__(self, title: str) -> bool:
        return self.is_duplicate(title)

    @classmethod
    async def from_history(
        cls,
        source: TitleHistorySource,
        limit: int = RECENT_TITLES_LIMIT,
    ) -> "DuplicateGuard":
        """Seed a guard from platform history.

        A failing fetch is not fatal: the guard starts empty and a
        warning is logged.
        """
        if limit <= 0:
            return cls()
        try:
            titles = await asyncio.to_thread(source.recent_titles, limit)
        except Exception as e:
            logger.warning(f"[recent titles] fetch failed, duplicate guard starts empty: {e}")
            return cls()

        guard = cls(titles)
        logger.info(f"[recent titles] loaded {len(guard)} title(s)")
        return guard
