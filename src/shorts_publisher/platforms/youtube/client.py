"""Thin blocking wrapper around the YouTube Data API v3 service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from googleapiclient.http import MediaFileUpload

from shorts_publisher.config import PublishSettings
from shorts_publisher.metadata import PublishableRecord

logger = logging.getLogger(__name__)


class YouTubeAPIError(Exception):
    """The API answered without the data we need (e.g. no video id)."""


def build_upload_body(record: PublishableRecord, settings: PublishSettings) -> dict[str, Any]:
    """Request body for videos.insert.

    Pure function.
    """
    return {
        "snippet": {
            "title": record.title,
            "description": record.description,
            "tags": list(record.tags),
            "categoryId": settings.category_id,
        },
        "status": {
            "privacyStatus": settings.privacy_status,
            "selfDeclaredMadeForKids": bool(settings.made_for_kids),
        },
    }


class YouTubeClient:
    """Blocking API calls. Run them through asyncio.to_thread."""

    def __init__(self, service: Any):
        self.service = service
        self._channel_id: Optional[str] = None

    def insert_video(
        self,
        video_path: Path,
        record: PublishableRecord,
        settings: PublishSettings,
    ) -> str:
        """Upload one video (resumable) and return its id.

        Raises:
            googleapiclient.errors.HttpError: On API errors.
            YouTubeAPIError: If the response carries no video id.
        """
        media = MediaFileUpload(str(video_path), chunksize=-1, resumable=True)
        try:
            request = self.service.videos().insert(
                part="snippet,status",
                body=build_upload_body(record, settings),
                media_body=media,
            )

            response = None
            while response is None:
                status, response = request.next_chunk()
                if status is not None:
                    logger.debug(f"[upload] {video_path.name}: {int(status.progress() * 100)}%")
        finally:
            # Handle must be closed before the mover renames the file
            media.stream().close()

        video_id = (response or {}).get("id")
        if not video_id:
            raise YouTubeAPIError(f"no video id in response: {response}")
        return str(video_id)

    def channel_id(self) -> Optional[str]:
        """Id of the authenticated channel (cached)."""
        if self._channel_id is None:
            response = self.service.channels().list(part="id", mine=True).execute()
            items = response.get("items") or []
            if items:
                self._channel_id = items[0].get("id")
        return self._channel_id

    def channel_title(self) -> Optional[str]:
        """Title of the authenticated channel, None when unknown."""
        response = self.service.channels().list(part="snippet", mine=True).execute()
        items = response.get("items") or []
        if not items:
            return None
        return (items[0].get("snippet") or {}).get("title")

    def recent_titles(self, limit: int) -> list[str]:
        """Titles of the channel's most recent uploads, newest first."""
        channel_id = self.channel_id()
        if not channel_id:
            return []

        response = self.service.search().list(
            part="snippet",
            channelId=channel_id,
            order="date",
            maxResults=max(1, min(limit, 50)),
            type="video",
        ).execute()

        titles = []
        for item in response.get("items") or []:
            title = (item.get("snippet") or {}).get("title")
            if title:
                titles.append(title)
        return titles
