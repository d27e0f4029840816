"""Unit tests for YouTubeClient against a mocked API service."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from shorts_publisher.config import PublishSettings
from shorts_publisher.metadata import PublishableRecord
from shorts_publisher.platforms.youtube import YouTubeAPIError, YouTubeClient, build_upload_body

RECORD = PublishableRecord(title="0001 | Daily", description="desc", tags=("a", "b"))


@pytest.fixture
def service() -> MagicMock:
    return MagicMock()


class TestBuildUploadBody:
    """Tests for build_upload_body."""

    def test_snippet_and_status(self):
        """Test body carries metadata, category and status flags."""
        body = build_upload_body(RECORD, PublishSettings())

        assert body["snippet"] == {
            "title": "0001 | Daily",
            "description": "desc",
            "tags": ["a", "b"],
            "categoryId": "27",
        }
        assert body["status"] == {"privacyStatus": "public", "selfDeclaredMadeForKids": False}

    def test_settings_override(self):
        """Test privacy and category come from settings."""
        body = build_upload_body(RECORD, PublishSettings(privacy_status="unlisted", category_id="22"))

        assert body["status"]["privacyStatus"] == "unlisted"
        assert body["snippet"]["categoryId"] == "22"


class TestInsertVideo:
    """Tests for YouTubeClient.insert_video."""

    def test_resumable_upload_returns_id(self, service):
        """Test chunks are sent until a response with an id arrives."""
        progress = MagicMock()
        progress.progress.return_value = 0.5
        request = MagicMock()
        request.next_chunk.side_effect = [(progress, None), (None, {"id": "abc123"})]
        service.videos.return_value.insert.return_value = request

        with patch("shorts_publisher.platforms.youtube.client.MediaFileUpload") as media:
            video_id = YouTubeClient(service).insert_video(Path("0001.mp4"), RECORD, PublishSettings())

        assert video_id == "abc123"
        media.assert_called_once_with("0001.mp4", chunksize=-1, resumable=True)
        kwargs = service.videos.return_value.insert.call_args.kwargs
        assert kwargs["part"] == "snippet,status"
        assert kwargs["body"]["snippet"]["title"] == "0001 | Daily"

    def test_missing_id_raises(self, service):
        """Test a response without id is an error."""
        request = MagicMock()
        request.next_chunk.return_value = (None, {"kind": "youtube#video"})
        service.videos.return_value.insert.return_value = request

        with patch("shorts_publisher.platforms.youtube.client.MediaFileUpload"):
            with pytest.raises(YouTubeAPIError, match="no video id"):
                YouTubeClient(service).insert_video(Path("0001.mp4"), RECORD, PublishSettings())

    def test_stream_closed_after_success(self, service):
        """Test the media file handle is released once the upload finishes."""
        request = MagicMock()
        request.next_chunk.return_value = (None, {"id": "abc123"})
        service.videos.return_value.insert.return_value = request

        with patch("shorts_publisher.platforms.youtube.client.MediaFileUpload") as media:
            YouTubeClient(service).insert_video(Path("0001.mp4"), RECORD, PublishSettings())

        media.return_value.stream.return_value.close.assert_called_once()

    def test_stream_closed_after_failure(self, service):
        """Test the media file handle is released when a chunk fails."""
        request = MagicMock()
        request.next_chunk.side_effect = ConnectionResetError("reset")
        service.videos.return_value.insert.return_value = request

        with patch("shorts_publisher.platforms.youtube.client.MediaFileUpload") as media:
            with pytest.raises(ConnectionResetError):
                YouTubeClient(service).insert_video(Path("0001.mp4"), RECORD, PublishSettings())

        media.return_value.stream.return_value.close.assert_called_once()


class TestHistory:
    """Tests for channel lookups and recent titles."""

    def test_recent_titles(self, service):
        """Test titles come from search.list on the authenticated channel."""
        service.channels.return_value.list.return_value.execute.return_value = {
            "items": [{"id": "UC123"}]
        }
        service.search.return_value.list.return_value.execute.return_value = {
            "items": [
                {"snippet": {"title": "tired today go slow"}},
                {"snippet": {"title": "0002 | Daily"}},
                {"snippet": {}},
            ]
        }

        titles = YouTubeClient(service).recent_titles(50)

        assert titles == ["tired today go slow", "0002 | Daily"]
        service.search.return_value.list.assert_called_once_with(
            part="snippet", channelId="UC123", order="date", maxResults=50, type="video"
        )

    def test_recent_titles_without_channel(self, service):
        """Test no channel means no history."""
        service.channels.return_value.list.return_value.execute.return_value = {"items": []}

        assert YouTubeClient(service).recent_titles(50) == []
        service.search.assert_not_called()

    def test_channel_title(self, service):
        """Test the authenticated channel title is read from snippet."""
        service.channels.return_value.list.return_value.execute.return_value = {
            "items": [{"snippet": {"title": "Small Success FR"}}]
        }

        assert YouTubeClient(service).channel_title() == "Small Success FR"
