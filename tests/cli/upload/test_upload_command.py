"""Tests for the `shorts upload` command through the Typer runner."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from shorts_publisher.cli import app
from shorts_publisher.cli.upload.params import UploadParams
from shorts_publisher.cli.upload.service import UploadService
from shorts_publisher.config import PreflightSettings, PublisherConfig
from shorts_publisher.history import DuplicateGuard
from shorts_publisher.metadata import ChannelProfile
from shorts_publisher.platforms import PublishError, PublishResult
from shorts_publisher.preflight import PreflightValidator

runner = CliRunner()


@pytest.fixture(autouse=True)
def workspace(tmp_path, monkeypatch):
    """Run commands from tmp_path without touching real logs."""
    monkeypatch.chdir(tmp_path)
    with patch("shorts_publisher.cli.app.setup_logging"):
        yield tmp_path


@pytest.fixture
def credentials_env(monkeypatch):
    monkeypatch.setenv("YT_CLIENT_ID", "cid")
    monkeypatch.setenv("YT_CLIENT_SECRET", "secret")
    monkeypatch.setenv("YT_REFRESH_TOKEN_FR", "token")


@pytest.fixture
def publisher() -> MagicMock:
    mock = MagicMock()
    mock.publish = AsyncMock(
        side_effect=lambda path, record: PublishResult("youtube", "vid-" + path.stem, record.title)
    )
    return mock


@pytest.fixture
def upload_service(fake_probe, publisher) -> UploadService:
    return UploadService(
        config=PublisherConfig(),
        profile=ChannelProfile(channel="fr", title_suffix=" | Daily"),
        guard=DuplicateGuard(),
        publisher=publisher,
        validator=PreflightValidator(PreflightSettings(), probe=fake_probe),
        sleep=AsyncMock(),
    )


def invoke(*args):
    return runner.invoke(app, ["upload", *args])


class TestUploadParams:
    """Tests for UploadParams.from_cli."""

    def test_batch_defaults(self):
        """Test defaults match batch mode with one upload."""
        params = UploadParams.from_cli()

        assert params.channel == "en"
        assert params.max_count == 1
        assert params.is_single is False

    def test_single_mode(self):
        """Test --file switches to single mode."""
        params = UploadParams.from_cli(lang="fr", file="videos/fr/queue/2025-10-15/0001.mp4")

        assert params.is_single is True
        assert params.file.name == "0001.mp4"


class TestUploadCommand:
    """Tests for the upload command."""

    def test_missing_credentials_exit_1(self):
        """Test missing credentials are fatal before any item is touched."""
        result = invoke("--lang", "fr")

        assert result.exit_code == 1
        assert "YT_CLIENT_ID" in result.output

    def test_invalid_channel_exit_1(self, credentials_env):
        """Test a malformed channel key is rejected."""
        assert invoke("--lang", "f/r").exit_code == 1

    def test_invalid_max_exit_1(self, credentials_env):
        """Test --max below 1 is rejected."""
        assert invoke("--lang", "fr", "--max", "0").exit_code == 1

    def test_missing_config_file_exit_1(self, credentials_env):
        """Test an explicit --config path must exist."""
        assert invoke("--lang", "fr", "--config", "nope.yaml").exit_code == 1

    def test_batch_upload(self, credentials_env, make_queue_file, upload_service, workspace):
        """Test batch mode files the item into sent/."""
        make_queue_file("0001.mp4")

        with patch(
            "shorts_publisher.cli.upload.commands.create_upload_service",
            AsyncMock(return_value=upload_service),
        ):
            result = invoke("--lang", "fr", "--max", "1")

        assert result.exit_code == 0, result.output
        assert (workspace / "videos" / "fr" / "sent" / "2025-10-15" / "0001.mp4").exists()
        assert "Uploaded 1/1" in result.output

    def test_empty_batch_exit_0(self, credentials_env, upload_service):
        """Test an empty queue is a clean exit."""
        with patch(
            "shorts_publisher.cli.upload.commands.create_upload_service",
            AsyncMock(return_value=upload_service),
        ):
            result = invoke("--lang", "fr")

        assert result.exit_code == 0
        assert "No files in queue" in result.output

    def test_single_outside_queue_exit_0(self, credentials_env, upload_service, workspace, publisher):
        """Test a --file outside a queue is skipped, not an error."""
        loose = workspace / "loose.mp4"
        loose.write_bytes(b"x")

        with patch(
            "shorts_publisher.cli.upload.commands.create_upload_service",
            AsyncMock(return_value=upload_service),
        ):
            result = invoke("--lang", "fr", "--file", str(loose))

        assert result.exit_code == 0
        assert loose.exists()
        publisher.publish.assert_not_called()

    def test_single_publish_failure_exit_1(self, credentials_env, make_queue_file, upload_service, publisher, workspace):
        """Test a failed publish in single mode files the item and exits 1."""
        path = make_queue_file("0001.mp4")
        publisher.publish.side_effect = PublishError("forbidden", status=403)

        with patch(
            "shorts_publisher.cli.upload.commands.create_upload_service",
            AsyncMock(return_value=upload_service),
        ):
            result = invoke("--lang", "fr", "--file", str(path))

        assert result.exit_code == 1
        assert (workspace / "videos" / "fr" / "failed" / "2025-10-15" / "0001.mp4").exists()

    def test_single_preflight_failure_exit_0(self, credentials_env, make_queue_file, upload_service, workspace):
        """Test a preflight rejection in single mode is not a process failure."""
        path = make_queue_file("0001.mp4", size=10)

        with patch(
            "shorts_publisher.cli.upload.commands.create_upload_service",
            AsyncMock(return_value=upload_service),
        ):
            result = invoke("--lang", "fr", "--file", str(path))

        assert result.exit_code == 0
        assert (workspace / "videos" / "fr" / "failed" / "2025-10-15" / "0001.mp4").exists()
