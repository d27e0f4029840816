"""Unit tests for QueueItem and sidecar parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from shorts_publisher.queue import NotInQueueError, QueueItem, Sidecar, read_sidecar


class TestQueueItemFromPath:
    """Tests for QueueItem.from_path."""

    def test_dated_partition(self, make_queue_file, videos_root):
        """Test channel, date and root are captured from the path."""
        path = make_queue_file("0001.mp4", channel="fr", date="2025-10-15")

        item = QueueItem.from_path(path)

        assert item.channel == "fr"
        assert item.date_partition == "2025-10-15"
        assert item.videos_root == videos_root.resolve()
        assert item.name == "0001.mp4"
        assert item.stem == "0001"

    def test_file_directly_under_queue(self, make_queue_file):
        """Test a file without a date folder gets unknown-date."""
        path = make_queue_file("0002.mp4", date=None)

        item = QueueItem.from_path(path)

        assert item.date_partition == "unknown-date"

    def test_non_date_folder_is_unknown_date(self, videos_root):
        """Test a folder that is not YYYY-MM-DD is not used as partition."""
        path = videos_root / "fr" / "queue" / "later" / "a.mp4"
        path.parent.mkdir(parents=True)
        path.write_bytes(b"x")

        assert QueueItem.from_path(path).date_partition == "unknown-date"

    def test_outside_queue_rejected(self, videos_root):
        """Test a path outside <channel>/queue/ is not eligible."""
        path = videos_root / "fr" / "sent" / "2025-10-15" / "0001.mp4"

        with pytest.raises(NotInQueueError):
            QueueItem.from_path(path)

        assert QueueItem.is_queue_path(path) is False

    def test_wrong_root_rejected(self, make_queue_file, tmp_path):
        """Test videos_root mismatch is rejected."""
        path = make_queue_file()

        with pytest.raises(NotInQueueError):
            QueueItem.from_path(path, videos_root=tmp_path / "elsewhere")

    def test_outcome_dir_mirrors_partition(self, make_queue_file, videos_root):
        """Test outcome folders keep the date partition."""
        item = QueueItem.from_path(make_queue_file())

        assert item.outcome_dir("sent") == videos_root.resolve() / "fr" / "sent" / "2025-10-15"

    def test_sidecar_path(self, make_queue_file):
        """Test sidecar shares the base name."""
        item = QueueItem.from_path(make_queue_file("0007.mp4"))

        assert item.sidecar_path.name == "0007.json"


class TestSidecar:
    """Tests for the Sidecar model."""

    def test_blank_strings_are_absent(self):
        """Test blank title/description become None."""
        sidecar = Sidecar(title="   ", description="")

        assert sidecar.title is None
        assert sidecar.description is None

    def test_single_tag_coerced_to_list(self):
        """Test a scalar tags value becomes a one-element tuple."""
        assert Sidecar(tags="motivation").tags == ("motivation",)

    def test_tags_stringified_and_stripped(self):
        """Test tags are stringified, stripped and blanks dropped."""
        sidecar = Sidecar(tags=[" a ", "", None, 42, "  "])

        assert sidecar.tags == ("a", "42")

    def test_unknown_keys_ignored(self):
        """Test extra keys in the sidecar do not fail parsing."""
        sidecar = Sidecar(title="Hi", voice="adam")

        assert sidecar.title == "Hi"


class TestReadSidecar:
    """Tests for read_sidecar."""

    def test_missing_sidecar(self, make_queue_file):
        """Test no sidecar yields an empty record."""
        item = QueueItem.from_path(make_queue_file())

        assert read_sidecar(item) == Sidecar()

    def test_valid_sidecar(self, make_queue_file):
        """Test fields are read from JSON."""
        path = make_queue_file(sidecar={"title": "Go slow", "tags": ["calm"]})

        sidecar = read_sidecar(QueueItem.from_path(path))

        assert sidecar.title == "Go slow"
        assert sidecar.tags == ("calm",)

    def test_malformed_sidecar_is_absent(self, make_queue_file):
        """Test invalid JSON is treated as no sidecar."""
        path = make_queue_file(sidecar="{not json")

        assert read_sidecar(QueueItem.from_path(path)) == Sidecar()

    def test_non_object_sidecar_is_absent(self, make_queue_file):
        """Test a JSON list is treated as no sidecar."""
        path = make_queue_file(sidecar="[1, 2]")

        assert read_sidecar(QueueItem.from_path(path)) == Sidecar()

    def test_wrong_field_type_is_absent(self, make_queue_file):
        """Test a title that is not a string is treated as no sidecar."""
        path = make_queue_file(sidecar={"title": {"nested": True}})

        assert read_sidecar(QueueItem.from_path(path)) == Sidecar()
