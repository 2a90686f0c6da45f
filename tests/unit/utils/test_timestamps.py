"""Tests for timestamp helpers."""

from datetime import UTC, datetime, timedelta, timezone

from resume_reviewer.utils.timestamps import (
    filename_timestamp,
    next_available_path,
    utc_timestamp,
)


class TestUtcTimestamp:
    def test_millisecond_precision(self):
        moment = datetime(2024, 1, 1, 9, 30, 0, 123456, tzinfo=UTC)

        assert utc_timestamp(moment) == "2024-01-01T09:30:00.123Z"

    def test_converts_to_utc(self):
        moment = datetime(2024, 1, 1, 11, 30, 0, tzinfo=timezone(timedelta(hours=2)))

        assert utc_timestamp(moment) == "2024-01-01T09:30:00.000Z"

    def test_string_order_is_chronological(self):
        earlier = utc_timestamp(datetime(2024, 1, 1, 9, 59, 59, 999000, tzinfo=UTC))
        later = utc_timestamp(datetime(2024, 1, 1, 10, 0, 0, tzinfo=UTC))

        assert earlier < later


class TestFilenameTimestamp:
    def test_truncates_to_seconds(self):
        assert filename_timestamp("2024-01-01T09:30:00.123Z") == "2024-01-01T09-30-00"


class TestNextAvailablePath:
    def test_free_path_is_returned(self, tmp_path):
        path = tmp_path / "result.md"

        assert next_available_path(path) == path

    def test_numbers_taken_paths(self, tmp_path):
        (tmp_path / "result.md").write_text("1", encoding="utf-8")
        (tmp_path / "result-2.md").write_text("2", encoding="utf-8")

        assert next_available_path(tmp_path / "result.md") == tmp_path / "result-3.md"
