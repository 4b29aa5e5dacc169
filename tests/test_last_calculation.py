"""Tests for the last-calculation JSON store."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from last_calculation import LastCalculation, LastCalculationStore


@pytest.fixture
def store(tmp_path: Path) -> LastCalculationStore:
    return LastCalculationStore(tmp_path / "state" / "last_calculation.json")


class TestSave:
    def test_creates_parent_directory(self, store: LastCalculationStore) -> None:
        store.save(29, 1, 2000)
        assert store.path.is_file()

    def test_writes_fields(self, store: LastCalculationStore) -> None:
        now = datetime(2024, 3, 1, 10, 15, tzinfo=timezone.utc)
        store.save(29, 1, 2000, now=now)
        data = json.loads(store.path.read_text(encoding="utf-8"))
        assert data["day"] == 29
        assert data["month"] == 1
        assert data["year"] == 2000
        assert datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00")) == now

    def test_stamps_current_time(self, store: LastCalculationStore) -> None:
        before = datetime.now(timezone.utc)
        record = store.save(1, 0, 1990)
        assert record.timestamp >= before

    def test_overwrites_previous(self, store: LastCalculationStore) -> None:
        store.save(1, 0, 1990)
        store.save(2, 3, 1991)
        record = store.load()
        assert record is not None
        assert (record.day, record.month, record.year) == (2, 3, 1991)

    def test_rejects_bad_month(self, store: LastCalculationStore) -> None:
        with pytest.raises(ValidationError):
            store.save(1, 12, 1990)
        assert not store.path.exists()


class TestLoad:
    def test_missing_file(self, store: LastCalculationStore) -> None:
        assert store.load() is None

    def test_round_trip(self, store: LastCalculationStore) -> None:
        saved = store.save(29, 1, 2000)
        assert store.load() == saved

    def test_january_survives(self, store: LastCalculationStore) -> None:
        store.save(15, 0, 1980)
        record = store.load()
        assert record is not None
        assert record.month == 0

    def test_reads_plain_json(self, store: LastCalculationStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text(
            '{"day": 3, "month": 6, "year": 1975, "timestamp": "2024-03-01T10:15:00.000Z"}',
            encoding="utf-8",
        )
        record = store.load()
        assert record == LastCalculation(
            day=3, month=6, year=1975, timestamp=datetime(2024, 3, 1, 10, 15, tzinfo=timezone.utc)
        )

    def test_corrupt_file_is_logged_and_ignored(self, store: LastCalculationStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json", encoding="utf-8")
        with capture_logs() as logs:
            assert store.load() is None
        assert logs[0]["event"] == "error loading last calculation"
        assert logs[0]["log_level"] == "error"

    def test_out_of_range_record_is_ignored(self, store: LastCalculationStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text(
            '{"day": 40, "month": 1, "year": 2000, "timestamp": "2024-03-01T10:15:00+00:00"}',
            encoding="utf-8",
        )
        assert store.load() is None


class TestClear:
    def test_removes_file(self, store: LastCalculationStore) -> None:
        store.save(29, 1, 2000)
        store.clear()
        assert not store.path.exists()
        assert store.load() is None

    def test_missing_file_is_fine(self, store: LastCalculationStore) -> None:
        store.clear()
