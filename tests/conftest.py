"""Shared pytest fixtures for the age calculator tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from last_calculation import LastCalculationStore


@pytest.fixture
def storage_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the app at a temporary last-calculation file with default settings."""
    path = tmp_path / "last_calculation.json"
    monkeypatch.setenv("AGECALC_STORAGE_PATH", str(path))
    for name in ("MIN_YEAR", "MAX_YEAR", "VERBOSE", "LOG_JSON"):
        monkeypatch.delenv(f"AGECALC_{name}", raising=False)
    return path


@pytest.fixture
def saved_store(storage_path: Path) -> LastCalculationStore:
    """Store with Feb 29, 2000 already saved."""
    store = LastCalculationStore(storage_path)
    store.save(29, 1, 2000)
    return store
