"""Persist the last calculated date so the page can restore it on reload."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import structlog
from pydantic import BaseModel, Field, ValidationError

logger = structlog.get_logger(__name__)


class LastCalculation(BaseModel):
    model_config = {"frozen": True}

    day: int = Field(ge=1, le=31)
    month: int = Field(ge=0, le=11)
    year: int
    timestamp: datetime


class LastCalculationStore:
    """One JSON record on disk; a missing file means nothing was saved."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def save(self, day: int, month: int, year: int, now: datetime | None = None) -> LastCalculation:
        record = LastCalculation(
            day=day,
            month=month,
            year=year,
            timestamp=now or datetime.now(timezone.utc),
        )
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(record.model_dump_json(), encoding="utf-8")
        logger.debug("saved last calculation", path=str(self.path), day=day, month=month, year=year)
        return record

    def load(self) -> LastCalculation | None:
        """Return the saved record, or None if there is none or it is unreadable."""
        if not self.path.is_file():
            return None
        try:
            raw = self.path.read_text(encoding="utf-8")
            return LastCalculation.model_validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            logger.error("error loading last calculation", path=str(self.path), error=str(exc))
            return None

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
