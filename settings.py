"""Settings for the age calculator.

Priority chain (highest to lowest):
  1. Init kwargs
  2. Env vars — ``AGECALC_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

DEFAULT_STORAGE_PATH = Path.home() / ".age_calculator" / "last_calculation.json"


class AgeCalculatorSettings(BaseSettings):
    """Selection range, storage location and logging flags.

    Attributes:
        min_year: Oldest year offered in the year dropdown.
        max_year: Newest year offered, or None for the current year.
        storage_path: JSON file holding the last calculation.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "AGECALC_",
    }

    min_year: int = Field(default=1947, ge=1)
    max_year: int | None = Field(default=None, le=9999)
    storage_path: Path = DEFAULT_STORAGE_PATH

    verbose: bool = False
    log_json: bool = False

    @model_validator(mode="after")
    def _check_year_bounds(self) -> AgeCalculatorSettings:
        if self.max_year is not None and self.min_year > self.max_year:
            msg = f"min_year ({self.min_year}) is after max_year ({self.max_year})"
            raise ValueError(msg)
        return self

    def year_range(self, today: date) -> list[int]:
        """Selectable years, newest first.

        Raises:
            ValueError: If ``min_year`` is after ``today``'s year and no
                ``max_year`` is set, which would leave nothing to select.
        """
        newest = self.max_year if self.max_year is not None else today.year
        if self.min_year > newest:
            msg = f"min_year ({self.min_year}) is after the current year ({newest})"
            raise ValueError(msg)
        return list(range(newest, self.min_year - 1, -1))
