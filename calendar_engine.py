"""Calendar arithmetic for the age calculator.

Pure functions over (day, month, year) triples. Months are zero-based
(0 = January) to match the month dropdown values. Nothing here logs,
formats messages, or keeps state; callers pass the reference date in.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime
from enum import Enum

MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
FEBRUARY = 1


class InvalidDateError(ValueError):
    """Raised when a difference is requested for a date after the reference date."""


class ValidationOutcome(Enum):
    VALID = "valid"
    INCOMPLETE = "incomplete"
    OUT_OF_RANGE = "out_of_range"
    FUTURE = "future"

    @property
    def is_error(self) -> bool:
        """True for outcomes the user should be told about."""
        return self in (ValidationOutcome.OUT_OF_RANGE, ValidationOutcome.FUTURE)


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: int

    def to_date(self) -> date:
        return date(self.year, self.month + 1, self.day)


@dataclass(frozen=True)
class DateDifference:
    years: int
    months: int
    days: int


def _as_date(today: date | datetime) -> date:
    # datetime is a subclass of date; drop the time of day
    if isinstance(today, datetime):
        return today.date()
    return today


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Number of days in ``month`` (0-11) of ``year``.

    Raises:
        ValueError: If ``month`` is outside 0-11.
    """
    if not 0 <= month <= 11:
        raise ValueError(f"month must be in 0..11, got {month}")
    if month == FEBRUARY and is_leap_year(year):
        return 29
    return MONTH_LENGTHS[month]


def validate_date(
    day: int | None,
    month: int | None,
    year: int | None,
    today: date | datetime,
) -> ValidationOutcome:
    """Check a selected day/month/year against the calendar and ``today``.

    ``None`` marks a field the user has not chosen yet. Month ``0`` is
    January and counts as chosen.

    Returns:
        INCOMPLETE if any field is unset, OUT_OF_RANGE if the day does not
        exist in that month, FUTURE if the date is after ``today``, else VALID.
    """
    if day is None or month is None or year is None:
        return ValidationOutcome.INCOMPLETE

    if not MINYEAR <= year <= MAXYEAR:
        return ValidationOutcome.OUT_OF_RANGE
    if day < 1 or day > days_in_month(month, year):
        return ValidationOutcome.OUT_OF_RANGE

    if CalendarDate(year, month, day).to_date() > _as_date(today):
        return ValidationOutcome.FUTURE
    return ValidationOutcome.VALID


def _previous_month(month: int, year: int) -> tuple[int, int]:
    if month == 0:
        return 11, year - 1
    return month - 1, year


def compute_difference(birth: CalendarDate, today: date | datetime) -> DateDifference:
    """Elapsed years, months and days from ``birth`` to ``today``.

    A negative day count borrows the length of the month before ``today``'s
    month. If that month is too short to cover the shortfall (the 30th or
    31st before a short February) the month before it is borrowed as well.
    Adding the result back to ``birth`` with day overflow (years and months
    first, then days, letting a missing day roll into the next month) lands
    exactly on ``today``.

    Raises:
        InvalidDateError: If ``today`` is before ``birth``.
    """
    today = _as_date(today)
    today_month = today.month - 1

    years = today.year - birth.year
    months = today_month - birth.month
    days = today.day - birth.day

    borrow_month, borrow_year = today_month, today.year
    while days < 0:
        months -= 1
        borrow_month, borrow_year = _previous_month(borrow_month, borrow_year)
        days += days_in_month(borrow_month, borrow_year)

    if months < 0:
        years -= 1
        months += 12

    if years < 0:
        raise InvalidDateError(
            f"{birth.year:04d}-{birth.month + 1:02d}-{birth.day:02d} is after {today.isoformat()}"
        )

    return DateDifference(years, months, days)
