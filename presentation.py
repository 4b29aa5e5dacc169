"""Dropdown options, labels and messages for the age calculator page."""

from __future__ import annotations

from calendar_engine import DateDifference, ValidationOutcome, days_in_month

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
DAY_OPTIONS = tuple(range(1, 32))

INVALID_DAY_MESSAGE = "Invalid date! Please select a valid day for the chosen month."
FUTURE_DATE_MESSAGE = "Please select a date in the past."

OUTCOME_MESSAGES = {
    ValidationOutcome.OUT_OF_RANGE: INVALID_DAY_MESSAGE,
    ValidationOutcome.FUTURE: FUTURE_DATE_MESSAGE,
}


def outcome_message(outcome: ValidationOutcome) -> str | None:
    # INCOMPLETE and VALID show nothing
    return OUTCOME_MESSAGES.get(outcome)


def day_hint(month: int | None, year: int | None) -> str | None:
    """Caption naming how many days the chosen month has, once both are set."""
    if month is None or year is None:
        return None
    return f"{MONTH_NAMES[month]} {year} has {days_in_month(month, year)} days."


def day_label(day: int | None) -> str:
    return "Day" if day is None else str(day)


def month_label(month: int | None) -> str:
    return "Month" if month is None else MONTH_NAMES[month]


def year_label(year: int | None) -> str:
    return "Year" if year is None else str(year)


def format_date_display(day: int | None, month: int | None, year: int | None) -> str:
    """Render a selection as DD/MM/YYYY, zero-filling unset fields."""
    dd = f"{day:02d}" if day is not None else "00"
    mm = f"{month + 1:02d}" if month is not None else "00"
    yyyy = str(year) if year is not None else "0000"
    return f"{dd}/{mm}/{yyyy}"


def _plural(count: int, unit: str) -> str:
    return unit if count == 1 else f"{unit}s"


def result_labels(diff: DateDifference) -> list[tuple[str, int]]:
    return [
        (_plural(diff.years, "Year"), diff.years),
        (_plural(diff.months, "Month"), diff.months),
        (_plural(diff.days, "Day"), diff.days),
    ]


def result_text(diff: DateDifference) -> str:
    return " ".join(f"{value} {label}" for label, value in result_labels(diff))
