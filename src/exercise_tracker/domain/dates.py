"""Calendar date parsing and formatting."""

from datetime import date, datetime

from exercise_tracker.domain.errors import ValidationError

DISPLAY_FORMAT = "%a %b %d"


def parse_date(raw: str, message: str = "Invalid date format") -> date:
    """Parse an ISO date (or the date part of an ISO datetime)."""
    text = raw.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as exc:
        raise ValidationError(message) from exc


def format_date(value: date) -> str:
    """Render a date as e.g. ``Mon Jan 02 2023``."""
    return f"{value.strftime(DISPLAY_FORMAT)} {value.year:04d}"
