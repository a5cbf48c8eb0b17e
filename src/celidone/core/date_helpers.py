"""Date helpers for rental scheduling."""

from datetime import date, datetime
from typing import Optional, Union
from zoneinfo import ZoneInfo

from celidone.core.config import get_settings

DateInput = Union[date, datetime, str, None]

# Accepted input formats, tried in order
DATE_INPUT_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")


def parse_date(value: DateInput) -> Optional[date]:
    """
    Parse a date coming from a form field or API payload.

    Accepts ISO dates (YYYY-MM-DD), ISO datetimes and pt-BR dates
    (DD/MM/YYYY). Empty values return None.

    Args:
        value: Date, datetime or string

    Returns:
        Parsed date or None for empty input

    Raises:
        ValueError: If the string is not a recognizable date

    Examples:
        >>> parse_date("2024-01-08")
        date(2024, 1, 8)
        >>> parse_date("08/01/2024")
        date(2024, 1, 8)
        >>> parse_date("")
        None
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None

    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    # ISO datetime strings sent by the backend (e.g. 2024-01-08T10:00:00)
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise ValueError(f"Invalid date: {text!r}") from None


def today(timezone: Optional[str] = None) -> date:
    """
    Get the current date in the shop's timezone.

    Args:
        timezone: IANA timezone name (defaults to settings.report_timezone)

    Returns:
        Current local date
    """
    tz = ZoneInfo(timezone or get_settings().report_timezone)
    return datetime.now(tz).date()


def days_between(start: date, end: date) -> int:
    """
    Count calendar days from start to end (negative if end is before start).

    Examples:
        >>> days_between(date(2024, 1, 1), date(2024, 1, 8))
        7
    """
    return (end - start).days


def format_display_date(value: DateInput, fmt: Optional[str] = None) -> str:
    """
    Format a date for display (DD/MM/YYYY by default).

    Invalid or empty values render as an empty string.
    """
    try:
        parsed = parse_date(value)
    except ValueError:
        return ""
    if parsed is None:
        return ""
    return parsed.strftime(fmt or get_settings().display_date_format)
