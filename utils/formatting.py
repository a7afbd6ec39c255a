"""Date and time display helpers.

All helpers fail soft: empty input gives an empty string and anything that
cannot be parsed is returned as its string form.
"""

from datetime import datetime, timezone
from typing import Optional, Union
from config.constants import INPUT_TIME_FORMAT, WIRE_TIME_FORMAT
from utils.logger import setup_logger

logger = setup_logger(__name__)

DateLike = Union[datetime, str, None]


def parse_timestamp(value: Union[datetime, str]) -> datetime:
    """
    Parse an ISO-like timestamp into local wall-clock time.

    Args:
        value: datetime or ISO string (a trailing 'Z' is accepted)

    Returns:
        Naive datetime in local time

    Raises:
        ValueError: if the string is not an ISO timestamp
        TypeError: if the value is neither a string nor a datetime
    """
    if isinstance(value, datetime):
        parsed = value
    elif not isinstance(value, str):
        raise TypeError(f"Expected a timestamp string, got {type(value).__name__}")
    else:
        text = value.strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        parsed = datetime.fromisoformat(text)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _format(value: DateLike, render) -> str:
    if not value:
        return ''

    try:
        return render(parse_timestamp(value))
    except (ValueError, TypeError) as e:
        logger.error(f"Error formatting date {value!r}: {e}")
        return str(value)


def _clock(dt: datetime) -> str:
    return dt.strftime('%I:%M %p')


def format_datetime(value: DateLike) -> str:
    """Format as e.g. 'Jan 1, 2025, 10:00 AM'."""
    return _format(value, lambda dt: f"{dt:%b} {dt.day}, {dt.year}, {_clock(dt)}")


def format_date(value: DateLike) -> str:
    """Format as e.g. 'January 1, 2025'."""
    return _format(value, lambda dt: f"{dt:%B} {dt.day}, {dt.year}")


def format_time(value: DateLike) -> str:
    """Format as e.g. '10:00 AM'."""
    return _format(value, _clock)


def to_wire_time(dt: datetime) -> str:
    """
    Render a datetime as UTC, the way the appointment service expects it.

    Naive datetimes are taken to be local time.
    """
    return dt.astimezone(timezone.utc).strftime(WIRE_TIME_FORMAT)


def time_input_value(dt: Optional[datetime]) -> str:
    """Render a datetime for a datetime-local input."""
    if dt is None:
        return ''
    return dt.strftime(INPUT_TIME_FORMAT)
