"""Input validation utilities."""

from datetime import datetime, timedelta
from typing import Optional, Tuple
from config.constants import (
    MIN_LEAD_TIME_MINUTES,
    MSG_INVALID_TIME,
    MSG_REQUIRED_FIELDS,
    MSG_TIME_NOT_FUTURE
)
from models.client import Client
from utils.formatting import parse_timestamp


def validate_datetime(dt_str: str) -> Optional[datetime]:
    """
    Validate and parse an appointment time entered in the form.

    Args:
        dt_str: Datetime string (datetime-local or ISO format)

    Returns:
        Parsed naive local datetime or None if invalid
    """
    try:
        return parse_timestamp(dt_str)
    except (ValueError, TypeError, AttributeError):
        return None


def validate_appointment_input(
    client_id: str,
    time_str: str,
    now: Optional[datetime] = None
) -> Tuple[Optional[datetime], Optional[str]]:
    """
    Validate appointment form fields, in the order the form reports them.

    Args:
        client_id: Selected client ID
        time_str: Appointment time as entered
        now: Reference time (defaults to the current local time)

    Returns:
        (parsed_time, error_message); exactly one of them is None
    """
    if not client_id or not time_str:
        return None, MSG_REQUIRED_FIELDS

    appointment_time = validate_datetime(time_str)
    if appointment_time is None:
        return None, MSG_INVALID_TIME

    if appointment_time <= (now or datetime.now()):
        return None, MSG_TIME_NOT_FUTURE

    return appointment_time, None


def earliest_appointment_time(now: Optional[datetime] = None) -> datetime:
    """Earliest time offered by the appointment time picker."""
    return (now or datetime.now()) + timedelta(minutes=MIN_LEAD_TIME_MINUTES)


def client_matches(client: Client, term: str) -> bool:
    """
    Check whether a client matches a search term.

    Name and email match case-insensitively; phone matches the raw term.
    """
    needle = term.lower()
    return (
        needle in client.name.lower() or
        needle in client.email.lower() or
        term in client.phone
    )
