"""Field access and value coercion shared by filtering, sorting and stats."""

import math
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, Optional

from .errors import InvalidDateError, InvalidValueError


def get_field(record: Any, name: str) -> Any:
    """Read a field from a pydantic record or a plain mapping. Missing -> None."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def to_datetime(value: Any, field: Optional[str] = None) -> datetime:
    """
    Parse a date-like value into an aware datetime.

    Accepts datetime, date and ISO-8601 strings. Naive values are taken
    as UTC. Anything else raises InvalidDateError.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidDateError(field, value) from e
    else:
        raise InvalidDateError(field, value)

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_timestamp(value: Any, field: Optional[str] = None) -> float:
    """Epoch seconds for a date-like value."""
    return to_datetime(value, field).timestamp()


def to_date(value: Any, field: Optional[str] = None) -> date:
    """Calendar date (UTC) for a date-like value."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return to_datetime(value, field).astimezone(timezone.utc).date()


def to_number(value: Any, field: Optional[str] = None) -> float:
    """Finite numeric value of a field; bools, NaN, infinities and non-numeric strings are rejected."""
    if isinstance(value, bool):
        raise InvalidValueError(field, value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError as e:
            raise InvalidValueError(field, value) from e
    else:
        raise InvalidValueError(field, value)

    if not math.isfinite(number):
        raise InvalidValueError(field, value)
    return number
