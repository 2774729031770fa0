"""
Record filter predicates.

A record passes when it satisfies every active condition:
- free-text search over the schema's searchable fields
- equality on the schema's discriminant field ("all"/"todos" match anything)
- optional inclusive date range on the schema's date field
"""

from datetime import date
from typing import Any, Optional

from .schemas import RecordSchema
from .values import get_field, to_date


ALL_SENTINELS = frozenset({"all", "todos", ""})


def matches_search(record: Any, schema: RecordSchema, search_text: str) -> bool:
    """True if search_text (case-insensitive) occurs in any searchable field."""
    if not search_text:
        return True

    needle = search_text.casefold()
    for name in schema.searchable:
        value = get_field(record, name)
        if value is None:
            continue
        if needle in str(value).casefold():
            return True
    return False


def matches_status(record: Any, schema: RecordSchema, status_filter: Optional[str]) -> bool:
    """True if the discriminant equals status_filter, or the filter is a sentinel."""
    if status_filter is None or status_filter in ALL_SENTINELS:
        return True
    return get_field(record, schema.discriminant) == status_filter


def matches_date_range(
    record: Any,
    schema: RecordSchema,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> bool:
    """True if the record's date field lies within [date_from, date_to]."""
    if date_from is None and date_to is None:
        return True
    if schema.date_field is None:
        return True

    value = get_field(record, schema.date_field)
    if value is None:
        # Records without a date cannot fall inside a requested range
        return False

    day = to_date(value, schema.date_field)
    if date_from is not None and day < date_from:
        return False
    if date_to is not None and day > date_to:
        return False
    return True


def matches(
    record: Any,
    schema: RecordSchema,
    search_text: str = "",
    status_filter: Optional[str] = "all",
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> bool:
    """Logical AND of all active filter conditions."""
    return (
        matches_search(record, schema, search_text)
        and matches_status(record, schema, status_filter)
        and matches_date_range(record, schema, date_from, date_to)
    )
