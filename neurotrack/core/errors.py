"""Errors raised by the record query and store layers."""

from typing import Any, Optional


class QueryError(ValueError):
    """Base class for invalid query input."""


class InvalidDateError(QueryError):
    """A date-valued field could not be parsed."""

    def __init__(self, field: Optional[str], value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Invalid date in field {field!r}: {value!r}")


class InvalidValueError(QueryError):
    """A numeric field held a non-numeric value."""

    def __init__(self, field: Optional[str], value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Invalid number in field {field!r}: {value!r}")


class InvalidDirectionError(QueryError):
    """Sort direction other than asc/desc."""

    def __init__(self, direction: Any):
        self.direction = direction
        super().__init__(f"Invalid sort direction: {direction!r}. Use 'asc' or 'desc'")


class RecordNotFoundError(LookupError):
    """No record with the given id in the table."""

    def __init__(self, table: str, record_id: str):
        self.table = table
        self.record_id = record_id
        super().__init__(f"{table} record not found: {record_id}")
