"""Filter-then-sort pipeline over an in-memory record collection."""

from functools import cmp_to_key
from typing import Any, Iterable, List, Optional

from neurotrack.models import QueryOptions

from .filters import matches
from .schemas import PATIENTS, RecordSchema
from .sorting import resolve_comparator


def filter_records(
    records: Iterable[Any],
    options: QueryOptions,
    schema: RecordSchema,
) -> List[Any]:
    """Records passing every filter in options, input order preserved."""
    return [
        r for r in records
        if matches(
            r,
            schema,
            search_text=options.search_text,
            status_filter=options.status_filter,
            date_from=options.date_from,
            date_to=options.date_to,
        )
    ]


def default_direction(options: QueryOptions, schema: RecordSchema) -> str:
    """
    Sort direction for a query.

    An explicit direction always wins. A view with no sort key uses its
    record type's default ordering (newest first for sessions); naming a
    sort key without a direction sorts ascending.
    """
    if options.sort_direction is not None:
        return options.sort_direction
    if options.sort_key is None:
        return schema.default_direction
    return "asc"


def query(
    records: Iterable[Any],
    options: Optional[QueryOptions] = None,
    schema: RecordSchema = PATIENTS,
) -> List[Any]:
    """
    Filter then sort a record collection.

    The input is never modified; a new list is returned. The sort is
    stable, so records with equal keys keep their input order. Unknown
    sort keys fall back to the schema default.

    Raises:
        InvalidDateError / InvalidValueError: a sort value could not be read
        InvalidDirectionError: direction other than asc/desc
    """
    options = options or QueryOptions()
    filtered = filter_records(records, options, schema)

    comparator = resolve_comparator(
        schema,
        options.sort_key,
        default_direction(options, schema),
    )

    # Every key is read up front so malformed values fail even without a comparison
    decorated = [(comparator.key(r), r) for r in filtered]
    decorated.sort(key=cmp_to_key(lambda x, y: comparator.compare_keys(x[0], y[0])))

    return [r for _, r in decorated]
