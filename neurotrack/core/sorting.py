"""
Comparator resolution for record lists.

Maps a sort key name to a comparison over records that knows whether the
key holds text, dates or numbers.
"""

import unicodedata
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from neurotrack.utils.logging import get_logger

from .errors import InvalidDirectionError
from .schemas import DATE, NUMBER, RecordSchema, SortField
from .values import get_field, to_number, to_timestamp

logger = get_logger(__name__)

DIRECTIONS = ("asc", "desc")


def collation_key(text: str) -> Tuple[str, str, str]:
    """
    Sort key approximating locale-aware comparison.

    Compares letters first ignoring accents and case, then accents,
    then case with lowercase first. "Ana" < "Ângela" < "anne" < "Beatriz".
    """
    folded = text.casefold()
    base = "".join(
        c for c in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(c)
    )
    return base, unicodedata.normalize("NFC", folded), text.swapcase()


def compare_text(a: str, b: str) -> int:
    ka, kb = collation_key(a), collation_key(b)
    return (ka > kb) - (ka < kb)


def _compare_keys(ka: Any, kb: Any) -> int:
    # Absent optional values order before present ones
    if ka is None or kb is None:
        return (ka is not None) - (kb is not None)
    return (ka > kb) - (ka < kb)


@dataclass(frozen=True)
class Comparator:
    """Two-argument record comparison returning -1, 0 or 1."""
    sort_key: str
    sort_field: SortField
    descending: bool = False

    def key(self, record: Any) -> Any:
        """Comparable value of the sort field for one record."""
        name = self.sort_field.field
        value = get_field(record, name)

        if self.sort_field.kind == DATE:
            return None if value is None else to_timestamp(value, name)
        if self.sort_field.kind == NUMBER:
            return None if value is None else to_number(value, name)
        return collation_key("" if value is None else str(value))

    def compare_keys(self, ka: Any, kb: Any) -> int:
        result = _compare_keys(ka, kb)
        return -result if self.descending else result

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare_keys(self.key(a), self.key(b))


def resolve_sort_key(schema: RecordSchema, sort_key: Optional[str]) -> str:
    """Recognized sort key, falling back to the schema default."""
    if sort_key is None:
        return schema.default_sort
    if not schema.has_sort_key(sort_key):
        logger.warning(
            f"Unknown sort key {sort_key!r} for {schema.name}, "
            f"falling back to {schema.default_sort!r}"
        )
        return schema.default_sort
    return sort_key


def resolve_comparator(
    schema: RecordSchema,
    sort_key: Optional[str] = None,
    direction: Optional[str] = "asc",
) -> Comparator:
    """
    Build the comparator for a sort key and direction.

    Args:
        schema: Record schema holding the recognized sort keys
        sort_key: Sort key name; unknown names fall back to the schema default
        direction: "asc" (default when None) or "desc"

    Returns:
        Comparator usable with functools.cmp_to_key
    """
    direction = direction or "asc"
    if direction not in DIRECTIONS:
        raise InvalidDirectionError(direction)

    key = resolve_sort_key(schema, sort_key)
    return Comparator(
        sort_key=key,
        sort_field=schema.sort_keys[key],
        descending=direction == "desc",
    )
