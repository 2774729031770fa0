"""List query options shared by every record view."""

from pydantic import BaseModel, ConfigDict
from typing import Literal, Optional
from datetime import date


SortDirection = Literal["asc", "desc"]


class QueryOptions(BaseModel):
    """Search, filter and ordering for a record list."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    search_text: str = ""
    status_filter: str = "all"  # "all"/"todos" or a discriminant value
    sort_key: Optional[str] = None  # None -> record type default
    sort_direction: Optional[SortDirection] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
