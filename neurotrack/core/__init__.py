from .errors import (
    QueryError,
    InvalidDateError,
    InvalidValueError,
    InvalidDirectionError,
    RecordNotFoundError,
)
from .schemas import (
    RecordSchema,
    SortField,
    PATIENTS,
    SESSIONS,
    MILESTONES,
    TREATMENT_PLANS,
    PROGRESS_METRICS,
    SCHEMAS,
    get_schema,
)
from .filters import matches
from .sorting import Comparator, resolve_comparator
from .query import query
from .stats import (
    count_by,
    percentage,
    achievement_rate,
    average,
    session_summary,
    milestone_summary,
    metric_averages,
    metric_trend,
    dashboard_stats,
    patient_report,
)
from .store import RecordStore

__all__ = [
    # Errors
    "QueryError",
    "InvalidDateError",
    "InvalidValueError",
    "InvalidDirectionError",
    "RecordNotFoundError",

    # Schemas
    "RecordSchema",
    "SortField",
    "PATIENTS",
    "SESSIONS",
    "MILESTONES",
    "TREATMENT_PLANS",
    "PROGRESS_METRICS",
    "SCHEMAS",
    "get_schema",

    # Query
    "matches",
    "Comparator",
    "resolve_comparator",
    "query",

    # Stats
    "count_by",
    "percentage",
    "achievement_rate",
    "average",
    "session_summary",
    "milestone_summary",
    "metric_averages",
    "metric_trend",
    "dashboard_stats",
    "patient_report",

    # Store
    "RecordStore",
]
