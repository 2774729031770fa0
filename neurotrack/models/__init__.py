from .patient import Patient, PatientCreate, PatientUpdate, PATIENT_STATUSES
from .session import Session, SessionCreate, SessionUpdate, SESSION_STATUSES
from .assessment import DevelopmentAssessment
from .milestone import Milestone, MilestoneCreate, MILESTONE_STATUSES, MILESTONE_CATEGORIES
from .treatment_plan import TreatmentPlan, TreatmentPlanCreate, PLAN_STATUSES
from .progress_metric import ProgressMetric, ProgressMetricCreate, METRIC_CATEGORIES
from .query import QueryOptions
from .stats import (
    Ratio,
    Average,
    StatusCounts,
    SessionSummary,
    MilestoneSummary,
    DashboardStats,
    AreaStatus,
    ReportSummary,
    PatientReport,
)

__all__ = [
    "Patient", "PatientCreate", "PatientUpdate", "PATIENT_STATUSES",
    "Session", "SessionCreate", "SessionUpdate", "SESSION_STATUSES",
    "DevelopmentAssessment",
    "Milestone", "MilestoneCreate", "MILESTONE_STATUSES", "MILESTONE_CATEGORIES",
    "TreatmentPlan", "TreatmentPlanCreate", "PLAN_STATUSES",
    "ProgressMetric", "ProgressMetricCreate", "METRIC_CATEGORIES",
    "QueryOptions",
    "Ratio", "Average", "StatusCounts", "SessionSummary", "MilestoneSummary", "DashboardStats",
    "AreaStatus", "ReportSummary", "PatientReport",
]
