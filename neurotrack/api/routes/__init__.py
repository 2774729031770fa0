from .patients import router as patients_router
from .sessions import router as sessions_router
from .milestones import router as milestones_router
from .plans import router as plans_router
from .metrics import router as metrics_router
from .dashboard import router as dashboard_router

__all__ = [
    "patients_router",
    "sessions_router",
    "milestones_router",
    "plans_router",
    "metrics_router",
    "dashboard_router",
]
