"""Dashboard endpoints."""

from fastapi import APIRouter, Depends

from neurotrack.models import DashboardStats
from neurotrack.api.deps import get_current_user_id, get_store
from neurotrack.core import dashboard_stats
from neurotrack.core.store import RecordStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """Patients, sessions and milestones across the current user's caseload."""
    patients = store.list("pacientes", usuario_id=user_id)
    patient_ids = [p.id for p in patients]

    sessions = store.list_in("sessoes", "paciente_id", patient_ids)
    milestones = store.list_in("marcos_desenvolvimento", "paciente_id", patient_ids)

    return dashboard_stats(patients, sessions, milestones)
