"""Developmental milestone endpoints."""

from fastapi import APIRouter, Depends
from typing import List

from neurotrack.models import Milestone, MilestoneCreate, MilestoneSummary, Patient, QueryOptions
from neurotrack.api.deps import get_store, owned_patient, query_options
from neurotrack.core import MILESTONES, milestone_summary, query
from neurotrack.core.store import RecordStore

router = APIRouter(prefix="/patients/{patient_id}/milestones", tags=["milestones"])

TABLE = "marcos_desenvolvimento"


@router.get("", response_model=List[Milestone])
async def list_milestones(
    patient: Patient = Depends(owned_patient),
    options: QueryOptions = Depends(query_options),
    store: RecordStore = Depends(get_store),
):
    """List a patient's milestones, newest first by default."""
    return query(store.list(TABLE, paciente_id=patient.id), options, MILESTONES)


@router.get("/stats", response_model=MilestoneSummary)
async def milestone_stats(
    patient: Patient = Depends(owned_patient),
    store: RecordStore = Depends(get_store),
):
    """Milestone counts per status and achievement rate."""
    return milestone_summary(store.list(TABLE, paciente_id=patient.id))


@router.post("", response_model=Milestone, status_code=201)
async def create_milestone(
    milestone: MilestoneCreate,
    patient: Patient = Depends(owned_patient),
    store: RecordStore = Depends(get_store),
):
    return store.create(TABLE, milestone, paciente_id=patient.id)
