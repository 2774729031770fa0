"""Treatment plan endpoints."""

from fastapi import APIRouter, Depends
from typing import List

from neurotrack.models import Patient, QueryOptions, TreatmentPlan, TreatmentPlanCreate
from neurotrack.api.deps import get_store, owned_patient, query_options
from neurotrack.core import TREATMENT_PLANS, query
from neurotrack.core.store import RecordStore

router = APIRouter(prefix="/patients/{patient_id}/plans", tags=["plans"])

TABLE = "planos_tratamento"


@router.get("", response_model=List[TreatmentPlan])
async def list_plans(
    patient: Patient = Depends(owned_patient),
    options: QueryOptions = Depends(query_options),
    store: RecordStore = Depends(get_store),
):
    return query(store.list(TABLE, paciente_id=patient.id), options, TREATMENT_PLANS)


@router.post("", response_model=TreatmentPlan, status_code=201)
async def create_plan(
    plan: TreatmentPlanCreate,
    patient: Patient = Depends(owned_patient),
    store: RecordStore = Depends(get_store),
):
    return store.create(TABLE, plan, paciente_id=patient.id)
