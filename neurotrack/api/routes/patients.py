"""Patient endpoints."""

from fastapi import APIRouter, Depends
from typing import List

from neurotrack.models import (
    Patient,
    PatientCreate,
    PatientReport,
    PatientUpdate,
    QueryOptions,
    StatusCounts,
    PATIENT_STATUSES,
)
from neurotrack.api.deps import get_current_user_id, get_store, owned_patient, query_options
from neurotrack.core import PATIENTS, patient_report, query
from neurotrack.core.stats import status_counts
from neurotrack.core.store import RecordStore

router = APIRouter(prefix="/patients", tags=["patients"])

TABLE = "pacientes"


@router.get("/", response_model=List[Patient])
async def list_patients(
    options: QueryOptions = Depends(query_options),
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """
    List the current user's patients.

    Filters:
    - search: name, guardian, diagnosis or email contains the text
    - status: ativo, inativo, alta or all
    Sort keys: nome (default), data_nascimento, responsavel, status, diagnostico
    """
    patients = store.list(TABLE, usuario_id=user_id)
    return query(patients, options, PATIENTS)


@router.get("/stats", response_model=StatusCounts)
async def patient_stats(
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """Patient counts per status."""
    patients = store.list(TABLE, usuario_id=user_id)
    return status_counts(patients, "status", PATIENT_STATUSES)


@router.get("/{patient_id}", response_model=Patient)
async def get_patient(patient: Patient = Depends(owned_patient)):
    """Get patient by ID."""
    return patient


@router.get("/{patient_id}/report", response_model=PatientReport)
async def get_patient_report(
    patient: Patient = Depends(owned_patient),
    store: RecordStore = Depends(get_store),
):
    """Development report: latest area levels, care period, professionals and medications."""
    return patient_report(patient, store.list("sessoes", paciente_id=patient.id))


@router.post("/", response_model=Patient, status_code=201)
async def create_patient(
    patient: PatientCreate,
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """Register a patient owned by the current user."""
    return store.create(TABLE, patient, usuario_id=user_id)


@router.patch("/{patient_id}", response_model=Patient)
async def update_patient(
    changes: PatientUpdate,
    patient: Patient = Depends(owned_patient),
    store: RecordStore = Depends(get_store),
):
    """Update patient fields."""
    return store.update(TABLE, patient.id, changes.model_dump(exclude_unset=True))
