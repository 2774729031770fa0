"""Progress metric endpoints."""

from fastapi import APIRouter, Depends
from typing import Dict, List

from neurotrack.models import Average, Patient, ProgressMetric, ProgressMetricCreate, QueryOptions
from neurotrack.api.deps import get_store, owned_patient, query_options
from neurotrack.core import PROGRESS_METRICS, metric_averages, metric_trend, query
from neurotrack.core.store import RecordStore

router = APIRouter(prefix="/patients/{patient_id}/metrics", tags=["metrics"])

TABLE = "metricas_progresso"


@router.get("", response_model=List[ProgressMetric])
async def list_metrics(
    patient: Patient = Depends(owned_patient),
    options: QueryOptions = Depends(query_options),
    store: RecordStore = Depends(get_store),
):
    """List metrics; status filters by category."""
    return query(store.list(TABLE, paciente_id=patient.id), options, PROGRESS_METRICS)


@router.get("/averages", response_model=Dict[str, Average])
async def metric_category_averages(
    patient: Patient = Depends(owned_patient),
    store: RecordStore = Depends(get_store),
):
    """Average value (0-10) per category."""
    return metric_averages(store.list(TABLE, paciente_id=patient.id))


@router.get("/trend", response_model=List[ProgressMetric])
async def metric_category_trend(
    categoria: str,
    patient: Patient = Depends(owned_patient),
    store: RecordStore = Depends(get_store),
):
    """One category's metrics, oldest first, for charting."""
    return metric_trend(store.list(TABLE, paciente_id=patient.id), categoria)


@router.post("", response_model=ProgressMetric, status_code=201)
async def create_metric(
    metric: ProgressMetricCreate,
    patient: Patient = Depends(owned_patient),
    store: RecordStore = Depends(get_store),
):
    return store.create(TABLE, metric, paciente_id=patient.id)
