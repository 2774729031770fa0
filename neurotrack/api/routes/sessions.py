"""Therapy session endpoints."""

from fastapi import APIRouter, Depends
from typing import List

from neurotrack.models import Patient, QueryOptions, Session, SessionCreate, SessionSummary, SessionUpdate
from neurotrack.api.deps import get_store, owned_patient, owned_session, query_options
from neurotrack.core import SESSIONS, query, session_summary
from neurotrack.core.store import RecordStore

router = APIRouter(tags=["sessions"])

TABLE = "sessoes"


@router.get("/patients/{patient_id}/sessions", response_model=List[Session])
async def list_sessions(
    patient: Patient = Depends(owned_patient),
    options: QueryOptions = Depends(query_options),
    store: RecordStore = Depends(get_store),
):
    """
    List a patient's sessions.

    Filters:
    - search: objectives or observations contain the text
    - status: realizada, agendada, cancelada or todos
    - date_from / date_to: inclusive session date range
    Sort keys: data_sessao (default, newest first), duracao, status
    """
    sessions = store.list(TABLE, paciente_id=patient.id)
    return query(sessions, options, SESSIONS)


@router.get("/patients/{patient_id}/sessions/stats", response_model=SessionSummary)
async def patient_session_stats(
    patient: Patient = Depends(owned_patient),
    store: RecordStore = Depends(get_store),
):
    """Session totals by status, hours and mean duration."""
    return session_summary(store.list(TABLE, paciente_id=patient.id))


@router.post("/patients/{patient_id}/sessions", response_model=Session, status_code=201)
async def create_session(
    session: SessionCreate,
    patient: Patient = Depends(owned_patient),
    store: RecordStore = Depends(get_store),
):
    """Record or schedule a session."""
    return store.create(TABLE, session, paciente_id=patient.id)


@router.patch("/sessions/{session_id}", response_model=Session)
async def update_session(
    changes: SessionUpdate,
    session: Session = Depends(owned_session),
    store: RecordStore = Depends(get_store),
):
    """Update a session; the merged session is validated again."""
    return store.update(TABLE, session.id, changes.model_dump(exclude_unset=True))


@router.delete("/sessions/{session_id}", status_code=204)
async def delete_session(
    session: Session = Depends(owned_session),
    store: RecordStore = Depends(get_store),
):
    """Delete a session."""
    store.delete(TABLE, session.id)
