"""Shared dependencies for API routes."""

from datetime import date
from typing import Optional

from fastapi import Depends, HTTPException, Query, Request

from neurotrack.config import Settings, get_settings
from neurotrack.core.errors import RecordNotFoundError
from neurotrack.core.store import RecordStore
from neurotrack.models import Patient, QueryOptions, Session


def get_store(request: Request) -> RecordStore:
    """Dependency: the record store attached to the app."""
    return request.app.state.store


def get_current_user_id(settings: Settings = Depends(get_settings)) -> str:
    """Dependency: acting user. Login is simulated, so this is the configured user."""
    return settings.default_user_id


def get_patient_or_404(store: RecordStore, patient_id: str, user_id: str) -> Patient:
    """Patient owned by user_id; other users' patients are reported as missing."""
    try:
        patient = store.get("pacientes", patient_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Patient not found")

    if patient.usuario_id != user_id:
        raise HTTPException(status_code=404, detail="Patient not found")
    return patient


def get_session_or_404(store: RecordStore, session_id: str, user_id: str) -> Session:
    """Session whose patient is owned by user_id."""
    try:
        session = store.get("sessoes", session_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")

    try:
        get_patient_or_404(store, session.paciente_id, user_id)
    except HTTPException:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def owned_patient(
    patient_id: str,
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
) -> Patient:
    """Dependency: the path's patient, if the acting user owns it."""
    return get_patient_or_404(store, patient_id, user_id)


def owned_session(
    session_id: str,
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
) -> Session:
    """Dependency: the path's session, if the acting user owns its patient."""
    return get_session_or_404(store, session_id, user_id)


def query_options(
    search: str = "",
    status: str = "all",
    sort: Optional[str] = None,
    direction: Optional[str] = Query(default=None, pattern="^(asc|desc)$"),
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> QueryOptions:
    """Dependency: list query options from the query string."""
    return QueryOptions(
        search_text=search,
        status_filter=status,
        sort_key=sort,
        sort_direction=direction,
        date_from=date_from,
        date_to=date_to,
    )
