"""Therapy session models."""

from pydantic import BaseModel, Field, model_validator
from typing import Literal, Optional
from datetime import datetime

from .assessment import DevelopmentAssessment


SessionStatus = Literal["realizada", "cancelada", "agendada"]
SESSION_STATUSES = ("realizada", "cancelada", "agendada")

MIN_DURATION = 15
MAX_DURATION = 240


class SessionCreate(BaseModel):
    """Create session request."""
    data_sessao: datetime
    duracao: int = Field(default=60, ge=MIN_DURATION, le=MAX_DURATION)
    objetivos: Optional[str] = None
    observacoes: Optional[str] = None
    resultados: Optional[str] = None
    status: SessionStatus = "realizada"
    avaliacao: Optional[DevelopmentAssessment] = None

    @model_validator(mode="after")
    def completed_sessions_need_notes(self):
        # Objectives and observations are mandatory once a session took place
        if self.status == "realizada":
            if not (self.objetivos or "").strip():
                raise ValueError("objetivos is required for completed sessions")
            if not (self.observacoes or "").strip():
                raise ValueError("observacoes is required for completed sessions")
        return self


class SessionUpdate(BaseModel):
    """Partial session update."""
    data_sessao: Optional[datetime] = None
    duracao: Optional[int] = Field(default=None, ge=MIN_DURATION, le=MAX_DURATION)
    objetivos: Optional[str] = None
    observacoes: Optional[str] = None
    resultados: Optional[str] = None
    status: Optional[SessionStatus] = None
    avaliacao: Optional[DevelopmentAssessment] = None


class Session(SessionCreate):
    """Full session record as stored."""
    id: str
    paciente_id: str
    criado_em: datetime
    atualizado_em: datetime
