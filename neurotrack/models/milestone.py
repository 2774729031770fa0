"""Developmental milestone models."""

from pydantic import BaseModel
from typing import Literal, Optional
from datetime import date, datetime


MilestoneStatus = Literal["pendente", "em_progresso", "alcancado"]
MILESTONE_STATUSES = ("pendente", "em_progresso", "alcancado")

# Suggested categories, the field itself is free text
MILESTONE_CATEGORIES = (
    "Comunicação",
    "Social",
    "Motor",
    "Cognitivo",
    "Comportamental",
    "Autocuidado",
    "Acadêmico",
)


class MilestoneCreate(BaseModel):
    """Create milestone request."""
    categoria: str
    titulo: str
    descricao: Optional[str] = None
    data_alcancado: Optional[date] = None
    status: MilestoneStatus = "pendente"


class Milestone(MilestoneCreate):
    """Full milestone record as stored."""
    id: str
    paciente_id: str
    criado_em: datetime
    atualizado_em: datetime
