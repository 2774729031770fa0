"""Treatment plan models."""

from pydantic import BaseModel, model_validator
from typing import Literal, Optional
from datetime import date, datetime


PlanStatus = Literal["ativo", "concluido", "pausado"]
PLAN_STATUSES = ("ativo", "concluido", "pausado")


class TreatmentPlanCreate(BaseModel):
    """Create treatment plan request."""
    titulo: str
    descricao: Optional[str] = None
    data_inicio: date
    data_fim: Optional[date] = None
    status: PlanStatus = "ativo"

    @model_validator(mode="after")
    def end_after_start(self):
        if self.data_fim is not None and self.data_fim < self.data_inicio:
            raise ValueError("data_fim must not be before data_inicio")
        return self


class TreatmentPlan(TreatmentPlanCreate):
    """Full treatment plan record as stored."""
    id: str
    paciente_id: str
    criado_em: datetime
    atualizado_em: datetime
