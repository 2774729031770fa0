"""Progress metric models."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime


# Categories charted on the progress tab
METRIC_CATEGORIES = ("Comunicação", "Social", "Motor", "Cognitivo", "Comportamental")


class ProgressMetricCreate(BaseModel):
    """Create progress metric request."""
    categoria: str
    valor: float = Field(ge=0, le=10)
    data_registro: date
    observacao: Optional[str] = None


class ProgressMetric(ProgressMetricCreate):
    """Full progress metric record as stored."""
    id: str
    paciente_id: str
    criado_em: datetime
    atualizado_em: datetime
