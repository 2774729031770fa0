"""Patient models."""

from pydantic import BaseModel, field_validator
from typing import Literal, Optional
from datetime import date, datetime


PatientStatus = Literal["ativo", "inativo", "alta"]
PATIENT_STATUSES = ("ativo", "inativo", "alta")


class PatientCreate(BaseModel):
    """Create patient request."""
    nome: str
    data_nascimento: date
    responsavel: str
    telefone: Optional[str] = None
    email: Optional[str] = None
    diagnostico: Optional[str] = None
    status: PatientStatus = "ativo"

    @field_validator("nome")
    @classmethod
    def nome_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("nome is required")
        return value.strip()


class PatientUpdate(BaseModel):
    """Partial patient update."""
    nome: Optional[str] = None
    data_nascimento: Optional[date] = None
    responsavel: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    diagnostico: Optional[str] = None
    status: Optional[PatientStatus] = None


class Patient(PatientCreate):
    """Full patient record as stored."""
    id: str
    usuario_id: str
    criado_em: datetime
    atualizado_em: datetime

    def age(self, today: Optional[date] = None) -> int:
        """Age in whole years."""
        today = today or date.today()
        born = self.data_nascimento
        return today.year - born.year - ((today.month, today.day) < (born.month, born.day))
