"""Summary statistics models."""

from pydantic import BaseModel
from datetime import datetime
from typing import Dict, List, Optional


class Ratio(BaseModel):
    """Whole-number percentage; has_data is False when the denominator was zero."""
    value: int = 0
    has_data: bool = False


class Average(BaseModel):
    """Mean of the values present; has_data is False when none were."""
    value: float = 0.0
    count: int = 0
    has_data: bool = False


class StatusCounts(BaseModel):
    """Record counts per discriminant value."""
    total: int
    counts: Dict[str, int]


class SessionSummary(BaseModel):
    """Session totals shown on the sessions tab and report."""
    total: int
    realizadas: int
    agendadas: int
    canceladas: int
    total_hours: float
    mean_duration: Average


class MilestoneSummary(BaseModel):
    total: int
    counts: Dict[str, int]
    achievement_rate: Ratio


class DashboardStats(BaseModel):
    """Practice-wide counters for the dashboard."""
    pacientes: int = 0
    sessoes: int = 0
    marcos: int = 0
    marcos_alcancados: int = 0
    taxa_sucesso: Ratio = Ratio()


class AreaStatus(BaseModel):
    """Level of one developmental area at its latest assessment."""
    nivel: int = 3
    ultima_avaliacao: Optional[datetime] = None


class ReportSummary(BaseModel):
    """Care period, professionals and medications across a patient's sessions."""
    total_sessoes: int = 0
    periodo_inicio: Optional[datetime] = None
    periodo_fim: Optional[datetime] = None
    has_data: bool = False
    profissionais: List[str] = []
    medicacoes: List[str] = []


class PatientReport(BaseModel):
    """Development report for one patient."""
    paciente_id: str
    nome: str
    idade: int
    diagnostico: Optional[str] = None
    status: str
    areas: Dict[str, AreaStatus]
    nivel_medio: Optional[float] = None  # None until a session carries an assessment
    areas_atencao: List[str] = []
    resumo: ReportSummary
