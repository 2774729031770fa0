"""
Summary statistics over record collections.

Counters:
- count_by: records per discriminant value, zero-filled for known values
- percentage / achievement_rate: whole-number ratio with a has_data flag
- average: mean of present numeric values, absent values excluded

Reports built on them back the dashboard, the sessions tab, the
progress views and the per-patient development report.
"""

import math
from datetime import date
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional, Sequence

from neurotrack.models import (
    Average,
    AreaStatus,
    DashboardStats,
    MilestoneSummary,
    Patient,
    PatientReport,
    QueryOptions,
    Ratio,
    ReportSummary,
    SessionSummary,
    StatusCounts,
    MILESTONE_STATUSES,
    SESSION_STATUSES,
)
from neurotrack.models.assessment import AREAS, DevelopmentAssessment

from .query import query
from .schemas import PROGRESS_METRICS, SESSIONS
from .values import get_field, to_datetime, to_number


ACHIEVED = "alcancado"


def count_by(
    records: Iterable[Any],
    field: str = "status",
    known_values: Sequence[str] = (),
) -> Dict[str, int]:
    """
    Count records per value of field.

    Every known value gets an entry, zero when absent. Values outside
    known_values are still counted, so the counts always sum to the
    number of records. Absent fields are counted under "".
    """
    counts: Dict[str, int] = {value: 0 for value in known_values}
    for record in records:
        value = get_field(record, field)
        key = "" if value is None else str(value)
        counts[key] = counts.get(key, 0) + 1
    return counts


def status_counts(
    records: Sequence[Any],
    field: str = "status",
    known_values: Sequence[str] = (),
) -> StatusCounts:
    return StatusCounts(total=len(records), counts=count_by(records, field, known_values))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> Ratio:
    """part / whole * 100, rounded half-up. Zero whole -> Ratio(0, has_data=False)."""
    if whole <= 0:
        return Ratio(value=0, has_data=False)
    return Ratio(value=round_half_up(part * 100 / whole), has_data=True)


def achievement_rate(
    milestones: Sequence[Any],
    achieved: str = ACHIEVED,
    field: str = "status",
) -> Ratio:
    """Achieved / (achieved + not yet achieved) as a percentage."""
    achieved_count = sum(1 for m in milestones if get_field(m, field) == achieved)
    pending_count = len(milestones) - achieved_count
    return percentage(achieved_count, achieved_count + pending_count)


def average(records: Iterable[Any], field: str) -> Average:
    """Mean of field over the records that have it."""
    values = [
        to_number(v, field)
        for v in (get_field(r, field) for r in records)
        if v is not None
    ]
    if not values:
        return Average(value=0.0, count=0, has_data=False)
    return Average(value=sum(values) / len(values), count=len(values), has_data=True)


def session_summary(sessions: Sequence[Any]) -> SessionSummary:
    """Totals by status, hours booked and mean duration."""
    counts = count_by(sessions, "status", SESSION_STATUSES)
    minutes = sum(
        to_number(d, "duracao")
        for d in (get_field(s, "duracao") for s in sessions)
        if d is not None
    )
    return SessionSummary(
        total=len(sessions),
        realizadas=counts["realizada"],
        agendadas=counts["agendada"],
        canceladas=counts["cancelada"],
        total_hours=minutes / 60,
        mean_duration=average(sessions, "duracao"),
    )


def milestone_summary(milestones: Sequence[Any]) -> MilestoneSummary:
    return MilestoneSummary(
        total=len(milestones),
        counts=count_by(milestones, "status", MILESTONE_STATUSES),
        achievement_rate=achievement_rate(milestones),
    )


def metric_averages(metrics: Iterable[Any]) -> Dict[str, Average]:
    """Average metric value per category."""
    by_category: Dict[str, List[Any]] = defaultdict(list)
    for m in metrics:
        by_category[get_field(m, "categoria")].append(m)

    return {
        category: average(items, "valor")
        for category, items in by_category.items()
    }


def metric_trend(metrics: Iterable[Any], categoria: str) -> List[Any]:
    """Metrics of one category in chronological order."""
    options = QueryOptions(
        status_filter=categoria,
        sort_key="data_registro",
        sort_direction="asc",
    )
    return query(metrics, options, PROGRESS_METRICS)


def dashboard_stats(
    patients: Sequence[Any],
    sessions: Optional[Sequence[Any]] = None,
    milestones: Optional[Sequence[Any]] = None,
) -> DashboardStats:
    """Practice-wide counters. No patients means all zeros."""
    if not patients:
        return DashboardStats()

    sessions = sessions or []
    milestones = milestones or []
    achieved = sum(1 for m in milestones if get_field(m, "status") == ACHIEVED)

    return DashboardStats(
        pacientes=len(patients),
        sessoes=len(sessions),
        marcos=len(milestones),
        marcos_alcancados=achieved,
        taxa_sucesso=percentage(achieved, len(milestones)),
    )


def _unique(values: Iterable[Optional[str]]) -> List[str]:
    """Non-blank values, first occurrence order."""
    seen: List[str] = []
    for value in values:
        if value and value.strip() and value not in seen:
            seen.append(value)
    return seen


def _assessment(value: Any) -> DevelopmentAssessment:
    if isinstance(value, DevelopmentAssessment):
        return value
    return DevelopmentAssessment.model_validate(value)


def patient_report(
    patient: Patient,
    sessions: Sequence[Any],
    today: Optional[date] = None,
) -> PatientReport:
    """
    Development report for one patient.

    Area levels come from the most recent session carrying an assessment;
    areas stay at the neutral level 3 until one exists. The summary covers
    every session: first to last session date, plus the professionals and
    medications named in the assessments, in chronological order.
    """
    ordered = query(
        sessions,
        QueryOptions(sort_key="data_sessao", sort_direction="asc"),
        SESSIONS,
    )
    assessed = [
        (s, _assessment(get_field(s, "avaliacao")))
        for s in ordered
        if get_field(s, "avaliacao") is not None
    ]

    areas = {area: AreaStatus() for area in AREAS}
    nivel_medio = None
    areas_atencao: List[str] = []
    if assessed:
        latest, assessment = assessed[-1]
        assessed_on = to_datetime(get_field(latest, "data_sessao"), "data_sessao")
        areas = {
            area: AreaStatus(nivel=level, ultima_avaliacao=assessed_on)
            for area, level in assessment.levels().items()
        }
        nivel_medio = assessment.mean_level()
        areas_atencao = assessment.weakest_areas()

    resumo = ReportSummary(
        total_sessoes=len(ordered),
        profissionais=_unique(a.profissional for _, a in assessed),
        medicacoes=_unique(a.medicacao for _, a in assessed),
    )
    if ordered:
        resumo.periodo_inicio = to_datetime(get_field(ordered[0], "data_sessao"), "data_sessao")
        resumo.periodo_fim = to_datetime(get_field(ordered[-1], "data_sessao"), "data_sessao")
        resumo.has_data = True

    return PatientReport(
        paciente_id=patient.id,
        nome=patient.nome,
        idade=patient.age(today),
        diagnostico=patient.diagnostico,
        status=patient.status,
        areas=areas,
        nivel_medio=nivel_medio,
        areas_atencao=areas_atencao,
        resumo=resumo,
    )
