"""
Validation rules carried by the record models.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from neurotrack.models import (
    DevelopmentAssessment,
    PatientCreate,
    ProgressMetricCreate,
    SessionCreate,
    TreatmentPlanCreate,
)


class TestSessionCreate:

    def test_duration_bounds(self):
        base = {"data_sessao": "2024-01-15T10:00:00Z", "status": "agendada"}
        assert SessionCreate(**base, duracao=15).duracao == 15
        assert SessionCreate(**base, duracao=240).duracao == 240
        with pytest.raises(ValidationError):
            SessionCreate(**base, duracao=10)
        with pytest.raises(ValidationError):
            SessionCreate(**base, duracao=300)

    def test_completed_session_requires_notes(self):
        with pytest.raises(ValidationError, match="objetivos"):
            SessionCreate(data_sessao="2024-01-15T10:00:00Z", observacoes="ok")
        with pytest.raises(ValidationError, match="observacoes"):
            SessionCreate(data_sessao="2024-01-15T10:00:00Z", objetivos="ok", observacoes="  ")

    def test_scheduled_session_needs_no_notes(self):
        session = SessionCreate(data_sessao="2024-01-22T14:00:00Z", status="agendada")
        assert session.avaliacao is None

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            SessionCreate(data_sessao="2024-01-22T14:00:00Z", status="remarcada")


class TestDevelopmentAssessment:

    def test_defaults(self):
        assessment = DevelopmentAssessment()
        assert assessment.mean_level() == 3.0
        assert assessment.profissional == "neuropsicologia"
        assert assessment.comportamental.rigidez == "flexivel"

    def test_mean_and_weakest(self):
        assessment = DevelopmentAssessment(
            motora={"nivel": 2},
            comunicacao={"nivel": 5, "verbal": "boa"},
            emocional={"nivel": 2},
        )
        assert assessment.mean_level() == pytest.approx((3 + 2 + 2 + 3 + 5) / 5)
        assert assessment.weakest_areas() == ["emocional", "motora"]
        assert assessment.comunicacao.verbal == "boa"

    def test_level_range(self):
        with pytest.raises(ValidationError):
            DevelopmentAssessment(cognitiva={"nivel": 6})


class TestOtherRecords:

    def test_patient_requires_name(self):
        with pytest.raises(ValidationError):
            PatientCreate(nome="   ", data_nascimento="2015-01-01", responsavel="Maria")

    def test_patient_status_enum(self):
        with pytest.raises(ValidationError):
            PatientCreate(nome="Ana", data_nascimento="2015-01-01", responsavel="Maria", status="ativa")

    def test_metric_scale(self):
        with pytest.raises(ValidationError):
            ProgressMetricCreate(categoria="Social", valor=11, data_registro="2024-01-01")

    def test_plan_end_not_before_start(self):
        with pytest.raises(ValidationError):
            TreatmentPlanCreate(titulo="Plano", data_inicio=date(2024, 2, 1), data_fim=date(2024, 1, 1))
