"""
Shared fixtures: sample records and an API client over a seeded store.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from neurotrack.config import get_settings
from neurotrack.core.store import RecordStore
from neurotrack.main import create_app

DEMO_FILE = Path(__file__).parent.parent / "data" / "demo.jsonl"


def patient(nome, status="ativo", **fields):
    record = {
        "id": fields.pop("id", nome.lower().replace(" ", "-")),
        "nome": nome,
        "data_nascimento": "2015-01-01",
        "responsavel": "",
        "status": status,
    }
    record.update(fields)
    return record


def session(data_sessao, status="realizada", **fields):
    record = {
        "id": fields.pop("id", data_sessao),
        "paciente_id": "1",
        "data_sessao": data_sessao,
        "duracao": 60,
        "objetivos": "",
        "observacoes": "",
        "status": status,
    }
    record.update(fields)
    return record


@pytest.fixture
def patients():
    return [
        patient("Ana Silva", responsavel="Maria Silva", diagnostico="TEA", email="maria@email.com"),
        patient("João Santos", status="inativo", responsavel="Carlos Santos", diagnostico="TDAH"),
        patient("Beatriz Costa", responsavel="Ana Costa"),
    ]


@pytest.fixture
def sessions():
    return [
        session("2024-01-15T10:00:00Z", objetivos="Comunicação verbal", observacoes="Boa participação"),
        session("2024-01-08T10:00:00Z", objetivos="Coordenação motora", observacoes="Resistência inicial"),
        session("2024-01-22T14:00:00Z", status="agendada", objetivos="Atividades de grupo"),
        session("2024-01-01T09:00:00Z", status="cancelada", duracao=30, observacoes="Paciente indisposto"),
    ]


@pytest.fixture
def store():
    return RecordStore.from_file(DEMO_FILE)


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))


@pytest.fixture
def user_id():
    return get_settings().default_user_id
