"""
Unit tests for the in-memory record store.
"""

import json
import threading

import pytest
from pydantic import ValidationError

from neurotrack.core.errors import RecordNotFoundError
from neurotrack.core.store import RecordStore
from neurotrack.models import PatientCreate, SessionCreate


class TestRecordStore:

    def test_demo_seed_loaded(self, store):
        assert store.count("pacientes") == 6
        assert store.count("sessoes") == 4
        session = store.get("sessoes", "s1")
        assert session.avaliacao.motora.nivel == 2

    def test_create_assigns_id_and_timestamps(self):
        store = RecordStore()
        created = store.create(
            "pacientes",
            PatientCreate(nome="Ana", data_nascimento="2015-03-15", responsavel="Maria"),
            usuario_id="u1",
        )
        assert created.id
        assert created.criado_em == created.atualizado_em
        assert store.get("pacientes", created.id) == created

    def test_list_filters_by_field(self, store):
        sessions = store.list("sessoes", paciente_id="1")
        assert len(sessions) == 4
        assert store.list("sessoes", paciente_id="2") == []

    def test_list_in(self, store):
        milestones = store.list_in("marcos_desenvolvimento", "paciente_id", ["1", "2"])
        assert len(milestones) == 3

    def test_update_revalidates(self, store):
        updated = store.update("sessoes", "s3", {"duracao": 90})
        assert updated.duracao == 90
        assert updated.atualizado_em > updated.criado_em

        with pytest.raises(ValidationError):
            store.update("sessoes", "s3", {"status": "realizada", "observacoes": ""})
        assert store.get("sessoes", "s3").status == "agendada"

    def test_update_keeps_identity(self, store):
        updated = store.update("pacientes", "1", {"id": "other", "status": "alta"})
        assert updated.id == "1"
        assert updated.status == "alta"

    def test_delete(self, store):
        store.delete("sessoes", "s4")
        with pytest.raises(RecordNotFoundError):
            store.get("sessoes", "s4")
        with pytest.raises(RecordNotFoundError):
            store.delete("sessoes", "s4")

    def test_unknown_table(self):
        with pytest.raises(ValueError):
            RecordStore().list("usuarios")

    def test_load_jsonl(self, tmp_path):
        path = tmp_path / "seed.jsonl"
        rows = [
            {"table": "pacientes", "record": {
                "nome": "Ana", "data_nascimento": "2015-03-15", "responsavel": "Maria",
                "status": "ativo", "usuario_id": "u1",
            }},
            {"table": "sessoes", "record": {
                "id": "x", "paciente_id": "p", "data_sessao": "2024-01-22T14:00:00Z",
                "status": "agendada",
            }},
        ]
        path.write_text("\n".join(json.dumps(r) for r in rows) + "\n\n", encoding="utf-8")

        store = RecordStore()
        assert store.load_jsonl(path) == 2
        assert store.get("sessoes", "x").duracao == 60

    def test_missing_seed_file_gives_empty_store(self, tmp_path):
        store = RecordStore.from_file(tmp_path / "missing.jsonl")
        assert store.count("pacientes") == 0

    def test_created_session_round_trips_assessment(self):
        store = RecordStore()
        session = SessionCreate(
            data_sessao="2024-01-15T10:00:00Z",
            objetivos="Comunicação",
            observacoes="Boa sessão",
            avaliacao={"cognitiva": {"nivel": 4, "atencao": "boa"}},
        )
        created = store.create("sessoes", session, paciente_id="1")
        assert store.get("sessoes", created.id).avaliacao.cognitiva.atencao == "boa"

    def test_concurrent_writes_are_all_counted(self):
        store = RecordStore()

        def add_patients():
            for i in range(50):
                store.create(
                    "pacientes",
                    PatientCreate(nome=f"Paciente {i}", data_nascimento="2015-01-01", responsavel="R"),
                    usuario_id="u1",
                )

        workers = [threading.Thread(target=add_patients) for _ in range(4)]
        for w in workers:
            w.start()
        for w in workers:
            w.join()

        assert store.count("pacientes") == 200
        assert len(store.list("pacientes")) == 200
