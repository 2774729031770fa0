"""
Unit tests for the filter-then-sort query pipeline.
"""

import copy
from datetime import date

import pytest

from neurotrack.core.errors import InvalidDateError, InvalidValueError
from neurotrack.core.query import query
from neurotrack.core.schemas import PATIENTS, SESSIONS
from neurotrack.models import Patient, QueryOptions


def names(records):
    return [r["nome"] for r in records]


class TestQueryPatients:

    def test_status_filter_sorted_by_name(self, patients):
        result = query(patients, QueryOptions(status_filter="ativo", sort_key="nome"))
        assert names(result) == ["Ana Silva", "Beatriz Costa"]

    def test_defaults_return_everything_by_name(self, patients):
        assert names(query(patients)) == ["Ana Silva", "Beatriz Costa", "João Santos"]

    def test_search_and_status_combined(self, patients):
        options = QueryOptions(search_text="ana", status_filter="ativo")
        search_only = query(patients, QueryOptions(search_text="ana"))
        status_only = query(patients, QueryOptions(status_filter="ativo"))
        assert query(patients, options) == [p for p in search_only if p in status_only]

    def test_empty_input(self):
        assert query([], QueryOptions(search_text="x", sort_key="data_nascimento")) == []

    def test_input_not_mutated(self, patients):
        before = copy.deepcopy(patients)
        result = query(patients, QueryOptions(sort_key="nome", sort_direction="desc"))
        assert patients == before
        assert result is not patients

    def test_repeat_calls_identical(self, patients):
        options = QueryOptions(search_text="s", sort_key="responsavel", sort_direction="desc")
        assert query(patients, options) == query(patients, options)

    def test_unknown_sort_key_falls_back_to_name(self, patients):
        result = query(patients, QueryOptions(sort_key="telefone"))
        assert names(result) == ["Ana Silva", "Beatriz Costa", "João Santos"]

    def test_works_on_pydantic_records(self):
        records = [
            Patient(
                id=str(i), nome=nome, data_nascimento=born, responsavel="", status="ativo",
                usuario_id="u", criado_em="2024-01-01T00:00:00Z", atualizado_em="2024-01-01T00:00:00Z",
            )
            for i, (nome, born) in enumerate([("Carla", "2016-05-01"), ("Bruno", "2012-02-01")])
        ]
        result = query(records, QueryOptions(sort_key="data_nascimento"))
        assert [p.nome for p in result] == ["Bruno", "Carla"]


class TestSortStability:

    @pytest.mark.parametrize("direction", ["asc", "desc"])
    def test_equal_keys_keep_input_order(self, direction):
        records = [
            {"id": "a", "nome": "X", "status": "ativo"},
            {"id": "b", "nome": "Y", "status": "inativo"},
            {"id": "c", "nome": "Z", "status": "ativo"},
            {"id": "d", "nome": "W", "status": "ativo"},
        ]
        result = query(records, QueryOptions(sort_key="status", sort_direction=direction))
        ativos = [r["id"] for r in result if r["status"] == "ativo"]
        assert ativos == ["a", "c", "d"]


class TestQuerySessions:

    def test_default_is_newest_first(self, sessions):
        result = query(sessions, schema=SESSIONS)
        assert [s["data_sessao"][:10] for s in result] == [
            "2024-01-22", "2024-01-15", "2024-01-08", "2024-01-01",
        ]

    def test_status_todos_and_date_range(self, sessions):
        options = QueryOptions(
            status_filter="todos",
            date_from=date(2024, 1, 5),
            date_to=date(2024, 1, 20),
            sort_direction="asc",
        )
        result = query(sessions, options, SESSIONS)
        assert [s["data_sessao"][:10] for s in result] == ["2024-01-08", "2024-01-15"]

    def test_sort_by_duration(self, sessions):
        result = query(sessions, QueryOptions(sort_key="duracao"), SESSIONS)
        assert result[0]["duracao"] == 30

    def test_named_key_without_direction_is_ascending(self, sessions):
        result = query(sessions, QueryOptions(sort_key="data_sessao"), SESSIONS)
        assert [s["data_sessao"][:10] for s in result] == [
            "2024-01-01", "2024-01-08", "2024-01-15", "2024-01-22",
        ]

    def test_explicit_direction_overrides_default(self, sessions):
        result = query(sessions, QueryOptions(sort_direction="asc"), SESSIONS)
        assert result[0]["data_sessao"][:10] == "2024-01-01"

    def test_non_finite_duration_raises(self, sessions):
        records = sessions + [{"data_sessao": "2024-02-01T10:00:00Z", "status": "realizada", "duracao": "nan"}]
        with pytest.raises(InvalidValueError):
            query(records, QueryOptions(sort_key="duracao"), SESSIONS)

    def test_malformed_date_raises_even_for_single_record(self):
        records = [{"data_sessao": "ontem", "status": "realizada"}]
        with pytest.raises(InvalidDateError):
            query(records, schema=SESSIONS)

    def test_malformed_date_in_filtered_out_record_is_ignored(self, sessions):
        records = sessions + [{"data_sessao": "ontem", "status": "cancelada"}]
        result = query(records, QueryOptions(status_filter="realizada"), SESSIONS)
        assert len(result) == 2


class TestQueryOptions:

    def test_unknown_option_rejected(self):
        with pytest.raises(ValueError):
            QueryOptions(search="ana")

    def test_direction_is_closed(self):
        with pytest.raises(ValueError):
            QueryOptions(sort_direction="up")
