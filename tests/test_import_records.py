"""
CSV export conversion.
"""

import json

from scripts.import_records import clean_row, convert_table


def test_clean_row_decodes_json_and_empties():
    row = clean_row({"id": "s1", "resultados": "", "avaliacao": '{"motora": {"nivel": 2}}'})
    assert row["resultados"] is None
    assert row["avaliacao"] == {"motora": {"nivel": 2}}


def test_convert_table_skips_invalid_rows(tmp_path):
    (tmp_path / "sessoes.csv").write_text(
        "id,paciente_id,data_sessao,duracao,objetivos,observacoes,status,avaliacao,criado_em,atualizado_em\n"
        's1,1,2024-01-15T10:00:00Z,60,Comunicação,Boa sessão,realizada,"{""motora"": {""nivel"": 2}}",'
        "2024-01-15T10:00:00Z,2024-01-15T10:00:00Z\n"
        "s2,1,2024-01-22T14:00:00Z,500,,,agendada,,2024-01-20T10:00:00Z,2024-01-20T10:00:00Z\n",
        encoding="utf-8",
    )

    rows = convert_table(tmp_path, "sessoes")

    assert len(rows) == 1
    record = rows[0]["record"]
    assert rows[0]["table"] == "sessoes"
    assert record["duracao"] == 60
    assert record["avaliacao"]["motora"]["nivel"] == 2
    json.dumps(rows)


def test_missing_export_gives_no_rows(tmp_path):
    assert convert_table(tmp_path, "pacientes") == []


def test_malformed_assessment_json_skips_only_that_row(tmp_path):
    (tmp_path / "sessoes.csv").write_text(
        "id,paciente_id,data_sessao,status,avaliacao,criado_em,atualizado_em\n"
        "s1,1,2024-01-22T14:00:00Z,agendada,{not json,2024-01-20T10:00:00Z,2024-01-20T10:00:00Z\n"
        "s2,1,2024-01-29T14:00:00Z,agendada,,2024-01-20T10:00:00Z,2024-01-20T10:00:00Z\n",
        encoding="utf-8",
    )

    rows = convert_table(tmp_path, "sessoes")

    assert [r["record"]["id"] for r in rows] == ["s2"]
