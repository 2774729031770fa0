"""
Record schema registry.

Describes, per record type, which fields are searched, which field the
status filter applies to, and the closed set of sort keys with the kind
of value each one holds.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from neurotrack.models import (
    PATIENT_STATUSES,
    SESSION_STATUSES,
    MILESTONE_STATUSES,
    METRIC_CATEGORIES,
    PLAN_STATUSES,
)


TEXT = "text"
DATE = "date"
NUMBER = "number"


@dataclass(frozen=True)
class SortField:
    """A recognized sort key: the record field it reads and its value kind."""
    field: str
    kind: str = TEXT


@dataclass(frozen=True)
class RecordSchema:
    """Query description for one record type."""
    name: str
    searchable: Tuple[str, ...]
    discriminant: str
    sort_keys: Dict[str, SortField] = field(default_factory=dict)
    default_sort: str = "nome"
    default_direction: str = "asc"
    known_values: Tuple[str, ...] = ()
    date_field: Optional[str] = None

    def has_sort_key(self, key: Optional[str]) -> bool:
        return key in self.sort_keys


PATIENTS = RecordSchema(
    name="pacientes",
    searchable=("nome", "responsavel", "diagnostico", "email"),
    discriminant="status",
    sort_keys={
        "nome": SortField("nome"),
        "data_nascimento": SortField("data_nascimento", DATE),
        "responsavel": SortField("responsavel"),
        "status": SortField("status"),
        "diagnostico": SortField("diagnostico"),
    },
    default_sort="nome",
    known_values=PATIENT_STATUSES,
    date_field="data_nascimento",
)

SESSIONS = RecordSchema(
    name="sessoes",
    searchable=("objetivos", "observacoes"),
    discriminant="status",
    sort_keys={
        "data_sessao": SortField("data_sessao", DATE),
        "duracao": SortField("duracao", NUMBER),
        "status": SortField("status"),
    },
    default_sort="data_sessao",
    default_direction="desc",
    known_values=SESSION_STATUSES,
    date_field="data_sessao",
)

MILESTONES = RecordSchema(
    name="marcos_desenvolvimento",
    searchable=("titulo", "descricao", "categoria"),
    discriminant="status",
    sort_keys={
        "titulo": SortField("titulo"),
        "categoria": SortField("categoria"),
        "status": SortField("status"),
        "data_alcancado": SortField("data_alcancado", DATE),
        "criado_em": SortField("criado_em", DATE),
    },
    default_sort="criado_em",
    default_direction="desc",
    known_values=MILESTONE_STATUSES,
    date_field="data_alcancado",
)

TREATMENT_PLANS = RecordSchema(
    name="planos_tratamento",
    searchable=("titulo", "descricao"),
    discriminant="status",
    sort_keys={
        "titulo": SortField("titulo"),
        "status": SortField("status"),
        "data_inicio": SortField("data_inicio", DATE),
        "data_fim": SortField("data_fim", DATE),
        "criado_em": SortField("criado_em", DATE),
    },
    default_sort="criado_em",
    default_direction="desc",
    known_values=PLAN_STATUSES,
    date_field="data_inicio",
)

PROGRESS_METRICS = RecordSchema(
    name="metricas_progresso",
    searchable=("categoria", "observacao"),
    discriminant="categoria",
    sort_keys={
        "data_registro": SortField("data_registro", DATE),
        "categoria": SortField("categoria"),
        "valor": SortField("valor", NUMBER),
    },
    default_sort="data_registro",
    default_direction="desc",
    known_values=METRIC_CATEGORIES,
    date_field="data_registro",
)


# Schema registry
SCHEMAS: Dict[str, RecordSchema] = {
    schema.name: schema
    for schema in (PATIENTS, SESSIONS, MILESTONES, TREATMENT_PLANS, PROGRESS_METRICS)
}


def get_schema(name: str) -> RecordSchema:
    """Get a record schema by table name."""
    if name not in SCHEMAS:
        raise ValueError(f"Unknown record type: {name}. Available: {list(SCHEMAS.keys())}")
    return SCHEMAS[name]
