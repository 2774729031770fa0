"""
Record store.

In-memory stand-in for the managed database: one table per record type,
records validated through their pydantic models. Constructed explicitly
and handed to the API through app state; nothing here is global.
"""

import json
import logging
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Type, Union

from pydantic import BaseModel

from neurotrack.models import Milestone, Patient, ProgressMetric, Session, TreatmentPlan
from neurotrack.utils.logging import get_logger, log_with_context

from .errors import RecordNotFoundError

logger = get_logger(__name__)


TABLE_MODELS: Dict[str, Type[BaseModel]] = {
    "pacientes": Patient,
    "sessoes": Session,
    "marcos_desenvolvimento": Milestone,
    "planos_tratamento": TreatmentPlan,
    "metricas_progresso": ProgressMetric,
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


class RecordStore:
    """Thread-safe in-memory tables keyed by record id."""

    def __init__(self):
        self._tables: Dict[str, Dict[str, BaseModel]] = {t: {} for t in TABLE_MODELS}
        self._lock = threading.Lock()

    def _table(self, table: str) -> Dict[str, BaseModel]:
        if table not in self._tables:
            raise ValueError(f"Unknown table: {table}. Available: {list(TABLE_MODELS.keys())}")
        return self._tables[table]

    # --- Reads ---

    def list(self, table: str, **equals: Any) -> List[BaseModel]:
        """All records of a table matching every field=value given, insertion order."""
        rows = self._table(table)
        with self._lock:
            records = list(rows.values())
        return [
            r for r in records
            if all(getattr(r, name, None) == value for name, value in equals.items())
        ]

    def list_in(self, table: str, field: str, values: Iterable[Any]) -> List[BaseModel]:
        """Records whose field is one of values."""
        wanted = set(values)
        return [r for r in self.list(table) if getattr(r, field, None) in wanted]

    def get(self, table: str, record_id: str) -> BaseModel:
        rows = self._table(table)
        with self._lock:
            record = rows.get(record_id)
        if record is None:
            raise RecordNotFoundError(table, record_id)
        return record

    def count(self, table: str) -> int:
        rows = self._table(table)
        with self._lock:
            return len(rows)

    # --- Writes ---

    def _insert(self, table: str, data: Dict[str, Any]) -> BaseModel:
        now = _now()
        data.setdefault("id", str(uuid.uuid4()))
        data.setdefault("criado_em", now)
        data.setdefault("atualizado_em", now)

        record = TABLE_MODELS[table].model_validate(data)
        rows = self._table(table)
        with self._lock:
            rows[record.id] = record
        return record

    def create(self, table: str, payload: Union[BaseModel, Dict[str, Any]], **fields: Any) -> BaseModel:
        """
        Insert a new record.

        Args:
            table: Table name
            payload: Create model (or dict) with the user-supplied fields
            **fields: Server-side fields such as paciente_id or usuario_id

        Returns:
            The stored record with id and timestamps
        """
        data = payload.model_dump() if isinstance(payload, BaseModel) else dict(payload)
        data.update(fields)
        data.pop("id", None)

        record = self._insert(table, data)
        log_with_context(
            logger, logging.INFO, f"Created {table} record",
            context={"id": record.id},
            patient_id=getattr(record, "paciente_id", None),
        )
        return record

    def update(self, table: str, record_id: str, changes: Dict[str, Any]) -> BaseModel:
        """Apply a partial update; the merged record is re-validated."""
        current = self.get(table, record_id)
        data = current.model_dump()
        data.update({k: v for k, v in changes.items() if k not in ("id", "criado_em")})
        data["atualizado_em"] = _now()

        record = TABLE_MODELS[table].model_validate(data)
        rows = self._table(table)
        with self._lock:
            rows[record_id] = record

        log_with_context(logger, logging.INFO, f"Updated {table} record", context={"id": record_id})
        return record

    def delete(self, table: str, record_id: str) -> None:
        rows = self._table(table)
        with self._lock:
            if record_id not in rows:
                raise RecordNotFoundError(table, record_id)
            del rows[record_id]
        log_with_context(logger, logging.INFO, f"Deleted {table} record", context={"id": record_id})

    # --- Seeding ---

    def load_jsonl(self, path: Union[str, Path]) -> int:
        """
        Load records from a JSONL file.

        Each line is {"table": <table name>, "record": {...}}. Records keep
        their id and timestamps when present.

        Returns:
            Number of records loaded
        """
        loaded = 0
        with open(path, encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                row = json.loads(line)
                self._insert(row["table"], dict(row["record"]))
                loaded += 1

        logger.info(f"Loaded {loaded} records from {path}")
        return loaded

    @classmethod
    def from_file(cls, path: Optional[Union[str, Path]]) -> "RecordStore":
        """Empty store, seeded from path when it exists."""
        store = cls()
        if path and Path(path).exists():
            store.load_jsonl(path)
        elif path:
            logger.warning(f"Seed file not found: {path}")
        return store
