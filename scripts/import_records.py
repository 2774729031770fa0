"""
Convert CSV table exports into the NeuroTrack seed format.

Reads one CSV per table from the input directory:
- pacientes.csv
- sessoes.csv
- marcos_desenvolvimento.csv
- planos_tratamento.csv
- metricas_progresso.csv

Output: data/records.jsonl, one {"table": ..., "record": ...} per line.
Load it by pointing NEUROTRACK_DATA_FILE at the output file.
"""

import json
import argparse
import pandas as pd
from pathlib import Path
from typing import Dict, List, Any

from neurotrack.core.store import TABLE_MODELS


DATA_DIR = Path(__file__).parent.parent / "data"
RAW_DIR = DATA_DIR / "raw"
OUTPUT_FILE = DATA_DIR / "records.jsonl"

# Columns holding nested JSON in the export
JSON_COLUMNS = {"avaliacao"}


def load_csv(input_dir: Path, table: str) -> pd.DataFrame:
    """Load one exported table."""
    path = input_dir / f"{table}.csv"
    if not path.exists():
        print(f"Warning: {path} not found")
        return pd.DataFrame()
    return pd.read_csv(path, dtype=str, keep_default_na=False)


def clean_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """Empty cells become None, JSON columns are decoded."""
    record = {}
    for key, value in row.items():
        if value == "":
            record[key] = None
        elif key in JSON_COLUMNS:
            record[key] = json.loads(value)
        else:
            record[key] = value
    return record


def convert_table(input_dir: Path, table: str) -> List[Dict[str, Any]]:
    """Validate and convert every row of a table."""
    df = load_csv(input_dir, table)
    if df.empty:
        return []

    model = TABLE_MODELS[table]
    rows = []
    skipped = 0
    for raw in df.to_dict(orient="records"):
        try:
            record = clean_row(raw)
            validated = model.model_validate(record)
        except ValueError as e:
            # Malformed JSON cells and invalid records alike
            skipped += 1
            print(f"  Skipping {table} row {raw.get('id')}: {e}")
            continue
        rows.append({"table": table, "record": validated.model_dump(mode="json")})

    print(f"  {table}: {len(rows)} records ({skipped} skipped)")
    return rows


def main():
    parser = argparse.ArgumentParser(description="Convert CSV exports to NeuroTrack JSONL")
    parser.add_argument("--input", type=Path, default=RAW_DIR, help="Directory with <table>.csv files")
    parser.add_argument("--output", type=Path, default=OUTPUT_FILE, help="JSONL file to write")
    args = parser.parse_args()

    print(f"Reading exports from {args.input}")
    rows = []
    for table in TABLE_MODELS:
        rows.extend(convert_table(args.input, table))

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, "w", encoding="utf-8") as f:
        for row in rows:
            f.write(json.dumps(row, ensure_ascii=False) + "\n")

    print(f"\nWrote {len(rows)} records to {args.output}")


if __name__ == "__main__":
    main()
