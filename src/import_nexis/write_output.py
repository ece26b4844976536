"""Output writers for imported records."""

import json
import logging
from dataclasses import asdict
from pathlib import Path

import pyarrow as pa
import pyarrow.csv as pa_csv
import pyarrow.parquet as pq

from import_nexis.models import RECORD_COLUMNS, NexisRecord

logger = logging.getLogger(__name__)

# Every column is text; `length` stays a digit string and may be empty.
RECORD_SCHEMA = pa.schema([pa.field(name, pa.string(), nullable=False) for name in RECORD_COLUMNS])


def records_to_table(records: list[NexisRecord]) -> pa.Table:
    """Convert records to a PyArrow table with the fixed string schema."""
    rows = [asdict(record) for record in records]
    return pa.Table.from_pylist(rows, schema=RECORD_SCHEMA)


def write_parquet(records: list[NexisRecord], path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(records_to_table(records), path)


def write_csv(records: list[NexisRecord], path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    pa_csv.write_csv(records_to_table(records), path)


def write_json(records: list[NexisRecord], path: str) -> None:
    rows = [asdict(record) for record in records]
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(json.dumps(rows, indent=2, ensure_ascii=False))


def write_jsonl(records: list[NexisRecord], path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for record in records:
            f.write(json.dumps(asdict(record), ensure_ascii=False) + "\n")


WRITERS = {
    ".parquet": write_parquet,
    ".csv": write_csv,
    ".json": write_json,
    ".jsonl": write_jsonl,
}


def write_output(records: list[NexisRecord], path: str) -> None:
    """Write records to a file, detecting the format from the extension."""
    suffix = Path(path).suffix.lower()
    writer = WRITERS.get(suffix)
    if writer is None:
        raise ValueError(f"Unsupported output format: {suffix or path}. Use one of {sorted(WRITERS)}")
    writer(records, path)
    logger.info("Wrote %d records to %s", len(records), path)
