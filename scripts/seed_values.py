"""
Seed script for the values service.

Generates deterministic pseudo-random records and inserts them into the
configured MongoDB collection, or prints them as JSON lines with --no-load.
"""

from __future__ import annotations

import random
import sys
import time
from datetime import timedelta
from typing import List

import typer

from valuestore.config import get_settings
from valuestore.domain.models import Record, utc_now
from valuestore.infrastructure.mongo_factory import connect, get_collection
from valuestore.infrastructure.record_store import RecordStore

app = typer.Typer(help="Generate synthetic value records and load them into MongoDB.")


def _generate_records(count: int, max_values: int, seed: int) -> List[Record]:
    rng = random.Random(seed)
    start = utc_now()
    records: List[Record] = []
    for i in range(count):
        size = rng.randint(0, max_values)
        values = [round(rng.uniform(-1_000, 1_000), 3) for _ in range(size)]
        records.append(Record(values=values, timestamp=start + timedelta(milliseconds=i)))
    return records


def _load_records(store: RecordStore, records: List[Record]) -> int:
    for record in records:
        store.insert(record)
    return len(records)


@app.command()
def main(
    count: int = typer.Option(
        100,
        "--count",
        "-n",
        min=0,
        help="Number of records to generate.",
    ),
    max_values: int = typer.Option(
        8,
        "--max-values",
        min=0,
        help="Upper bound on the number of values per record.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    no_load: bool = typer.Option(
        False,
        "--no-load",
        help="Only print the generated records; skip inserting into MongoDB.",
    ),
) -> None:
    """
    Generate synthetic records and optionally insert them into MongoDB.
    """
    start = time.perf_counter()
    records = _generate_records(count, max_values=max_values, seed=seed)

    if no_load:
        for record in records:
            typer.echo(record.model_dump_json())
        return

    settings = get_settings()
    client = connect(settings)
    try:
        inserted = _load_records(RecordStore(get_collection(client, settings)), records)
    finally:
        client.close()

    duration = time.perf_counter() - start
    typer.echo(
        f"Inserted {inserted:,} records into "
        f"{settings.mongodb_database}.{settings.mongodb_collection} in {duration:.2f}s"
    )


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
