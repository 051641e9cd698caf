"""
Application service for the values service.

`ValuesService` owns the record store for the lifetime of the process and is
handed to the HTTP layer explicitly; there is no module-level storage handle.
"""

from __future__ import annotations

from typing import List, Sequence

from valuestore.domain.models import Record
from valuestore.infrastructure.record_store import RecordStore
from valuestore.utils.logging import get_logger

log = get_logger(__name__)


class ValuesService:
    """Stamp and persist submitted values; list everything persisted."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def submit(self, values: Sequence[float]) -> Record:
        """
        Persist `values` with the current server time and return the record.

        Each call inserts a new document; identical submissions are not
        deduplicated.
        """
        record = Record.stamp(values)
        self._store.insert(record)
        log.debug("Record stored", extra={"value_count": len(record.values)})
        return record

    def list_records(self) -> List[Record]:
        """Return all stored records, unfiltered and unpaginated."""
        records = self._store.find_all()
        log.debug("Records retrieved", extra={"record_count": len(records)})
        return records


__all__ = ["ValuesService"]
