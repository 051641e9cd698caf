"""
Typed storage boundary over a MongoDB collection.

`RecordStore` is the only code that touches driver documents. Writes take a
`Record`; reads decode every document back into a `Record` and reject
documents of any other shape.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Protocol

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from valuestore.domain.errors import RecordDecodeError, StorageError
from valuestore.domain.models import Record


class RecordCollection(Protocol):
    """The subset of `pymongo.collection.Collection` used by the store."""

    def insert_one(self, document: Any) -> Any:
        ...

    def find(self, filter: Any = None) -> Any:
        ...


class RecordStore:
    """
    Insert-one and find-all over a single collection.

    The collection handle is fixed at construction; pymongo collections are
    thread-safe, so one store can serve concurrent requests.
    """

    def __init__(self, collection: RecordCollection) -> None:
        self._collection = collection

    def insert(self, record: Record) -> None:
        """
        Persist `record` as a new document.

        Raises
        ------
        StorageError
            If the driver reports any failure.
        """
        try:
            self._collection.insert_one(record.to_document())
        except PyMongoError as exc:
            raise StorageError(f"Failed to save data: {exc}") from exc

    def find_all(self) -> List[Record]:
        """
        Return every stored record in the collection's natural order.

        No filter, projection, sort or limit is applied.

        Raises
        ------
        StorageError
            If the query or cursor iteration fails.
        RecordDecodeError
            If a document is not shaped like a Record.
        """
        try:
            documents: List[Mapping[str, Any]] = list(self._collection.find({}))
        except PyMongoError as exc:
            raise StorageError(f"Failed to retrieve data: {exc}") from exc

        records: List[Record] = []
        for document in documents:
            try:
                records.append(Record.model_validate(dict(document)))
            except ValidationError as exc:
                raise RecordDecodeError(
                    f"Failed to decode document {document.get('_id')!r}"
                ) from exc
        return records


__all__ = ["RecordCollection", "RecordStore"]
