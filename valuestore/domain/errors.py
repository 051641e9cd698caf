"""
Exception hierarchy for the values service.

Storage failures are wrapped in `StorageError` so the HTTP layer can map them
to status codes without importing driver exceptions.
"""
from __future__ import annotations


class ValuestoreError(Exception):
    """Base class for errors raised by this package."""


class StorageError(ValuestoreError):
    """An insert or find against the document store failed."""


class RecordDecodeError(StorageError):
    """A stored document does not have the shape of a Record."""


class StorageUnavailableError(StorageError):
    """The document store could not be reached at startup."""


__all__ = [
    "ValuestoreError",
    "StorageError",
    "RecordDecodeError",
    "StorageUnavailableError",
]
