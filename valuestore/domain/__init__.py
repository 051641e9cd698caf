"""
Domain package for the values service.

Exports the record models and the error hierarchy used by the storage and
HTTP layers. Keep this package focused on data definitions and validation.
"""

from valuestore.domain.errors import (
    RecordDecodeError,
    StorageError,
    StorageUnavailableError,
    ValuestoreError,
)
from valuestore.domain.models import Record, ValuesSubmission, utc_now

__all__ = [
    "Record",
    "ValuesSubmission",
    "utc_now",
    "ValuestoreError",
    "StorageError",
    "RecordDecodeError",
    "StorageUnavailableError",
]
