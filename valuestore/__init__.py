"""
valuestore - a small HTTP service that stores lists of numbers in MongoDB.

`POST /values` persists a submitted list with a server-side timestamp;
`GET /values` returns every stored record. The package is layered as:

- `valuestore.config`: environment-driven settings
- `valuestore.domain`: the Record model and error hierarchy
- `valuestore.infrastructure`: MongoDB client factory and typed record store
- `valuestore.service`: the service object handed to the HTTP layer
- `valuestore.api`: FastAPI routes, error mapping and app factory
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from valuestore.api.app import create_app
from valuestore.config import Settings, get_settings
from valuestore.domain import (
    Record,
    RecordDecodeError,
    StorageError,
    StorageUnavailableError,
    ValuesSubmission,
    ValuestoreError,
)
from valuestore.infrastructure import RecordStore
from valuestore.service import ValuesService
from valuestore.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "ValuesSubmission",
    "ValuestoreError",
    "StorageError",
    "RecordDecodeError",
    "StorageUnavailableError",
    # Wiring
    "RecordStore",
    "ValuesService",
    "create_app",
    # Logging
    "configure_logging",
    "get_logger",
]
