"""
Infrastructure package for the values service.

Centralizes MongoDB connectivity and the typed record store. Keep this layer
focused on I/O and resource management, decoupled from HTTP concerns.
"""

from valuestore.infrastructure.mongo_factory import (
    connect,
    create_client,
    get_collection,
    ping,
)
from valuestore.infrastructure.record_store import RecordCollection, RecordStore

__all__ = [
    "connect",
    "create_client",
    "get_collection",
    "ping",
    "RecordCollection",
    "RecordStore",
]
