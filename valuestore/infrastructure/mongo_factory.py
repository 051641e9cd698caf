"""
MongoDB client factory utilities for the values service.

Centralizes creation of the pymongo client and the collection handle the
service writes to. The connection is verified once with a `ping` at startup;
a failure there is fatal to the process and is not retried.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from valuestore.config import Settings, get_settings
from valuestore.domain.errors import StorageUnavailableError
from valuestore.utils.logging import get_logger

log = get_logger(__name__)


def create_client(settings: Optional[Settings] = None) -> MongoClient:
    """
    Build a pymongo client from settings without performing any I/O.

    Datetimes are decoded as timezone-aware UTC values so stored timestamps
    round-trip through the typed Record model.
    """
    settings = settings or get_settings()
    return MongoClient(
        settings.mongodb_uri,
        tz_aware=True,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
    )


def ping(client: MongoClient) -> None:
    """
    Check that the server answers the `ping` admin command.

    Raises
    ------
    StorageUnavailableError
        If the server cannot be selected or rejects the command.
    """
    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        raise StorageUnavailableError(f"MongoDB connection error: {exc}") from exc


def get_collection(
    client: MongoClient, settings: Optional[Settings] = None
) -> Collection[Mapping[str, Any]]:
    """Return the configured collection handle (`testdb.values` by default)."""
    settings = settings or get_settings()
    return client[settings.mongodb_database][settings.mongodb_collection]


def connect(settings: Optional[Settings] = None) -> MongoClient:
    """
    Create a client and verify connectivity.

    The client is closed again if the ping fails, so callers only own a
    client that has answered at least once.
    """
    settings = settings or get_settings()
    client = create_client(settings)
    try:
        ping(client)
    except StorageUnavailableError:
        client.close()
        raise
    log.info(
        "Connected to MongoDB",
        extra={
            "database": settings.mongodb_database,
            "collection": settings.mongodb_collection,
        },
    )
    return client


__all__ = ["connect", "create_client", "get_collection", "ping"]
