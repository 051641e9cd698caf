"""
Configuration settings for the values service.

Uses Pydantic Settings to load environment variables for the MongoDB
connection, the HTTP listener and logging. The connection URI and the bind
address have no defaults: a process started without them fails validation
before anything connects or binds.
"""
from __future__ import annotations

from functools import lru_cache
from urllib.parse import urlsplit, urlunsplit

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Storage
    mongodb_uri: str = Field(..., alias="MONGODB_URI", min_length=1)
    mongodb_database: str = Field("testdb", alias="MONGODB_DATABASE", min_length=1)
    mongodb_collection: str = Field("values", alias="MONGODB_COLLECTION", min_length=1)
    mongodb_timeout_ms: int = Field(30_000, alias="MONGODB_TIMEOUT_MS", gt=0)

    # HTTP listener
    server_host: str = Field(..., alias="SERVER_HOST", min_length=1)
    server_port: int = Field(..., alias="SERVER_PORT", ge=1, le=65535)

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def redacted_mongodb_uri(self) -> str:
        """The connection URI with any password replaced by `***`."""
        parts = urlsplit(self.mongodb_uri)
        if parts.password is None:
            return self.mongodb_uri
        netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
        return urlunsplit(parts._replace(netloc=netloc))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.

    Raises pydantic.ValidationError when required variables are missing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
