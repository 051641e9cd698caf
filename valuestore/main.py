from __future__ import annotations

import sys
from typing import Optional

import typer
import uvicorn
from pydantic import ValidationError

from valuestore.api.app import create_app
from valuestore.config import Settings, get_settings
from valuestore.domain.errors import StorageUnavailableError
from valuestore.infrastructure.mongo_factory import connect, get_collection
from valuestore.infrastructure.record_store import RecordStore
from valuestore.service import ValuesService
from valuestore.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Values service: persist numeric values with a server timestamp.")
log = get_logger(__name__)


def _load_settings() -> Settings:
    """Load settings or exit with a diagnostic naming the missing variables."""
    try:
        return get_settings()
    except ValidationError as exc:
        configure_logging()
        missing = ", ".join(
            str(error["loc"][0]) for error in exc.errors() if error.get("loc")
        )
        log.error(f"Invalid configuration: {missing}", extra={"errors": exc.error_count()})
        raise typer.Exit(code=1) from exc


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = _load_settings()
    typer.echo(
        f"MongoDB={settings.redacted_mongodb_uri} | "
        f"collection={settings.mongodb_database}.{settings.mongodb_collection} | "
        f"listen={settings.server_host}:{settings.server_port} | env={settings.app_env}"
    )


@app.command()
def serve(
    host: Optional[str] = typer.Option(
        None,
        "--host",
        help="Override the bind host (default from SERVER_HOST).",
    ),
    port: Optional[int] = typer.Option(
        None,
        "--port",
        "-p",
        min=1,
        max=65535,
        help="Override the bind port (default from SERVER_PORT).",
    ),
) -> None:
    """
    Connect to MongoDB and serve the values API until interrupted.
    """
    settings = _load_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    try:
        client = connect(settings)
    except StorageUnavailableError as exc:
        log.error(f"Failed to connect to MongoDB: {exc}")
        raise typer.Exit(code=1) from exc

    try:
        service = ValuesService(RecordStore(get_collection(client, settings)))
        bind_host = host or settings.server_host
        bind_port = port or settings.server_port
        log.info(f"Server running on http://{bind_host}:{bind_port}")
        uvicorn.run(
            create_app(service),
            host=bind_host,
            port=bind_port,
            log_config=None,
        )
    finally:
        client.close()


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
