"""
FastAPI application factory.

`create_app` wires a ready `ValuesService` into the routes and registers the
exception handlers. Connecting to storage happens before this is called (see
`valuestore.main.serve`), so a constructed app is always backed by a store
that answered a ping.
"""

from __future__ import annotations

from typing import Dict

from fastapi import FastAPI

from valuestore import __version__
from valuestore.api.errors import register_exception_handlers
from valuestore.api.routes import build_values_router
from valuestore.service import ValuesService


def create_app(service: ValuesService) -> FastAPI:
    app = FastAPI(title="Values API", version=__version__)
    register_exception_handlers(app)
    app.include_router(build_values_router(service))

    @app.get("/healthz")
    def healthz() -> Dict[str, bool]:
        return {"ok": True}

    return app


__all__ = ["create_app"]
