"""
Routes for `/values`.

GET and POST share the path; Starlette answers any other method with 405.
The router is built around an explicit `ValuesService` so handlers never
reach for process-wide state.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from valuestore.domain.models import Record, ValuesSubmission
from valuestore.service import ValuesService

SAVED = "Values saved successfully with timestamp"


def build_values_router(service: ValuesService) -> APIRouter:
    router = APIRouter()

    # Plain `def` handlers run in the server's thread pool; each makes one
    # blocking driver call.
    @router.post("/values", response_class=PlainTextResponse)
    def post_values(submission: ValuesSubmission) -> str:
        service.submit(submission.values)
        return SAVED

    @router.get("/values", response_model=List[Record])
    def get_values() -> List[Record]:
        return service.list_records()

    return router


__all__ = ["build_values_router", "SAVED"]
