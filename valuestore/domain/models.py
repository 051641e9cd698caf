"""
Domain models for the values service.

`Record` is the single persisted entity: a sequence of numbers plus the
server-side time it was stored. `ValuesSubmission` is the POST body. Both are
used for validation and serialization at the HTTP and storage boundaries.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Sequence

from pydantic import AwareDatetime, BaseModel, Field, StrictFloat


def utc_now() -> datetime:
    """Current UTC time truncated to BSON datetime (millisecond) precision."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class ValuesSubmission(BaseModel):
    """
    Body of `POST /values`.

    Entries must be finite JSON numbers; strings and booleans are rejected
    rather than coerced, and NaN, Infinity or literals that overflow a double
    are rejected too.
    """

    values: List[StrictFloat] = Field(..., description="Numbers to persist, in order.")

    model_config = {
        "extra": "ignore",
        "allow_inf_nan": False,
    }


class Record(BaseModel):
    """
    Representation of a single document in the `values` collection.
    """

    values: List[StrictFloat] = Field(..., description="Submitted numbers, in order.")
    timestamp: AwareDatetime = Field(..., description="Server-assigned insert time (UTC).")

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "allow_inf_nan": False,
    }

    @classmethod
    def stamp(cls, values: Sequence[float]) -> "Record":
        """Build a record for `values` timestamped with the current server time."""
        return cls(values=list(values), timestamp=utc_now())

    def to_document(self) -> dict:
        """Driver-ready document: exactly the `values` and `timestamp` fields."""
        return {"values": list(self.values), "timestamp": self.timestamp}


__all__ = ["Record", "ValuesSubmission", "utc_now"]
