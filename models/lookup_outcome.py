from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from .profile_lookup_result import ProfileLookupResult


LookupStatus = Literal["found", "empty", "failed"]


class LookupOutcome(BaseModel):
    """Lookup result that keeps "no results" and "request failed" apart."""

    status: LookupStatus
    result: ProfileLookupResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"
