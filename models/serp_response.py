from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrganicResult(BaseModel):
    """One organic entry of the search proxy payload; both fields optional."""

    title: str | None = None
    link: str | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("title", "link", mode="before")
    @classmethod
    def _non_string_as_missing(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None


class SerpResponse(BaseModel):
    """Search proxy payload: only the organic results are consumed."""

    organic_results: list[OrganicResult] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_payload(cls, payload: Any) -> "SerpResponse":
        """Build leniently from a decoded JSON document.

        A non-object payload and a non-list ``organic_results`` are treated as
        absent; entries that are not objects are skipped.
        """
        if not isinstance(payload, dict):
            return cls()
        raw = payload.get("organic_results")
        if not isinstance(raw, list):
            return cls()
        return cls(organic_results=[item for item in raw if isinstance(item, dict)])
