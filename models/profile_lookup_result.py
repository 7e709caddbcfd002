from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProfileLookupResult(BaseModel):
    """Name, profile URL and note taken from the first organic result."""

    name: str = ""
    linkedin_url: str = Field(alias="linkedInUrl")
    note: str = ""

    model_config = ConfigDict(populate_by_name=True)
