from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompanySearchResult(BaseModel):
    """Free-text search hit."""

    name: str
    org_number: str = Field(alias="orgNumber")
    location: str = ""
    link: str = ""
    revenue: int | None = None
    employees: int | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
