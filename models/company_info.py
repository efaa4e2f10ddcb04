from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompanyInfo(BaseModel):
    """Detail page record for a single company."""

    name: str
    org_number: str = Field(alias="orgNumber")
    location: str = ""
    status: str
    revenue: int | None = None
    employees: int | None = None
    description: str | None = None
    phone: str | None = None
    industry: list[str] | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
