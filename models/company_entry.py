from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


ORG_NUMBER_MISSING = "N/A"


class CompanyEntry(BaseModel):
    """One company from a segmentation result page."""

    name: str
    org_number: str = Field(default=ORG_NUMBER_MISSING, alias="orgNumber")
    location: str = ""
    link: str = ""
    revenue: int | None = None
    revenue_year: str | None = Field(default=None, alias="revenueYear")
    employees: int | None = None
    profit: int | None = None
    profit_year: str | None = Field(default=None, alias="profitYear")
    registration_date: date | None = Field(default=None, alias="registrationDate")
    industry: list[str] | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
