from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


SORT_OPTIONS: tuple[str, ...] = (
    "companyNameAsc",
    "companyNameDesc",
    "registrationDateAsc",
    "registrationDateDesc",
    "numEmployeesAsc",
    "numEmployeesDesc",
    "relevance",
    "revenueAsc",
    "revenueDesc",
    "profitAsc",
    "profitDesc",
)


class SearchParams(BaseModel):
    """Segmentation search request. Revenue bounds are in thousand SEK."""

    industry_code: str | None = Field(default=None, alias="industryCode")
    location: str | None = None
    company_type: str | None = Field(default=None, alias="companyType")
    revenue_from: int | None = Field(default=None, alias="revenueFrom")
    revenue_to: int | None = Field(default=None, alias="revenueTo")
    employees_from: int | None = Field(default=None, alias="employeesFrom")
    employees_to: int | None = Field(default=None, alias="employeesTo")
    page: int | None = Field(default=None, ge=1)
    # Checked against SORT_OPTIONS by services.params so the error names the value
    sort: str | None = None

    model_config = ConfigDict(extra="forbid", populate_by_name=True)
