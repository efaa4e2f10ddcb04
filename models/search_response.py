from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .company_entry import CompanyEntry


class SearchResponse(BaseModel):
    """A page of results plus the size of the whole matching population."""

    results: list[CompanyEntry] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0, alias="totalCount")

    model_config = ConfigDict(populate_by_name=True)
