from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class IndustryCode(BaseModel):
    name: str
    industry_code: str = Field(alias="industryCode")

    model_config = ConfigDict(populate_by_name=True)
