from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Competition = Literal["Low", "Medium", "High"]
CompetitionFilter = Literal["all", "Low", "Medium", "High"]


class Job(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title: str
    company: str
    location: str
    salary_range: str = Field(alias="salaryRange")
    experience: str
    competition: Competition
    skills: tuple[str, ...]
    posted_days: int = Field(alias="postedDays", ge=0)
    apply_url: str = Field(default="#", alias="applyUrl")


class JobListResponse(BaseModel):
    jobs: list[Job]
    total: int
