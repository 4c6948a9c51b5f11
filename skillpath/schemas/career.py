from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CareerPlanRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    skills: list[str] | None = None
    session_id: str | None = Field(default=None, alias="sessionId")

    @field_validator("session_id", mode="before")
    @classmethod
    def _session_as_text(cls, value: Any) -> str | None:
        # The token is opaque; any scalar the client sends is kept as text.
        return None if value is None else str(value)


class RoadmapStep(BaseModel):
    step: int
    title: str
    description: str


class SkillGap(BaseModel):
    current: list[str] = Field(default_factory=list)
    required: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class CareerPlanResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    career: str
    salary_range: str = Field(alias="salaryRange")
    placement_probability: int = Field(alias="placementProbability")
    roadmap: list[RoadmapStep]
    skill_gap: SkillGap = Field(alias="skillGap")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
