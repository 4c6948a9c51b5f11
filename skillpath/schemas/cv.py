from __future__ import annotations

from pydantic import BaseModel, Field


class SummaryRequest(BaseModel):
    name: str | None = None
    skills: list[str] | None = None
    experience: str | None = None


class SummaryResponse(BaseModel):
    summary: str


class CVData(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    education: str = ""
    skills: list[str] = Field(default_factory=list)
    projects: list[str] = Field(default_factory=list)
    experience: str = ""
    summary: str = ""
