from __future__ import annotations

import math
from typing import Callable, Optional, Sequence

from skillpath.features.career_rules import DEFAULT_TAG, CareerRule, RuleTable, load_rule_table
from skillpath.schemas.career import CareerPlanResult, RoadmapStep, SkillGap

FRONTEND_SIGNALS = frozenset({"html", "css", "javascript", "react"})
BACKEND_SIGNALS = frozenset({"python", "java", "node.js", "sql"})
DATA_SIGNALS = frozenset({"excel", "sql", "data analysis", "python"})
DATA_BLOCKERS = frozenset({"html", "css", "react"})
MARKETING_SIGNALS = frozenset({"digital marketing", "content writing", "seo", "social media"})
DESIGN_SIGNALS = frozenset({"ui/ux design", "graphic design", "figma"})
CONTENT_SIGNALS = frozenset({"content writing", "communication"})
CONTENT_BLOCKERS = frozenset({"javascript", "python", "java"})
VIDEO_SIGNALS = frozenset({"video editing", "premiere pro", "after effects"})

# A step returns a rule tag when it matches, or None to keep the current selection.
CascadeStep = Callable[[list[str]], Optional[str]]


def _any_in(skills: list[str], signals: frozenset[str]) -> bool:
    return any(skill in signals for skill in skills)


def backend_tag(skills: list[str]) -> str:
    """Pick the backend flavour for case-folded skills: fullstack, python, java, then generic."""
    if _any_in(skills, FRONTEND_SIGNALS):
        return "fullstack"
    if "python" in skills:
        return "python"
    if "java" in skills:
        return "java"
    return "backend"


def _frontend(skills: list[str]) -> str | None:
    return "frontend" if _any_in(skills, FRONTEND_SIGNALS) else None


def _backend(skills: list[str]) -> str | None:
    return backend_tag(skills) if _any_in(skills, BACKEND_SIGNALS) else None


def _data(skills: list[str]) -> str | None:
    if _any_in(skills, DATA_SIGNALS) and not _any_in(skills, DATA_BLOCKERS):
        return "data"
    return None


def _marketing(skills: list[str]) -> str | None:
    return "marketing" if _any_in(skills, MARKETING_SIGNALS) else None


def _design(skills: list[str]) -> str | None:
    return "design" if _any_in(skills, DESIGN_SIGNALS) else None


def _content(skills: list[str]) -> str | None:
    if _any_in(skills, CONTENT_SIGNALS) and not _any_in(skills, CONTENT_BLOCKERS):
        return "content"
    return None


def _video(skills: list[str]) -> str | None:
    return "video" if _any_in(skills, VIDEO_SIGNALS) else None


CASCADE: tuple[CascadeStep, ...] = (
    _frontend,
    _backend,
    _data,
    _marketing,
    _design,
    _content,
    _video,
)


def select_rule_tag(skills: Sequence[str]) -> str:
    """Run the override cascade; the last matching step wins."""
    lowered = [skill.lower() for skill in skills]
    selected = DEFAULT_TAG
    for step in CASCADE:
        tag = step(lowered)
        if tag is not None:
            selected = tag
    return selected


def _skill_present(required: str, lowered_skills: list[str]) -> bool:
    target = required.lower()
    return any(skill in target or target in skill for skill in lowered_skills)


def missing_skills(rule: CareerRule, skills: Sequence[str]) -> list[str]:
    lowered = [skill.lower() for skill in skills]
    return [req for req in rule.required_skills if not _skill_present(req, lowered)]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def placement_probability(rule: CareerRule, missing_count: int, ceiling: int) -> int:
    required_count = len(rule.required_skills)
    match_ratio = (required_count - missing_count) / required_count
    adjusted = _round_half_up(rule.base_probability * (0.5 + match_ratio * 0.5))
    return min(adjusted, ceiling)


def build_roadmap(rule: CareerRule) -> list[RoadmapStep]:
    focus = " and ".join(rule.required_skills[:2])
    return [
        RoadmapStep(step=1, title="Improve Core Skills", description=f"Master {focus} fundamentals"),
        RoadmapStep(step=2, title="Build 2 Projects", description="Create portfolio projects to showcase your skills"),
        RoadmapStep(step=3, title="Internship / Freelance", description="Gain real-world experience through internships"),
        RoadmapStep(step=4, title="Apply Smartly", description="Target companies matching your skill level"),
    ]


def determine_career(skills: Sequence[str], *, table: RuleTable | None = None) -> CareerPlanResult:
    rules = table or load_rule_table()
    rule = rules.get(select_rule_tag(skills))
    missing = missing_skills(rule, skills)
    return CareerPlanResult(
        career=rule.career,
        salary_range=rule.salary_range,
        placement_probability=placement_probability(rule, len(missing), rules.probability_ceiling),
        roadmap=build_roadmap(rule),
        skill_gap=SkillGap(
            current=list(skills),
            required=list(rule.required_skills),
            missing=missing,
        ),
    )
