from __future__ import annotations

from typing import Sequence

_SHOWN_SKILLS = 3


def format_skills(skills: Sequence[str]) -> str:
    if len(skills) > _SHOWN_SKILLS:
        shown = ", ".join(skills[:_SHOWN_SKILLS])
        return f"{shown}, and {len(skills) - _SHOWN_SKILLS} more"
    if len(skills) <= 1:
        return "".join(skills)
    return f"{', '.join(skills[:-1])} and {skills[-1]}"


def compose_summary(name: str, skills: Sequence[str], experience: str | None = None) -> str:
    """Template summary used when the AI writer is unavailable.

    ``name`` is accepted for parity with the AI prompt; the template is written
    in the third person and does not render it.
    """
    _ = name
    level = "experienced" if experience else "entry-level"
    return (
        f"Motivated {level} professional with expertise in {format_skills(list(skills))}. "
        "Eager to contribute to innovative projects and grow within a dynamic team environment. "
        "Strong problem-solving abilities and committed to continuous learning and professional development."
    )
