from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Literal, Sequence

from pydantic import ValidationError

from skillpath.ai.completion import ai_enabled, extract_json_object
from skillpath.ai.factory import get_ai_client
from skillpath.ai.types import ChatMessage
from skillpath.core.config import settings
from skillpath.core.session import SessionContext
from skillpath.features.career_classifier import determine_career
from skillpath.features.career_rules import load_rule_table
from skillpath.schemas.career import CareerPlanResult

logger = logging.getLogger(__name__)

PlanSource = Literal["ai", "fallback"]

CAREER_SYSTEM_PROMPT = """You are a career advisor for Indian job market. Analyze the given skills and suggest the best career path.
Return ONLY a JSON object with this exact structure:
{
  "career": "Job Title",
  "salaryRange": "₹X LPA – ₹Y LPA",
  "placementProbability": number between 20-70,
  "roadmap": [{"step": 1, "title": "...", "description": "..."}, ...],
  "skillGap": {
    "current": ["skill1"],
    "required": ["skill1", "skill2"],
    "missing": ["skill2"]
  }
}

Important: Keep salary REALISTIC for Indian entry-level market (₹2-8 LPA max).
Placement probability should be conservative (20-70%)."""


@dataclass(frozen=True)
class CareerPlanOutcome:
    source: PlanSource
    body: dict[str, Any]


def build_career_messages(skills: Sequence[str]) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=CAREER_SYSTEM_PROMPT),
        ChatMessage(role="user", content=f"Skills: {', '.join(skills)}"),
    ]


def _passes_validation(candidate: dict[str, Any]) -> bool:
    try:
        plan = CareerPlanResult.model_validate(candidate)
    except ValidationError as exc:
        logger.warning("career_plan_ai_schema_invalid errors=%s", exc.error_count())
        return False
    ceiling = load_rule_table().probability_ceiling
    if not 0 <= plan.placement_probability <= ceiling:
        logger.warning("career_plan_ai_probability_out_of_range value=%s", plan.placement_probability)
        return False
    return True


async def _ai_career_plan(skills: Sequence[str], session: SessionContext) -> dict[str, Any] | None:
    started = time.perf_counter()
    try:
        client = get_ai_client()
        reply = await client.complete(build_career_messages(skills))
    except Exception as exc:  # noqa: BLE001 - deterministic fallback is expected
        logger.warning("career_plan_ai_failed session=%s skills=%s: %s", session.log_ref, len(skills), exc)
        return None

    latency_ms = int((time.perf_counter() - started) * 1000)
    candidate = extract_json_object(reply)
    if candidate is None:
        logger.warning(
            "career_plan_ai_unparsable session=%s reply_chars=%s latency_ms=%s",
            session.log_ref,
            len(reply or ""),
            latency_ms,
        )
        return None
    if settings.career_plan_validate_ai and not _passes_validation(candidate):
        return None

    logger.info("career_plan_ai_ok session=%s latency_ms=%s", session.log_ref, latency_ms)
    return candidate


async def generate_career_plan(skills: Sequence[str], *, session: SessionContext) -> CareerPlanOutcome:
    """Ask the AI advisor first; any failure lands on the rule-based classifier."""
    if ai_enabled():
        candidate = await _ai_career_plan(skills, session)
        if candidate is not None:
            return CareerPlanOutcome(source="ai", body=candidate)
    else:
        logger.debug("career_plan_ai_skipped session=%s", session.log_ref)

    plan = determine_career(skills)
    logger.info(
        "career_plan_fallback session=%s career=%s probability=%s missing=%s",
        session.log_ref,
        plan.career,
        plan.placement_probability,
        len(plan.skill_gap.missing),
    )
    return CareerPlanOutcome(source="fallback", body=plan.to_wire())
