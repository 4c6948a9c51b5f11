from __future__ import annotations

import logging
from typing import Sequence

from skillpath.ai.completion import ai_enabled
from skillpath.ai.factory import get_ai_client
from skillpath.ai.types import ChatMessage
from skillpath.features.summary_composer import compose_summary

logger = logging.getLogger(__name__)

SUMMARY_SYSTEM_PROMPT = """You are a professional CV writer. Create a compelling professional summary for a CV.
Return ONLY the summary text (2-3 sentences), no JSON, no quotes.
Make it professional, concise, and tailored to entry-level Indian job market.
Maximum 50 words."""


def build_summary_messages(name: str, skills: Sequence[str], experience: str | None) -> list[ChatMessage]:
    user_prompt = (
        f"Name: {name}\n"
        f"Skills: {', '.join(skills)}\n"
        f"Experience: {experience or 'Entry level / Fresher'}\n"
        "\n"
        "Generate a professional summary:"
    )
    return [
        ChatMessage(role="system", content=SUMMARY_SYSTEM_PROMPT),
        ChatMessage(role="user", content=user_prompt),
    ]


async def generate_summary(name: str, skills: Sequence[str], experience: str | None = None) -> str:
    if ai_enabled():
        try:
            reply = await get_ai_client().complete(build_summary_messages(name, skills, experience))
            summary = (reply or "").strip()
            if summary:
                return summary
            logger.warning("summary_ai_empty skills=%s", len(skills))
        except Exception as exc:  # noqa: BLE001 - template fallback is expected
            logger.warning("summary_ai_failed skills=%s: %s", len(skills), exc)

    return compose_summary(name, skills, experience)
