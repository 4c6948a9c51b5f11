from __future__ import annotations

import json
import logging
import os
import re
from typing import Any

logger = logging.getLogger(__name__)

# Greedy: spans from the first "{" to the last "}" in the reply.
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-JSON constant {token}")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def ai_enabled() -> bool:
    if not _env_bool("AI_ENABLED", True):
        return False
    provider = (os.getenv("AI_PROVIDER") or "openai").strip().lower()
    if provider != "openai":
        return False
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    if not api_key or _looks_like_placeholder(api_key):
        return False
    return True


def extract_json_object(text: str) -> dict[str, Any] | None:
    """Return the JSON object embedded in a model reply, or None if there is none."""
    match = _JSON_OBJECT_RE.search(text or "")
    if not match:
        return None
    try:
        parsed = json.loads(match.group(0), parse_constant=_reject_constant)
    except ValueError as exc:
        logger.debug("ai_json_parse_failed chars=%s: %s", len(match.group(0)), exc)
        return None
    return parsed if isinstance(parsed, dict) else None
