import os
import re
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("AI_ENABLED", "0")

from skillpath.ai.completion import ai_enabled, extract_json_object
from skillpath.ai.factory import get_ai_client
from skillpath.api.v1.health import router as health_router
from skillpath.core.session import SessionContext, ensure_session_id, new_session_id, short_hash
from skillpath.main import app

SESSION_RE = re.compile(r"^session_\d+_[0-9a-z]{9}$")


def _registered_paths() -> set[str]:
    paths = (getattr(route, "path", None) for route in app.routes)
    return {path for path in paths if path} | set(app.openapi()["paths"])


def test_service_routes_are_registered() -> None:
    paths = _registered_paths()

    assert "/api/health" in paths
    assert "/api/career-plan" in paths
    assert "/api/generate-summary" in paths
    assert "/api/jobs" in paths
    assert "/api/cv/render" in paths
    assert "/api/skills/suggested" in paths
    assert "/api/session" in paths


def test_health_endpoint_returns_healthy() -> None:
    test_app = FastAPI()
    test_app.include_router(health_router, prefix="/api")
    client = TestClient(test_app)

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_startup_loads_rule_table() -> None:
    with TestClient(app) as client:
        response = client.get("/api/skills/suggested")

    assert response.status_code == 200
    skills = response.json()["skills"]
    assert len(skills) == 20
    assert "UI/UX Design" in skills


def test_session_endpoint_issues_or_echoes() -> None:
    client = TestClient(app)

    issued = client.post("/api/session").json()["sessionId"]
    echoed = client.post("/api/session", json={"sessionId": "session_1_abcdefghi"}).json()["sessionId"]

    assert SESSION_RE.match(issued)
    assert echoed == "session_1_abcdefghi"


def test_session_helpers() -> None:
    assert new_session_id(now_ms=1700000000000).startswith("session_1700000000000_")
    assert SESSION_RE.match(ensure_session_id("   "))
    assert ensure_session_id("abc") == "abc"

    context = SessionContext.from_request(None)
    assert context.issued
    assert SESSION_RE.match(context.session_id)
    assert SessionContext.from_request("abc").log_ref == short_hash("abc")
    assert short_hash("") == ""


@pytest.mark.parametrize(
    ("reply", "expected"),
    [
        ('{"career": "X"}', {"career": "X"}),
        ('```json\n{"career": "X", "roadmap": [{"step": 1}]}\n```', {"career": "X", "roadmap": [{"step": 1}]}),
        ("no braces here", None),
        ('{"career": }', None),
        ('{"placementProbability": NaN}', None),
        ("", None),
    ],
)
def test_extract_json_object(reply: str, expected) -> None:
    assert extract_json_object(reply) == expected


def test_ai_enabled_requires_real_openai_key() -> None:
    with patch.dict(os.environ, {"AI_ENABLED": "1", "AI_PROVIDER": "openai", "OPENAI_API_KEY": "sk-live"}):
        assert ai_enabled()
    with patch.dict(os.environ, {"AI_ENABLED": "1", "AI_PROVIDER": "openai", "OPENAI_API_KEY": "your_key_here"}):
        assert not ai_enabled()
    with patch.dict(os.environ, {"AI_ENABLED": "0", "OPENAI_API_KEY": "sk-live"}):
        assert not ai_enabled()
    with patch.dict(os.environ, {"AI_ENABLED": "1", "AI_PROVIDER": "gemini", "OPENAI_API_KEY": "sk-live"}):
        assert not ai_enabled()


def test_factory_rejects_unknown_provider() -> None:
    with patch.dict(os.environ, {"AI_PROVIDER": "gemini"}):
        with pytest.raises(ValueError):
            get_ai_client()


def test_factory_builds_openai_provider() -> None:
    with patch.dict(os.environ, {"AI_PROVIDER": "openai", "AI_MODEL": "gpt-4o-mini", "OPENAI_API_KEY": "sk-test"}):
        client = get_ai_client()

    assert client.model == "gpt-4o-mini"
