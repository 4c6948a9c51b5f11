from __future__ import annotations

import hashlib
import secrets
import string
import time
from dataclasses import dataclass

_BASE36 = string.digits + string.ascii_lowercase
_SUFFIX_LENGTH = 9


def new_session_id(now_ms: int | None = None) -> str:
    """Return an opaque token shaped like ``session_<epoch-ms>_<9 base-36 chars>``."""
    stamp = int(time.time() * 1000) if now_ms is None else now_ms
    suffix = "".join(secrets.choice(_BASE36) for _ in range(_SUFFIX_LENGTH))
    return f"session_{stamp}_{suffix}"


def ensure_session_id(value: str | None) -> str:
    token = (value or "").strip()
    return token or new_session_id()


def short_hash(value: str | None) -> str:
    normalized = (value or "").strip()
    if not normalized:
        return ""
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:12]


@dataclass(frozen=True)
class SessionContext:
    """Per-request session value. Never authenticated; only used to correlate logs."""

    session_id: str
    issued: bool = False

    @classmethod
    def from_request(cls, value: str | None) -> "SessionContext":
        token = (value or "").strip()
        if token:
            return cls(session_id=token)
        return cls(session_id=new_session_id(), issued=True)

    @property
    def log_ref(self) -> str:
        return short_hash(self.session_id)
