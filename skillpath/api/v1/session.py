from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from skillpath.core.session import ensure_session_id

router = APIRouter()


class SessionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(default=None, alias="sessionId", max_length=200)


@router.post("/session")
async def session(payload: SessionRequest | None = None):
    """Issue a session token, or echo the one the client already holds."""
    existing = payload.session_id if payload else None
    return {"sessionId": ensure_session_id(existing)}
