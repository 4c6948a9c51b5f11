import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from skillpath.core.errors import ApiError
from skillpath.core.rate_limit import rate_limit
from skillpath.core.session import SessionContext
from skillpath.schemas.career import CareerPlanRequest
from skillpath.services.career_service import generate_career_plan

router = APIRouter()
logger = logging.getLogger(__name__)

_FAILURE_MESSAGE = "Failed to generate career plan"


@router.post("/career-plan")
@rate_limit()
async def career_plan(request: Request):
    # Body is parsed here so that malformed JSON maps to 500 rather than 422.
    try:
        payload = CareerPlanRequest.model_validate(await request.json())
    except (ValueError, ValidationError) as exc:
        logger.error("career_plan_bad_body: %s", exc)
        raise ApiError(500, _FAILURE_MESSAGE) from exc

    if not payload.skills:
        raise ApiError(400, "Skills are required")

    session = SessionContext.from_request(payload.session_id)
    try:
        outcome = await generate_career_plan(payload.skills, session=session)
    except Exception as exc:
        logger.exception("career_plan_failed session=%s", session.log_ref)
        raise ApiError(500, _FAILURE_MESSAGE) from exc

    return JSONResponse(content=outcome.body, headers={"X-Career-Plan-Source": outcome.source})
