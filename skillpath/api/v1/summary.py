import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError

from skillpath.core.errors import ApiError
from skillpath.core.rate_limit import rate_limit
from skillpath.schemas.cv import SummaryRequest, SummaryResponse
from skillpath.services.summary_service import generate_summary

router = APIRouter()
logger = logging.getLogger(__name__)

_FAILURE_MESSAGE = "Failed to generate summary"


@router.post("/generate-summary", response_model=SummaryResponse)
@rate_limit()
async def summary(request: Request):
    try:
        payload = SummaryRequest.model_validate(await request.json())
    except (ValueError, ValidationError) as exc:
        logger.error("summary_bad_body: %s", exc)
        raise ApiError(500, _FAILURE_MESSAGE) from exc

    if not payload.name or not payload.skills:
        raise ApiError(400, "Name and skills are required")

    try:
        text = await generate_summary(payload.name, payload.skills, payload.experience)
    except Exception as exc:
        logger.exception("summary_failed skills=%s", len(payload.skills))
        raise ApiError(500, _FAILURE_MESSAGE) from exc

    return SummaryResponse(summary=text)
