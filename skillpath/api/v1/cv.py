from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from skillpath.core.errors import ApiError
from skillpath.cv.render import render_cv_html
from skillpath.schemas.cv import CVData

router = APIRouter()


@router.post("/cv/render", response_class=HTMLResponse)
def render_cv(payload: CVData):
    if not payload.name.strip():
        raise ApiError(400, "Name is required")
    return HTMLResponse(content=render_cv_html(payload))
