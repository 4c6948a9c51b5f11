from fastapi import APIRouter

from skillpath.features.skills import SUGGESTED_SKILLS

router = APIRouter()


@router.get("/skills/suggested")
async def suggested_skills():
    return {"skills": list(SUGGESTED_SKILLS)}
