from fastapi import APIRouter, Query

from skillpath.jobs.catalog import filter_jobs
from skillpath.schemas.jobs import CompetitionFilter, JobListResponse

router = APIRouter()


@router.get("/jobs", response_model=JobListResponse)
def list_jobs(
    q: str | None = Query(default=None, max_length=200),
    competition: CompetitionFilter = Query(default="all"),
):
    jobs = filter_jobs(q, competition)
    return JobListResponse(jobs=jobs, total=len(jobs))
