import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from skillpath.api.v1.health import router as health_router
from skillpath.api.v1.career import router as career_router
from skillpath.api.v1.summary import router as summary_router
from skillpath.api.v1.jobs import router as jobs_router
from skillpath.api.v1.cv import router as cv_router
from skillpath.api.v1.skills import router as skills_router
from skillpath.api.v1.session import router as session_router
from skillpath.core.cors import cors_allow_origin_regex, cors_allowed_origins
from skillpath.core.errors import ApiError, api_error_handler
from skillpath.core.rate_limit import limiter
from skillpath.core.config import settings
from skillpath.core.lifespan import lifespan

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_origin_regex=cors_allow_origin_regex(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(ApiError, api_error_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/api", tags=["Health"])
app.include_router(career_router, prefix="/api", tags=["Career"])
app.include_router(summary_router, prefix="/api", tags=["CV"])
app.include_router(cv_router, prefix="/api", tags=["CV"])
app.include_router(jobs_router, prefix="/api", tags=["Jobs"])
app.include_router(skills_router, prefix="/api", tags=["Skills"])
app.include_router(session_router, prefix="/api", tags=["Session"])
