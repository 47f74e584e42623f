import logging

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from atsmatch import __version__
from atsmatch.api.v1.health import router as health_router
from atsmatch.api.v1.jd import router as jd_router
from atsmatch.api.v1.prompts import router as prompts_router
from atsmatch.api.v1.scoring import router as scoring_router
from atsmatch.api.v1.validation import router as validation_router
from atsmatch.core.config import settings
from atsmatch.core.cors import cors_allowed_origins

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="ATS Match API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(jd_router, prefix="/v1", tags=["Job Descriptions"])
app.include_router(scoring_router, prefix="/v1", tags=["Scoring"])
app.include_router(validation_router, prefix="/v1", tags=["Validation"])
app.include_router(prompts_router, prefix="/v1", tags=["Prompts"])
