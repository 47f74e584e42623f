from fastapi import APIRouter

from atsmatch.jd import process_jd, sanitize_job_paste
from atsmatch.schemas.api import ProcessJDRequest, SanitizePasteRequest
from atsmatch.schemas.jd import ProcessedJD, SanitizedPosting

router = APIRouter()


@router.post("/jd/process", response_model=ProcessedJD)
async def jd_process(payload: ProcessJDRequest):
    return process_jd(payload.jd_text, job_title=payload.job_title)


@router.post("/jd/sanitize", response_model=SanitizedPosting)
async def jd_sanitize(payload: SanitizePasteRequest):
    return sanitize_job_paste(
        payload.raw_text,
        manual_title=payload.manual_title,
        manual_company=payload.manual_company,
    )
