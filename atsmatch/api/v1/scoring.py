from fastapi import APIRouter

from atsmatch.jd import process_jd
from atsmatch.schemas.api import ScoreCoverLetterRequest, ScoreResumeRequest
from atsmatch.schemas.cover_letter import CoverLetterScoreResult
from atsmatch.schemas.jd import ProcessedJD
from atsmatch.schemas.scoring import ATSScoreResult
from atsmatch.scoring import compute_ats_score, score_cover_letter

router = APIRouter()


def _resolve_jd(payload: ScoreResumeRequest | ScoreCoverLetterRequest) -> ProcessedJD:
    if payload.processed_jd is not None:
        return payload.processed_jd
    return process_jd(payload.jd_text or "", job_title=payload.job_title)


@router.post("/score/resume", response_model=ATSScoreResult)
async def score_resume(payload: ScoreResumeRequest):
    return compute_ats_score(payload.tailored_resume, _resolve_jd(payload), original=payload.original_resume)


@router.post("/score/cover-letter", response_model=CoverLetterScoreResult)
async def score_letter(payload: ScoreCoverLetterRequest):
    return score_cover_letter(payload.cover_letter, _resolve_jd(payload), payload.resume_text)
