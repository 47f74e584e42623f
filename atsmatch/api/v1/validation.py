from fastapi import APIRouter

from atsmatch.schemas.api import FeedbackRequest, ValidateRequest
from atsmatch.schemas.validation import FeedbackVerification, ValidationReport
from atsmatch.validation import run_validation_suite, verify_feedback_applied

router = APIRouter()


@router.post("/validate", response_model=ValidationReport)
async def validate_draft(payload: ValidateRequest):
    return run_validation_suite(payload.original, payload.draft)


@router.post("/validate/feedback", response_model=list[FeedbackVerification])
async def validate_feedback(payload: FeedbackRequest):
    return verify_feedback_applied(
        payload.feedback,
        payload.feedback_history,
        payload.previous_draft,
        payload.new_draft,
    )
