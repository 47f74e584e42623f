from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from atsmatch.core.config import settings

from .jd import ProcessedJD

DocumentText = Annotated[str, Field(max_length=settings.max_text_chars)]
RequiredText = Annotated[str, Field(min_length=1, max_length=settings.max_text_chars)]
TitleText = Annotated[str, Field(max_length=300)]


class ProcessJDRequest(BaseModel):
    jd_text: RequiredText
    job_title: TitleText | None = None


class SanitizePasteRequest(BaseModel):
    raw_text: RequiredText
    manual_title: TitleText | None = None
    manual_company: TitleText | None = None


class _JDSource(BaseModel):
    """Either a previously processed JD or raw JD text to process now."""

    processed_jd: ProcessedJD | None = None
    jd_text: DocumentText | None = None
    job_title: TitleText | None = None

    @model_validator(mode="after")
    def _require_jd(self) -> "_JDSource":
        if self.processed_jd is None and not (self.jd_text or "").strip():
            raise ValueError("Provide either processed_jd or jd_text.")
        return self


class ScoreResumeRequest(_JDSource):
    tailored_resume: RequiredText
    original_resume: DocumentText | None = None


class ScoreCoverLetterRequest(_JDSource):
    cover_letter: RequiredText
    resume_text: DocumentText = ""


class ValidateRequest(BaseModel):
    original: DocumentText
    draft: DocumentText


class FeedbackRequest(BaseModel):
    feedback: Annotated[str, Field(max_length=5000)]
    feedback_history: list[Annotated[str, Field(max_length=5000)]] = Field(default_factory=list, max_length=50)
    previous_draft: DocumentText
    new_draft: DocumentText


class ResumePromptRequest(BaseModel):
    strategy_mode: Annotated[str, Field(max_length=32)] = "hybrid"
    document_type: Annotated[str, Field(max_length=32)] = "resume"
    job_title: TitleText | None = None


class PromptResponse(BaseModel):
    system_prompt: str
    headline_guidance: str | None = None
