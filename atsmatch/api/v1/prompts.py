from functools import lru_cache

from fastapi import APIRouter

from atsmatch.core.config import settings
from atsmatch.core.rules_cache import RulesCache
from atsmatch.prompts import build_cover_letter_system_prompt, build_headline_guidance, build_resume_system_prompt
from atsmatch.schemas.api import PromptResponse, ResumePromptRequest

router = APIRouter()


@lru_cache(maxsize=1)
def get_rules_cache() -> RulesCache:
    return RulesCache(settings.rules_dir, ttl_seconds=settings.rules_cache_ttl_seconds)


@router.post("/prompts/resume", response_model=PromptResponse)
async def resume_prompt(payload: ResumePromptRequest):
    guidance = build_headline_guidance(payload.job_title) if payload.job_title else None
    return PromptResponse(
        system_prompt=build_resume_system_prompt(
            get_rules_cache(),
            strategy_mode=payload.strategy_mode,
            document_type=payload.document_type,
        ),
        headline_guidance=guidance,
    )


@router.get("/prompts/cover-letter", response_model=PromptResponse)
async def cover_letter_prompt():
    return PromptResponse(system_prompt=build_cover_letter_system_prompt(get_rules_cache()))
