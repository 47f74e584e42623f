from .system import (
    DOCUMENT_TYPES,
    STRATEGY_MODES,
    build_cover_letter_system_prompt,
    build_headline_guidance,
    build_resume_system_prompt,
)

__all__ = [
    "DOCUMENT_TYPES",
    "STRATEGY_MODES",
    "build_cover_letter_system_prompt",
    "build_headline_guidance",
    "build_resume_system_prompt",
]
