from __future__ import annotations

import logging
import math

from atsmatch.normalize.linkedin import extract_title_company, strip_hr_boilerplate, strip_linkedin_artifacts
from atsmatch.normalize.text import clean_jd_text, count_words
from atsmatch.schemas.jd import ExtractedSkills, JDDebug, ProcessedJD, SanitizedPosting, SanitizeStats
from atsmatch.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .metadata import extract_requirement_metadata
from .requirements import distill_requirements
from .segmenter import segment_jd_sections
from .skills import extract_skills

logger = logging.getLogger(__name__)

FEW_SKILLS_WARNING = "Very few technical skills detected in JD. The ATS score may be less precise."
_FEW_SKILLS_BELOW = 3


def _percentage(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    return int(math.floor(part / whole * 100 + 0.5))


def process_jd(
    raw_text: str,
    job_title: str | None = None,
    taxonomy: TaxonomyProvider | None = None,
) -> ProcessedJD:
    """Clean, segment and extract a job description once for reuse by every scorer."""
    taxonomy = taxonomy or get_default_taxonomy_provider()

    cleaned_text = clean_jd_text(raw_text)
    sections = segment_jd_sections(cleaned_text)
    extraction = extract_skills(sections.full_relevant_text, taxonomy)
    metadata = extract_requirement_metadata(sections.full_relevant_text, taxonomy)

    total_words_in_raw = count_words(raw_text)
    total_words_in_relevant = count_words(sections.full_relevant_text)
    noise_percentage = max(0, _percentage(total_words_in_raw - total_words_in_relevant, total_words_in_raw))

    warnings: list[str] = []
    if len(extraction.hard_skills) < _FEW_SKILLS_BELOW:
        warnings.append(FEW_SKILLS_WARNING)

    processed = ProcessedJD(
        cleaned_text=cleaned_text,
        sections=sections,
        extracted_skills=ExtractedSkills(
            hard_skills=extraction.hard_skills,
            soft_skills=extraction.soft_skills,
        ),
        metadata=metadata,
        job_title=(job_title or "").strip(),
        debug=JDDebug(
            total_words_in_raw=total_words_in_raw,
            total_words_in_relevant=total_words_in_relevant,
            noise_percentage_filtered=noise_percentage,
            extraction_method=extraction.extraction_method,
        ),
        warnings=warnings,
    )
    logger.debug(
        "jd_processed words=%s relevant_words=%s hard_skills=%s soft_skills=%s segments=%s",
        total_words_in_raw,
        total_words_in_relevant,
        len(extraction.hard_skills),
        len(extraction.soft_skills),
        len(sections.segments),
    )
    return processed


def sanitize_job_paste(
    raw_text: str,
    manual_title: str | None = None,
    manual_company: str | None = None,
    taxonomy: TaxonomyProvider | None = None,
) -> SanitizedPosting:
    """Turn a pasted job posting into a titled, de-noised description with requirements."""
    taxonomy = taxonomy or get_default_taxonomy_provider()
    original_word_count = count_words(raw_text)

    artifacts = strip_linkedin_artifacts(raw_text)
    boilerplate = strip_hr_boilerplate(artifacts.text)
    cleaned_text = clean_jd_text(boilerplate.text)
    sections = segment_jd_sections(cleaned_text)
    extraction = extract_skills(sections.full_relevant_text, taxonomy)
    metadata = extract_requirement_metadata(sections.full_relevant_text, taxonomy)
    auto = extract_title_company(raw_text)

    skills = ExtractedSkills(hard_skills=extraction.hard_skills, soft_skills=extraction.soft_skills)
    requirements = distill_requirements(sections.full_relevant_text, skills, metadata)

    cleaned_word_count = count_words(cleaned_text)
    words_removed = original_word_count - cleaned_word_count
    relevant_found, noise_found = sections.found_fields()

    logger.debug(
        "job_paste_sanitized words=%s cleaned_words=%s stripped_items=%s boilerplate_words=%s",
        original_word_count,
        cleaned_word_count,
        len(artifacts.stripped_items),
        boilerplate.boilerplate_word_count,
    )
    return SanitizedPosting(
        title=(manual_title or "").strip() or auto.title or "",
        company=(manual_company or "").strip() or auto.company or "",
        auto_title=auto.title,
        auto_company=auto.company,
        description=sections.full_relevant_text,
        requirements=requirements,
        extracted_skills=skills,
        metadata=metadata,
        stats=SanitizeStats(
            original_word_count=original_word_count,
            cleaned_word_count=cleaned_word_count,
            words_removed=words_removed,
            noise_percentage=_percentage(words_removed, original_word_count),
            stripped_items=artifacts.stripped_items,
            boilerplate_word_count=boilerplate.boilerplate_word_count,
            relevant_sections_found=relevant_found,
            noise_sections_found=noise_found,
        ),
    )
