from __future__ import annotations

from atsmatch.matching import TermMatcher
from atsmatch.schemas.scoring import TierScores

from .common import config_int
from .title import normalize_title

_HEADLINE_LINES = 5

DATE_FORMAT_RECOMMENDATION = "Standardize date formats throughout your resume"
QUANTIFY_RECOMMENDATION = "Add quantified metrics to your experience bullets where possible"
DUAL_FORM_RECOMMENDATION = (
    'Include both full term and acronym for technical abbreviations (e.g., "Amazon Web Services (AWS)")'
)


def _title_in_headline(job_title: str, resume: str) -> bool:
    first_lines = " ".join((resume or "").split("\n")[:_HEADLINE_LINES]).lower()
    normalized = normalize_title(job_title)
    return (bool(normalized) and normalized in first_lines) or job_title.lower() in first_lines


def build_recommendations(
    job_title: str,
    tailored: str,
    tiers: TierScores,
    matcher: TermMatcher,
) -> list[str]:
    """Advice derived from tier outcomes, highest priority first."""
    recommendations: list[str] = []
    hard = tiers.hard_skill_match

    title_threshold = config_int("ats.title.recommend_below", 85, max_value=100)
    if job_title and tiers.job_title_alignment.score < title_threshold and not _title_in_headline(job_title, tailored):
        recommendations.append(
            f'Your resume headline doesn\'t closely match the job title "{job_title}". Consider updating it.'
        )

    if hard.score < config_int("ats.recommendations.missing_skills_below", 60, max_value=100) and hard.missing:
        absent = [skill for skill in hard.missing if not matcher.term_exists(skill, tailored)]
        if absent:
            listed = config_int("ats.recommendations.missing_skills_listed", 5, min_value=1, max_value=50)
            recommendations.append(f"Consider adding these skills more prominently: {', '.join(absent[:listed])}")

    if not tiers.experience_relevance.has_quantified_achievements:
        recommendations.append(QUANTIFY_RECOMMENDATION)

    if any("date format" in issue for issue in tiers.structural_compliance.issues):
        recommendations.append(DATE_FORMAT_RECOMMENDATION)

    if any("acronym" in issue for issue in tiers.supplementary_factors.issues):
        recommendations.append(DUAL_FORM_RECOMMENDATION)

    if hard.skills_gap:
        listed = config_int("ats.recommendations.skills_gap_listed", 8, min_value=1, max_value=50)
        recommendations.append(
            f"Skills gap: These JD skills are not in your base resume: {', '.join(hard.skills_gap[:listed])}. "
            "If you have this experience, consider adding them to your master resume."
        )

    return recommendations[: config_int("ats.recommendations.limit", 5, min_value=1, max_value=5)]
