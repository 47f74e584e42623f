from __future__ import annotations

import logging

from atsmatch.matching import SynonymTermMatcher, TermMatcher, get_default_matcher
from atsmatch.normalize.text import count_words
from atsmatch.parsing.sections import parse_resume_zones
from atsmatch.schemas.jd import ProcessedJD
from atsmatch.schemas.scoring import (
    ATSScoreResult,
    HardSkillTier,
    JDCoverageDetail,
    ScoringDebug,
    SoftSkillTier,
    StructuralTier,
    TierScores,
)
from atsmatch.taxonomy import get_default_taxonomy_provider

from .common import config_float, ratio_score, round_half_up
from .gate import check_parsing_gate
from .recommendations import build_recommendations
from .tiers import (
    keyword_density_report,
    overlapping_skills,
    score_experience_relevance,
    score_hard_skill_match,
    score_soft_skill_match,
    score_structural_compliance,
    score_supplementary_factors,
)
from .title import score_job_title_alignment

logger = logging.getLogger(__name__)

TIER_WEIGHTS = (
    ("hard_skill_match", "hard_skills", 0.35),
    ("job_title_alignment", "job_title", 0.15),
    ("experience_relevance", "experience", 0.20),
    ("soft_skill_match", "soft_skills", 0.05),
    ("structural_compliance", "structure", 0.15),
    ("supplementary_factors", "supplementary", 0.10),
)


def weighted_total(tiers: TierScores) -> int:
    scores = tiers.scores()
    total = 0.0
    for tier_name, config_key, default in TIER_WEIGHTS:
        total += scores[tier_name] * config_float(f"ats.weights.{config_key}", default, max_value=1.0)
    return min(100, round_half_up(total))


def _gate_failure(processed_jd: ProcessedJD, reasons: list[str]) -> ATSScoreResult:
    skills = processed_jd.extracted_skills
    return ATSScoreResult(
        total_score=0,
        jd_coverage_score=0,
        jd_coverage_detail=JDCoverageDetail(total_jd_skills=len(skills.hard_skills)),
        passed_parsing_gate=False,
        parsing_fail_reasons=reasons,
        tier_scores=TierScores(
            hard_skill_match=HardSkillTier(missing=list(skills.hard_skills)),
            soft_skill_match=SoftSkillTier(missing=list(skills.soft_skills)),
            structural_compliance=StructuralTier(issues=list(reasons)),
        ),
        recommendations=[f"Fix parsing issue: {reason}" for reason in reasons][:5],
        coverage_percentage=0,
    )


def compute_ats_score(
    tailored: str,
    processed_jd: ProcessedJD,
    original: str | None = None,
    matcher: TermMatcher | None = None,
) -> ATSScoreResult:
    """Score a resume against a processed job description.

    With `original` supplied, only JD skills the original resume already had
    count toward the hard-skill and experience tiers; the rest are reported as
    a skills gap. A resume that fails the parsing gate scores zero everywhere.
    """
    matcher = matcher or get_default_matcher()
    text = tailored or ""
    original = original or None
    hard_skills = processed_jd.extracted_skills.hard_skills
    soft_skills = processed_jd.extracted_skills.soft_skills
    sections = parse_resume_zones(text)

    logger.debug(
        "ats_scoring_started words=%s hard_skills=%s soft_skills=%s original_provided=%s sections=%s",
        count_words(text),
        len(hard_skills),
        len(soft_skills),
        original is not None,
        [f"{section.name}:{int(section.zone)}" for section in sections],
    )

    gate = check_parsing_gate(text)
    if not gate.passed:
        logger.info("ats_parsing_gate_failed reasons=%s", len(gate.reasons))
        return _gate_failure(processed_jd, gate.reasons)

    taxonomy = matcher.taxonomy if isinstance(matcher, SynonymTermMatcher) else get_default_taxonomy_provider()
    overlap = overlapping_skills(hard_skills, original, matcher)

    hard = score_hard_skill_match(text, hard_skills, sections, original, matcher)
    tiers = TierScores(
        hard_skill_match=hard,
        job_title_alignment=score_job_title_alignment(text, processed_jd.job_title, sections),
        experience_relevance=score_experience_relevance(text, overlap, sections, matcher),
        soft_skill_match=score_soft_skill_match(text, soft_skills),
        structural_compliance=score_structural_compliance(text, sections),
        supplementary_factors=score_supplementary_factors(text, hard.matched, taxonomy),
    )

    overlap_count = len(hard.matched) + len(hard.missing)
    jd_coverage = ratio_score(overlap_count, len(hard_skills))
    result = ATSScoreResult(
        total_score=weighted_total(tiers),
        jd_coverage_score=jd_coverage,
        jd_coverage_detail=JDCoverageDetail(
            overlapping_skills=overlap_count,
            total_jd_skills=len(hard_skills),
            percentage=jd_coverage,
        ),
        passed_parsing_gate=True,
        tier_scores=tiers,
        keyword_density=keyword_density_report(text, hard.matched),
        recommendations=build_recommendations(processed_jd.job_title, text, tiers, matcher),
        coverage_percentage=ratio_score(len(hard.matched), len(hard_skills)),
        scoring_debug=ScoringDebug(
            hard_skills_from_jd=list(hard_skills),
            soft_skills_from_jd=list(soft_skills),
            skills_in_resume=overlap,
            overlapping_skills=list(hard.matched),
            skills_gap=list(hard.skills_gap),
            noise_percentage_filtered=processed_jd.debug.noise_percentage_filtered,
            sections=[section.name for section in sections],
        ),
    )
    logger.debug(
        "ats_scoring_completed total=%s tiers=%s jd_coverage=%s",
        result.total_score,
        tiers.scores(),
        jd_coverage,
    )
    return result
