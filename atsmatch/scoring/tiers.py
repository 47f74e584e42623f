from __future__ import annotations

import re

from atsmatch.core.config.scoring import get_scoring_value
from atsmatch.matching import TermMatcher, contains_word, count_occurrences
from atsmatch.matching.dates import date_formats_used, extract_years
from atsmatch.normalize.text import count_words
from atsmatch.normalize.utils import contact_channel_count
from atsmatch.parsing.sections import heading_lines, sections_in_zone
from atsmatch.schemas.resume import ResumeSection, Zone
from atsmatch.schemas.scoring import (
    ContentCheck,
    ExperienceTier,
    HardSkillTier,
    KeywordDensity,
    SoftSkillTier,
    StructuralTier,
    SupplementaryTier,
)
from atsmatch.taxonomy import TaxonomyProvider

from .common import _clamp_int, config_float, config_int, config_range, ratio_score, round_half_up

_QUANTIFIED_RE = re.compile(r"\d+%|\$[\d,]+|\d+\s*(users|clients|team|engineers|projects)", re.IGNORECASE)
_DECORATIVE_RE = re.compile("[\U0001F300-\U0001F9FF☀-⛿✀-➿★☆✓✗→⇒]")

_ZONE_MULTIPLIER_KEYS = {
    Zone.HEADLINE: ("headline", 3.0),
    Zone.SUMMARY: ("summary", 2.0),
    Zone.SKILLS: ("skills", 1.5),
    Zone.EXPERIENCE: ("experience", 1.0),
    Zone.EDUCATION: ("education", 0.75),
}

MIXED_DATE_FORMATS_ISSUE = "Mixed date formats detected"
DUAL_FORM_ISSUE = "Consider including both acronym and full-term forms for technical abbreviations"


def zone_multiplier(zone: Zone) -> float:
    key, default = _ZONE_MULTIPLIER_KEYS[zone]
    return config_float(f"ats.zone_multipliers.{key}", default, max_value=10.0)


def frequency_score(occurrences: int) -> float:
    """Saturating mention bonus: first, second and third mentions add less each time."""
    score = 0.0
    if occurrences >= 1:
        score += config_float("ats.frequency.first_mention", 1.0, max_value=10.0)
    if occurrences >= 2:
        score += config_float("ats.frequency.second_mention", 0.5, max_value=10.0)
    if occurrences >= 3:
        score += config_float("ats.frequency.third_mention", 0.25, max_value=10.0)
    return min(score, config_float("ats.frequency.cap", 1.75, max_value=10.0))


def keyword_density(term: str, text: str, word_count: int) -> float:
    if word_count <= 0:
        return 0.0
    return count_occurrences(term, text) / word_count * 100


def overlapping_skills(skills: list[str], original: str | None, matcher: TermMatcher) -> list[str]:
    if not original:
        return list(skills)
    return [skill for skill in skills if matcher.term_exists(skill, original)]


def score_hard_skill_match(
    tailored: str,
    hard_skills: list[str],
    sections: list[ResumeSection],
    original: str | None,
    matcher: TermMatcher,
) -> HardSkillTier:
    """Placement-and-frequency score over the skills the candidate already had.

    Skills absent from the original resume are reported as a skills gap and never
    penalized. Skills the original had but the tailored text lost are "missing".
    """
    matched: list[str] = []
    missing: list[str] = []
    skills_gap: list[str] = []

    for skill in hard_skills:
        if original and not matcher.term_exists(skill, original):
            skills_gap.append(skill)
        elif matcher.term_exists(skill, tailored):
            matched.append(skill)
        else:
            missing.append(skill)

    overlap_count = len(matched) + len(missing)
    if overlap_count == 0:
        return HardSkillTier(score=0, matched=matched, missing=missing, skills_gap=skills_gap)

    weighted = 0.0
    for skill in matched:
        best = 1.0
        for section in sections:
            if matcher.term_exists(skill, section.content):
                best = max(best, zone_multiplier(section.zone))
        # A skill found only through a synonym still counts as one mention.
        occurrences = max(1, count_occurrences(skill, tailored))
        weighted += best * frequency_score(occurrences)

    realistic = config_float("ats.realistic_best_case.multiplier", 1.5, min_value=0.1, max_value=10.0) * config_float(
        "ats.realistic_best_case.frequency", 1.5, min_value=0.1, max_value=10.0
    )
    score = min(100, round_half_up(weighted / (overlap_count * realistic) * 100))
    return HardSkillTier(score=score, matched=matched, missing=missing, skills_gap=skills_gap)


def score_experience_relevance(
    tailored: str,
    skills: list[str],
    sections: list[ResumeSection],
    matcher: TermMatcher,
) -> ExperienceTier:
    experience = sections_in_zone(sections, Zone.EXPERIENCE)
    skills_zone = sections_in_zone(sections, Zone.SKILLS)

    contextual = 0
    bare_list = 0
    for skill in skills:
        if any(matcher.term_exists(skill, section.content) for section in experience):
            contextual += 1
        elif any(matcher.term_exists(skill, section.content) for section in skills_zone):
            bare_list += 1

    quantified = bool(_QUANTIFIED_RE.search(tailored or ""))
    if not skills:
        return ExperienceTier(
            score=100,
            contextual_keywords=contextual,
            bare_list_keywords=bare_list,
            has_quantified_achievements=quantified,
        )

    contextual_weight = config_float("ats.experience.contextual_weight", 1.5, min_value=0.1, max_value=10.0)
    bare_weight = config_float("ats.experience.bare_list_weight", 1.0, max_value=10.0)
    raw = (contextual * contextual_weight + bare_list * bare_weight) / (len(skills) * contextual_weight) * 100
    if quantified:
        raw += config_float("ats.experience.quantified_bonus", 5, max_value=100.0)

    return ExperienceTier(
        score=min(100, round_half_up(raw)),
        contextual_keywords=contextual,
        bare_list_keywords=bare_list,
        has_quantified_achievements=quantified,
    )


def score_soft_skill_match(tailored: str, soft_skills: list[str]) -> SoftSkillTier:
    matched = [skill for skill in soft_skills if contains_word(skill, tailored)]
    missing = [skill for skill in soft_skills if skill not in matched]
    return SoftSkillTier(score=ratio_score(len(matched), len(soft_skills)), matched=matched, missing=missing)


def _chronology_years(sections: list[ResumeSection], resume: str) -> list[int]:
    experience_text = "\n".join(section.content for section in sections_in_zone(sections, Zone.EXPERIENCE))
    years = extract_years(experience_text)
    return years if len(years) >= 2 else extract_years(resume)


def is_reverse_chronological(years: list[int], checked: int) -> bool:
    # Fewer than two years cannot be out of order.
    # Each year may exceed the previous one by at most one (ranges spanning a new year).
    for index in range(1, min(len(years), checked)):
        if years[index] > years[index - 1] + 1:
            return False
    return True


def has_consistent_dates(text: str) -> bool:
    return len(date_formats_used(text)) <= 1


def score_structural_compliance(resume: str, sections: list[ResumeSection]) -> StructuralTier:
    """Six content checks worth a fixed number of points each, minus a decorative-character penalty."""
    text = resume or ""
    check_points = config_int("ats.structure.check_points", 20, max_value=100)
    partial_points = config_int("ats.structure.partial_points", 10, max_value=100)
    issues: list[str] = []
    checks: list[ContentCheck] = []
    points = 0

    headings = heading_lines(text)
    checks.append(
        ContentCheck(
            label="Standard section headings used",
            passed=bool(headings),
            detail=f"{len(headings)} approved headings found" if headings else "Missing standard section headings",
        )
    )
    if headings:
        points += check_points
    else:
        issues.append("Missing standard section headings")

    years = _chronology_years(sections, text)
    checked = config_int("ats.structure.chronology_years_checked", 8, min_value=2, max_value=100)
    in_order = is_reverse_chronological(years, checked)
    checks.append(
        ContentCheck(
            label="Reverse chronological order",
            passed=in_order,
            detail="Dates in correct order" if in_order else "May not be in reverse-chronological order",
        )
    )
    if in_order:
        points += check_points
    else:
        issues.append("May not be in reverse-chronological order")

    consistent = has_consistent_dates(text)
    checks.append(
        ContentCheck(
            label="Consistent date formatting",
            passed=consistent,
            detail="Consistent date format" if consistent else MIXED_DATE_FORMATS_ISSUE,
        )
    )
    if consistent:
        points += check_points
    else:
        issues.append(MIXED_DATE_FORMATS_ISSUE)

    window = text[: config_int("ats.structure.contact_window_chars", 500, min_value=50, max_value=100_000)]
    contact_items = contact_channel_count(window)
    checks.append(
        ContentCheck(
            label="Contact info in document body",
            passed=contact_items >= 1,
            detail=f"{contact_items}/3 items found (email, phone, LinkedIn)",
        )
    )
    if contact_items >= 2:
        points += check_points
    elif contact_items == 1:
        points += partial_points
        issues.append("Limited contact info detected — consider adding email, phone, and LinkedIn")
    else:
        issues.append("No contact information detected in document body")

    word_count = count_words(text)
    good_low, good_high = config_range("ats.structure.word_count_good", (400, 1500))
    ok_low, ok_high = config_range("ats.structure.word_count_ok", (250, 1800))
    good_length = good_low <= word_count <= good_high
    checks.append(
        ContentCheck(
            label="Appropriate length",
            passed=good_length,
            detail=f"{word_count} words (target: {good_low}-{good_high})",
        )
    )
    if good_length:
        points += check_points
    elif ok_low <= word_count <= ok_high:
        points += partial_points
        issues.append(f"Word count ({word_count}) is outside optimal range ({good_low}-{good_high})")
    else:
        issues.append(f"Word count ({word_count}) is significantly outside optimal range ({good_low}-{good_high})")

    decorative = bool(_DECORATIVE_RE.search(text))
    checks.append(
        ContentCheck(
            label="Standard bullets only",
            passed=not decorative,
            detail="Decorative characters or emojis detected" if decorative else "Standard characters only",
        )
    )
    if decorative:
        points = max(0, points - config_int("ats.structure.decorative_penalty", 15, max_value=100))
        issues.append("Decorative characters or emojis detected — ATS parsers may misread these")

    return StructuralTier(score=min(100, points), issues=issues, content_checks=checks)


def _has_dual_form(skill: str, text: str, taxonomy: TaxonomyProvider) -> bool | None:
    """None when the skill has no abbreviation/expansion pair."""
    lower = skill.lower()
    expansions = taxonomy.expansions(lower)
    if expansions:
        return contains_word(lower, text) and any(contains_word(item, text) for item in expansions)
    abbreviations = taxonomy.abbreviations(lower)
    if abbreviations:
        return contains_word(lower, text) and any(contains_word(item, text) for item in abbreviations)
    return None


def _contact_points(channels: int) -> int:
    """Points for one, two or three contact channels."""
    raw = get_scoring_value("ats.supplementary.contact_points", [5, 15, 25])
    defaults = (5, 15, 25)
    if not isinstance(raw, (list, tuple)) or len(raw) != 3:
        raw = defaults
    index = min(channels, 3) - 1
    return _clamp_int(raw[index], default=defaults[index], min_value=0, max_value=100)


def score_supplementary_factors(
    tailored: str,
    matched_skills: list[str],
    taxonomy: TaxonomyProvider,
) -> SupplementaryTier:
    text = tailored or ""
    check_points = config_int("ats.supplementary.check_points", 25, max_value=100)
    issues: list[str] = []
    points = 0

    top_n = config_int("ats.supplementary.dual_form_top_n", 5, min_value=1, max_value=100)
    dual_checks = [_has_dual_form(skill, text, taxonomy) for skill in matched_skills[:top_n]]
    applicable = [result for result in dual_checks if result is not None]
    if not applicable or any(applicable):
        points += check_points
    else:
        issues.append(DUAL_FORM_ISSUE)

    word_count = count_words(text)
    threshold = config_float("ats.density.overstuffed_percent", 3.0)
    stuffed = False
    for skill in matched_skills:
        density = keyword_density(skill, text, word_count)
        if density > threshold:
            stuffed = True
            issues.append(
                f'Keyword "{skill}" appears at {density:.1f}% density (exceeds {threshold:g}% threshold)'
            )
    if not stuffed:
        points += check_points

    if has_consistent_dates(text):
        points += check_points
    else:
        issues.append("Mixed date formats detected — use a consistent format throughout")

    channels = contact_channel_count(text)
    if channels:
        points += _contact_points(channels)
    else:
        issues.append("Missing contact information — include email, phone, and LinkedIn")

    return SupplementaryTier(score=min(100, points), issues=issues)


def keyword_density_report(tailored: str, matched_skills: list[str]) -> list[KeywordDensity]:
    word_count = count_words(tailored)
    threshold = config_float("ats.density.overstuffed_percent", 3.0)
    report: list[KeywordDensity] = []
    for skill in matched_skills:
        density = keyword_density(skill, tailored or "", word_count)
        report.append(
            KeywordDensity(term=skill, density=round_half_up(density * 100) / 100, over_stuffed=density > threshold)
        )
    return report
