from __future__ import annotations

import logging
import re

from atsmatch.matching import TermMatcher, contains_word, get_default_matcher
from atsmatch.normalize.text import count_words
from atsmatch.normalize.utils import split_paragraphs, split_sentences
from atsmatch.schemas.cover_letter import (
    CoverLetterScoreResult,
    CoverLetterTierScores,
    DuplicationTier,
    KeywordReinforcementTier,
    LengthTier,
    LetterStructureTier,
    PainPointTier,
    VoiceTier,
)
from atsmatch.schemas.jd import ProcessedJD

from .common import config_float, config_int, config_range, ratio_score, round_half_up

logger = logging.getLogger(__name__)

AI_ISM_BLACKLIST = (
    "i am passionate about",
    "i thrive in",
    "i bring a unique blend",
    "in today's fast-paced",
    "i am confident that",
    "proven track record",
    "results-driven professional",
    "dynamic environment",
    "hit the ground running",
    "value-add",
    "value proposition",
    "cutting-edge",
    "best-in-class",
    "world-class",
    "leverage my",
    "synergy",
    "i am excited to",
)

DUPLICATION_STOP_WORDS = frozenset(
    """
    the a an and or of to in for with on at by from is are was were be been have has had do does did
    will would can could should may might not but if than that this these those it its my your our their
    his her we they i you he she me us them who which what where when how all each both more most other
    some such so too very just about also as into over through then there
    """.split()
)

_REQUIREMENT_CUE_RE = re.compile(r"require|responsib|must|essential|key qualif|minimum|expected", re.IGNORECASE)
_REQUIREMENT_FILLER = frozenset({"the", "and", "with", "that", "this", "from", "have", "been", "will", "must"})
_BULLET_RE = re.compile(r"^[-•*]\s", re.MULTILINE)
_MIN_SENTENCE_CHARS = 20

COVER_LETTER_WEIGHTS = (
    ("keyword_reinforcement", "keyword_reinforcement", 0.30),
    ("pain_point_coverage", "pain_point_coverage", 0.30),
    ("length_compliance", "length", 0.10),
    ("no_duplication", "no_duplication", 0.10),
    ("structural_compliance", "structure", 0.10),
    ("authentic_voice", "authentic_voice", 0.10),
)


def _truncate(text: str, limit: int, always_ellipsis: bool = False) -> str:
    if always_ellipsis or len(text) > limit:
        return text[:limit] + "..."
    return text


def _score_keywords(letter: str, hard_skills: list[str], matcher: TermMatcher) -> KeywordReinforcementTier:
    top = hard_skills[: config_int("cover_letter.top_keywords", 5, min_value=1, max_value=50)]
    found = [skill for skill in top if matcher.term_exists(skill, letter)]
    missing = [skill for skill in top if skill not in found]
    return KeywordReinforcementTier(score=ratio_score(len(found), len(top)), found=found, missing=missing)


def top_requirements(relevant_text: str, hard_skills: list[str], limit: int) -> list[str]:
    """JD sentences that state a requirement or name a hard skill, in document order."""
    requirements: list[str] = []
    for sentence in split_sentences(relevant_text, _MIN_SENTENCE_CHARS):
        if _REQUIREMENT_CUE_RE.search(sentence) or any(contains_word(skill, sentence) for skill in hard_skills):
            requirements.append(sentence)
            if len(requirements) >= limit:
                break
    return requirements


def _score_pain_points(
    letter: str,
    processed_jd: ProcessedJD,
    hard_skills: list[str],
    matcher: TermMatcher,
) -> PainPointTier:
    letter_lower = letter.lower()
    ratio = config_float("cover_letter.content_overlap_ratio", 0.4, max_value=1.0)
    limit = config_int("cover_letter.max_requirements", 5, min_value=1, max_value=50)
    addressed: list[str] = []
    missed: list[str] = []

    requirements = top_requirements(processed_jd.sections.full_relevant_text, hard_skills, limit)
    for requirement in requirements:
        requirement_lower = requirement.lower()
        content_words = [
            word for word in requirement_lower.split() if len(word) > 3 and word not in _REQUIREMENT_FILLER
        ]
        skills_named = [skill for skill in hard_skills if skill.lower() in requirement_lower]
        skill_hit = any(matcher.term_exists(skill, letter) for skill in skills_named)
        word_hits = sum(1 for word in content_words if word in letter_lower)

        label = _truncate(requirement, 80)
        if skill_hit or (content_words and word_hits >= len(content_words) * ratio):
            addressed.append(label)
        else:
            missed.append(label)

    return PainPointTier(score=ratio_score(len(addressed), len(requirements)), addressed=addressed, missed=missed)


def _score_length(word_count: int) -> LengthTier:
    ideal_low, ideal_high = config_range("cover_letter.length.ideal", (250, 400))
    ok_low, ok_high = config_range("cover_letter.length.acceptable", (200, 500))
    if ideal_low <= word_count <= ideal_high:
        score = config_int("cover_letter.length.ideal_score", 100, max_value=100)
    elif ok_low <= word_count <= ok_high:
        score = config_int("cover_letter.length.acceptable_score", 70, max_value=100)
    else:
        score = config_int("cover_letter.length.poor_score", 30, max_value=100)
    return LengthTier(score=score, word_count=word_count)


def _content_words(text: str) -> list[str]:
    return [word for word in text.lower().split() if len(word) > 2 and word not in DUPLICATION_STOP_WORDS]


def _score_duplication(letter: str, resume_text: str) -> DuplicationTier:
    resume_words = set(_content_words(resume_text))
    overlap_ratio = config_float("cover_letter.duplication.overlap_ratio", 0.85, max_value=1.0)
    min_words = config_int("cover_letter.duplication.min_content_words", 4, min_value=1, max_value=100)
    penalty = config_int("cover_letter.duplication.penalty", 20, max_value=100)

    duplicated: list[str] = []
    for sentence in split_sentences(letter, _MIN_SENTENCE_CHARS):
        words = _content_words(sentence)
        if len(words) < min_words:
            continue
        overlap = sum(1 for word in words if word in resume_words)
        if overlap / len(words) > overlap_ratio:
            duplicated.append(_truncate(sentence, 60, always_ellipsis=True))

    return DuplicationTier(score=max(0, 100 - len(duplicated) * penalty), duplicated_sentences=duplicated)


def _score_structure(letter: str) -> LetterStructureTier:
    paragraph_count = len(split_paragraphs(letter))
    ideal_low, ideal_high = config_range("cover_letter.paragraphs.ideal", (3, 4))
    if ideal_low <= paragraph_count <= ideal_high:
        score = config_int("cover_letter.paragraphs.ideal_score", 100, max_value=100)
    elif paragraph_count in (ideal_low - 1, ideal_high + 1):
        score = config_int("cover_letter.paragraphs.near_score", 60, max_value=100)
    else:
        score = config_int("cover_letter.paragraphs.poor_score", 20, max_value=100)
    return LetterStructureTier(
        score=score,
        paragraph_count=paragraph_count,
        has_bullets=bool(_BULLET_RE.search(letter)),
    )


def _score_voice(letter: str) -> VoiceTier:
    letter_lower = letter.lower()
    flagged = [phrase for phrase in AI_ISM_BLACKLIST if phrase in letter_lower]
    penalty = config_int("cover_letter.voice_penalty", 15, max_value=100)
    return VoiceTier(score=max(0, 100 - len(flagged) * penalty), flagged_phrases=flagged)


def score_cover_letter(
    cover_letter: str,
    processed_jd: ProcessedJD,
    resume_text: str,
    matcher: TermMatcher | None = None,
) -> CoverLetterScoreResult:
    """Six-tier cover letter score: keywords, pain points, length, duplication, paragraphs and voice."""
    matcher = matcher or get_default_matcher()
    letter = cover_letter or ""
    hard_skills = processed_jd.extracted_skills.hard_skills
    word_count = count_words(letter)

    tiers = CoverLetterTierScores(
        keyword_reinforcement=_score_keywords(letter, hard_skills, matcher),
        pain_point_coverage=_score_pain_points(letter, processed_jd, hard_skills, matcher),
        length_compliance=_score_length(word_count),
        no_duplication=_score_duplication(letter, resume_text or ""),
        structural_compliance=_score_structure(letter),
        authentic_voice=_score_voice(letter),
    )

    recommendations: list[str] = []
    if tiers.keyword_reinforcement.missing:
        recommendations.append(
            f"Weave these JD keywords into the cover letter: {', '.join(tiers.keyword_reinforcement.missing)}"
        )
    ideal_low, ideal_high = config_range("cover_letter.length.ideal", (250, 400))
    if word_count < ideal_low:
        recommendations.append(
            f"Cover letter is too short ({word_count} words). Target {ideal_low}-{ideal_high} words."
        )
    elif word_count > ideal_high:
        recommendations.append(
            f"Cover letter is too long ({word_count} words). Target {ideal_low}-{ideal_high} words."
        )
    if tiers.no_duplication.duplicated_sentences:
        recommendations.append(
            "Some sentences closely duplicate resume content. Tell the story behind achievements instead."
        )
    if tiers.authentic_voice.flagged_phrases:
        recommendations.append(f"Remove AI-sounding phrases: {', '.join(tiers.authentic_voice.flagged_phrases)}")

    total = 0.0
    for tier_name, config_key, default in COVER_LETTER_WEIGHTS:
        weight = config_float(f"cover_letter.weights.{config_key}", default, max_value=1.0)
        total += getattr(tiers, tier_name).score * weight

    result = CoverLetterScoreResult(
        total_score=min(100, round_half_up(total)),
        tier_scores=tiers,
        recommendations=recommendations,
    )
    logger.debug("cover_letter_scored total=%s words=%s", result.total_score, word_count)
    return result
