from __future__ import annotations

import re

from atsmatch.schemas.jd import ExtractedSkills, RequirementMetadata

# Past-tense action verbs recommended for resume bullets.
VERB_BANK = (
    "spearheaded", "championed", "directed", "orchestrated", "navigated",
    "galvanized", "delegated", "mentored", "cultivated", "facilitated",
    "architected", "engineered", "deployed", "automated", "modernized",
    "refactored", "optimized", "integrated", "standardized", "debugged",
    "deciphered", "audited", "forecasted", "discovered", "evaluated",
    "validated", "investigated", "identified", "interpreted", "reconciled",
    "negotiated", "influenced", "persuaded", "authored", "presented",
    "advised", "consulted", "mediated", "clarified", "collaborated",
    "pioneered", "transformed", "generated", "launched", "exceeded",
    "accelerated", "maximized", "secured", "revitalized", "reduced",
)

JD_ACTION_VERBS = frozenset(
    {
        "build", "builds", "design", "designs", "develop", "develops",
        "implement", "implements", "manage", "manages", "lead", "leads",
        "create", "creates", "maintain", "maintains", "drive", "drives",
        "collaborate", "collaborates", "own", "owns", "deliver", "delivers",
        "analyze", "analyzes", "test", "tests", "write", "writes",
        "configure", "configures", "monitor", "monitors", "troubleshoot",
        "troubleshoots", "optimize", "optimizes", "deploy", "deploys",
        "automate", "automates", "scale", "scales", "mentor", "mentors",
    }
)

_VERB_BANK_SET = frozenset(VERB_BANK)
_SENTENCE_SPLIT_RE = re.compile(r"[.;!?]+")
_NON_ALPHA_RE = re.compile(r"[^a-z]")
_TRAILING_PUNCT_RE = re.compile(r"[,;:]+$")
_PHRASE_WORDS = 7
_PHRASE_MIN_CHARS = 10
_PHRASE_MAX_CHARS = 80


def _verb_phrase(sentence: str) -> str | None:
    words = sentence.split()
    for index, word in enumerate(words):
        bare = _NON_ALPHA_RE.sub("", word.lower())
        if bare in JD_ACTION_VERBS or bare in _VERB_BANK_SET:
            phrase = _TRAILING_PUNCT_RE.sub("", " ".join(words[index : index + _PHRASE_WORDS])).strip()
            if _PHRASE_MIN_CHARS <= len(phrase) <= _PHRASE_MAX_CHARS:
                return phrase
            return None
    return None


def distill_requirements(
    full_relevant_text: str,
    skills: ExtractedSkills,
    metadata: RequirementMetadata,
) -> list[str]:
    """Flatten a posting into short requirement strings for the job-posting form."""
    requirements: list[str] = []
    seen: set[str] = set()

    def add(item: str) -> None:
        key = item.strip().lower()
        if key and key not in seen:
            seen.add(key)
            requirements.append(item.strip())

    for skill in skills.hard_skills:
        add(skill)

    for years in metadata.years_experience:
        area = f" of {years.area}" if years.area else ""
        add(f"{years.min_years}+ years{area}")

    for certification in metadata.certifications:
        add(certification)

    if metadata.degree_requirement is not None:
        degree = metadata.degree_requirement
        field_suffix = f" in {degree.field_of_study}" if degree.field_of_study else ""
        add(f"{degree.level} degree{field_suffix}")

    for sentence in _SENTENCE_SPLIT_RE.split(full_relevant_text or ""):
        sentence = sentence.strip()
        if not sentence:
            continue
        phrase = _verb_phrase(sentence)
        if phrase:
            add(phrase)

    return requirements
