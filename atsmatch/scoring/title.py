from __future__ import annotations

import re
from dataclasses import dataclass, field

from atsmatch.schemas.resume import ResumeSection, Zone
from atsmatch.schemas.scoring import TitleTier

from .common import config_float, config_int

TITLE_NOISE_WORDS = frozenset(
    {
        "senior", "junior", "lead", "staff", "principal", "associate",
        "i", "ii", "iii", "iv", "v", "intern", "co-op", "contractor",
        "remote", "hybrid", "onsite", "full-time", "part-time",
    }
)

LEVEL_PATTERN = re.compile(
    r"\b(senior|sr\.?|junior|jr\.?|lead|staff|principal|associate|entry[- ]?level|mid[- ]?level)\b",
    re.IGNORECASE,
)
_ROMAN_LEVEL_RE = re.compile(r"\b(I{1,3}|IV|V|VI{0,3})\b")
_PARENTHETICAL_RE = re.compile(r"\(([^)]+)\)")
_CORE_SPLIT_RE = re.compile(r"\s*[-–—|]\s*|\s*,\s+")
_TECH_SPLIT_RE = re.compile(r"[/,]")
_SEPARATORS_RE = re.compile(r"[-–—|]")
_DISALLOWED_RE = re.compile(r"[^a-z0-9+#\s]")


def normalize_title(title: str) -> str:
    """Lowercase, separators and parentheses to spaces, seniority and level words removed.

    "+" and "#" survive so C++ and C# stay intact.
    """
    text = (title or "").lower()
    text = re.sub(r"[()]", " ", text)
    text = _SEPARATORS_RE.sub(" ", text)
    text = _DISALLOWED_RE.sub("", text)
    words = [word for word in text.split() if word not in TITLE_NOISE_WORDS]
    return " ".join(words)


@dataclass(slots=True)
class DecomposedTitle:
    core_role: str
    qualifiers: list[str] = field(default_factory=list)
    tech_stack: list[str] = field(default_factory=list)
    level: str | None = None
    raw_title: str = ""


def decompose_job_title(title: str) -> DecomposedTitle:
    """Break "Senior Software Engineer - Backend (Python, AWS)" into role, qualifiers and stack."""
    raw_title = (title or "").strip()
    working = raw_title

    tech_stack: list[str] = []
    for match in _PARENTHETICAL_RE.finditer(working):
        tech_stack.extend(part.strip() for part in _TECH_SPLIT_RE.split(match.group(1)) if part.strip())
    working = _PARENTHETICAL_RE.sub("", working).strip()

    level: str | None = None
    level_match = LEVEL_PATTERN.search(working)
    if level_match:
        level = level_match.group(1)
        working = (working[: level_match.start()] + working[level_match.end() :]).strip()

    working = _ROMAN_LEVEL_RE.sub("", working, count=1).strip()

    parts = [part.strip() for part in _CORE_SPLIT_RE.split(working) if part.strip()]
    core_role = re.sub(r"\s+", " ", parts[0] if parts else working).strip()
    return DecomposedTitle(
        core_role=core_role,
        qualifiers=parts[1:],
        tech_stack=tech_stack,
        level=level,
        raw_title=raw_title,
    )


def _section_content(sections: list[ResumeSection], zone: Zone) -> str:
    for section in sections:
        if section.zone == zone:
            return section.content
    return ""


def score_job_title_alignment(resume: str, job_title: str, sections: list[ResumeSection]) -> TitleTier:
    """Ladder: exact, every core word in the headline, every core word across headline and
    summary, a partial headline overlap, the title anywhere else, nothing."""
    if not job_title or not job_title.strip():
        return TitleTier(score=config_int("ats.title.no_title", 50, max_value=100), match_type="none")

    title_lower = job_title.strip().lower()
    normalized_title = normalize_title(job_title)
    headline = _section_content(sections, Zone.HEADLINE)
    summary = _section_content(sections, Zone.SUMMARY)
    normalized_headline = normalize_title(headline)

    if (normalized_title and normalized_title in normalized_headline) or title_lower in headline.lower():
        return TitleTier(score=config_int("ats.title.exact", 100, max_value=100), match_type="exact")

    title_words = [word for word in normalized_title.split() if len(word) > 1]
    if title_words:
        headline_words = set(normalized_headline.split())
        combined_words = set(normalize_title(f"{headline} {summary}").split())
        headline_hits = sum(1 for word in title_words if word in headline_words)

        if headline_hits == len(title_words):
            return TitleTier(score=config_int("ats.title.core_headline", 95, max_value=100), match_type="core")
        if all(word in combined_words for word in title_words):
            return TitleTier(
                score=config_int("ats.title.core_headline_summary", 85, max_value=100),
                match_type="core",
            )
        if headline_hits >= len(title_words) * config_float("ats.title.partial_ratio", 0.5, max_value=1.0):
            return TitleTier(score=config_int("ats.title.partial", 60, max_value=100), match_type="partial")

    resume_lower = (resume or "").lower()
    if title_lower in resume_lower or (normalized_title and normalized_title in resume_lower):
        return TitleTier(score=config_int("ats.title.elsewhere", 30, max_value=100), match_type="elsewhere")

    return TitleTier(score=0, match_type="none")
