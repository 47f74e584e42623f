from __future__ import annotations

import re
from dataclasses import dataclass, field

from atsmatch.matching import contains_word, find_word
from atsmatch.schemas.jd import ExtractionMethod
from atsmatch.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

_CONTEXT_WINDOW = 100
_NEIGHBOR_WINDOW = 50
_DOMAIN_FALLBACK_BELOW = 3
# Capitalized list items longer than this are prose, not skill names.
_MAX_PATTERN_ITEM_WORDS = 4

_LIST_INTRO_RE = re.compile(
    r"(?:experience\s+(?:with|in)|proficiency\s+in|knowledge\s+of|familiar\s+with"
    r"|hands-on\s+(?:experience\s+)?with|tools?\s+like|such\s+as|including|technologies:\s*)"
    r"\s*([^.]+)",
    re.IGNORECASE,
)
_LIST_SPLIT_RE = re.compile(r",\s*|\s+and\s+|\s*;\s*")
_PARENTHETICAL_RE = re.compile(r"\(([^)]+)\)")
_YEARS_AREA_RE = re.compile(
    r"\d+\+?\s*years?\s*(?:of\s+)?(?:professional\s+)?(?:experience\s+)?(?:in\s+|with\s+)?([^,.]+)",
    re.IGNORECASE,
)
_NEIGHBOR_SPLIT_RE = re.compile(r"[,;]\s*")
_TRAILING_PUNCT_RE = re.compile(r"[.,;:!?)]+$")


@dataclass(slots=True)
class SkillExtraction:
    hard_skills: list[str] = field(default_factory=list)
    soft_skills: list[str] = field(default_factory=list)
    extraction_method: dict[str, ExtractionMethod] = field(default_factory=dict)


def _in_technical_context(
    term: str,
    text: str,
    position: int,
    taxonomy: TaxonomyProvider,
) -> bool:
    end = position + len(term)
    context = text[max(0, position - _CONTEXT_WINDOW) : end + _CONTEXT_WINDOW].lower()
    if any(indicator in context for indicator in taxonomy.context_indicators):
        return True

    lookup = taxonomy.technical_lookup
    before = text[max(0, position - _NEIGHBOR_WINDOW) : position]
    after = text[end : end + _NEIGHBOR_WINDOW]
    previous_item = _NEIGHBOR_SPLIT_RE.split(before)[-1].strip().lower()
    next_item = re.split(r"[,;]", after)[0].strip().lower()
    return previous_item in lookup or next_item in lookup


def _dictionary_pass(text: str, taxonomy: TaxonomyProvider, found: dict[str, ExtractionMethod]) -> None:
    ambiguous = taxonomy.ambiguous_terms
    for skill_lower, canonical in taxonomy.technical_lookup.items():
        if skill_lower in ambiguous:
            for match in find_word(skill_lower, text):
                if _in_technical_context(skill_lower, text, match.start(), taxonomy):
                    found[canonical] = "dictionary"
                    break
        elif contains_word(skill_lower, text):
            found[canonical] = "dictionary"


def _domain_pass(text: str, taxonomy: TaxonomyProvider, found: dict[str, ExtractionMethod]) -> None:
    for lookup in taxonomy.domain_lookups.values():
        for skill_lower, canonical in lookup.items():
            if contains_word(skill_lower, text):
                found[canonical] = "both" if canonical in found else "dictionary"


def extract_pattern_candidates(text: str) -> list[str]:
    """Items from list-introducing phrases, parenthetical comma lists and "N+ years of X"."""
    candidates: list[str] = []

    for match in _LIST_INTRO_RE.finditer(text):
        for item in _LIST_SPLIT_RE.split(match.group(1)):
            item = item.strip()
            if 2 <= len(item) <= 40:
                candidates.append(item)

    for match in _PARENTHETICAL_RE.finditer(text):
        inner = match.group(1)
        if "," not in inner:
            continue
        for item in re.split(r",\s*", inner):
            item = item.strip()
            if 2 <= len(item) <= 30:
                candidates.append(item)

    for match in _YEARS_AREA_RE.finditer(text):
        area = match.group(1).strip()
        if 3 <= len(area) <= 50:
            candidates.append(area)

    return candidates


def _pattern_pass(text: str, taxonomy: TaxonomyProvider, found: dict[str, ExtractionMethod]) -> None:
    lookup = taxonomy.technical_lookup
    for candidate in extract_pattern_candidates(text):
        trimmed = _TRAILING_PUNCT_RE.sub("", candidate).strip()
        if len(trimmed) < 2:
            continue
        canonical = lookup.get(trimmed.lower())
        if canonical:
            found[canonical] = "both" if found.get(canonical) in ("dictionary", "both") else "pattern"
        elif len(trimmed) >= 3 and trimmed[0].isupper() and len(trimmed.split()) <= _MAX_PATTERN_ITEM_WORDS:
            found[trimmed] = "both" if trimmed in found else "pattern"


def dedupe_by_synonyms(skills: list[str], taxonomy: TaxonomyProvider) -> list[str]:
    """Keep the first spelling of each skill, counting an abbreviation and its expansions once."""
    result: list[str] = []
    seen: set[str] = set()
    for skill in skills:
        lower = skill.lower()
        if lower in seen:
            continue
        group = taxonomy.synonym_group(lower)
        if group is None:
            result.append(skill)
            seen.add(lower)
            continue
        key, expansions = group
        if key in seen:
            continue
        result.append(skill)
        seen.add(lower)
        seen.add(key)
        seen.update(expansions)
    return result


def extract_skills(relevant_text: str, taxonomy: TaxonomyProvider | None = None) -> SkillExtraction:
    taxonomy = taxonomy or get_default_taxonomy_provider()
    text = relevant_text or ""
    found: dict[str, ExtractionMethod] = {}

    _dictionary_pass(text, taxonomy, found)
    if len(found) < _DOMAIN_FALLBACK_BELOW:
        _domain_pass(text, taxonomy, found)
    _pattern_pass(text, taxonomy, found)

    soft_skills = [skill for skill in taxonomy.soft_skills if contains_word(skill, text)]
    hard_skills = dedupe_by_synonyms(list(found), taxonomy)

    return SkillExtraction(
        hard_skills=hard_skills,
        soft_skills=soft_skills,
        extraction_method={skill: found[skill] for skill in hard_skills},
    )
