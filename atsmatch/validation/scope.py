from __future__ import annotations

import re

from atsmatch.normalize.utils import extract_bullets, strip_bullet_prefix
from atsmatch.schemas.validation import InflatedBullet, ScopeInflationResult
from atsmatch.scoring.common import config_float

VERB_TIERS = {
    1: frozenset({"assisted", "contributed", "participated", "helped", "supported", "involved"}),
    2: frozenset({"managed", "developed", "created", "built", "designed", "implemented"}),
    3: frozenset(
        {
            "spearheaded", "architected", "pioneered", "led", "directed",
            "championed", "orchestrated", "founded", "engineered", "transformed",
        }
    ),
}

SCOPE_AMPLIFIERS = (
    "single-handedly", "singlehandedly",
    "cross-functional", "cross functional",
    "enterprise-wide", "enterprise wide", "enterprisewide",
    "end-to-end", "end to end",
    "mission-critical", "mission critical",
    "global",
    "flagship",
    "company-wide", "company wide", "companywide",
    "organization-wide", "organization wide",
    "multi-million", "multimillion",
    "billion-dollar", "million-dollar",
    "first-ever", "first ever",
    "sole",
    "exclusively",
    "revolutionized",
    "groundbreaking",
)

_NON_WORD_RE = re.compile(r"[^\w\s]")


def verb_tier(verb: str) -> int:
    """1 supporting, 2 building, 3 owning; 0 for verbs outside the tiers."""
    lower = verb.lower()
    for tier, verbs in VERB_TIERS.items():
        if lower in verbs:
            return tier
    return 0


def leading_verb(bullet: str) -> str | None:
    words = strip_bullet_prefix(bullet).split()
    return words[0] if words else None


def _significant_words(text: str) -> set[str]:
    return {word for word in _NON_WORD_RE.sub("", text.lower()).split() if len(word) > 2}


def bullet_similarity(first: str, second: str) -> float:
    words_a = _significant_words(first)
    words_b = _significant_words(second)
    if not words_a or not words_b:
        return 0.0
    return len(words_a & words_b) / max(len(words_a), len(words_b))


def _best_original(bullet: str, originals: list[str], used: set[int]) -> tuple[int, float]:
    best_index = -1
    best_score = 0.0
    for index, candidate in enumerate(originals):
        if index in used:
            continue
        score = bullet_similarity(candidate, bullet)
        if score > best_score:
            best_index, best_score = index, score
    return best_index, best_score


def detect_scope_inflation(original: str, draft: str) -> ScopeInflationResult:
    """Pair draft bullets with their closest original bullet and flag upgraded verbs or added amplifiers."""
    original_bullets = extract_bullets(original)
    draft_bullets = extract_bullets(draft)
    threshold = config_float("validation.bullet_similarity_threshold", 0.3, max_value=1.0)

    result = ScopeInflationResult()
    used: set[int] = set()
    amplifier_warnings: list[str] = []

    for bullet in draft_bullets:
        index, score = _best_original(bullet, original_bullets, used)
        if index == -1 or score < threshold:
            result.unmatched_bullets.append(bullet)
            continue
        used.add(index)
        source = original_bullets[index]

        source_verb = leading_verb(source)
        draft_verb = leading_verb(bullet)
        if source_verb and draft_verb and verb_tier(source_verb) == 1:
            tier = verb_tier(draft_verb)
            if tier in (2, 3):
                result.inflated_bullets.append(
                    InflatedBullet(
                        original=source,
                        tailored=bullet,
                        severity="high" if tier == 3 else "medium",
                        reason="verb_tier",
                    )
                )

        source_lower = source.lower()
        bullet_lower = bullet.lower()
        added = [item for item in SCOPE_AMPLIFIERS if item in bullet_lower and item not in source_lower]
        if added:
            result.inflated_bullets.append(
                InflatedBullet(original=source, tailored=bullet, severity="medium", reason="amplifier", amplifiers=added)
            )
            quoted = '", "'.join(added)
            amplifier_warnings.append(f'Qualifier amplification: "{quoted}" added to bullet not present in original.')

    result.flagged_items = [item.tailored for item in result.inflated_bullets]
    result.warnings.extend(amplifier_warnings)

    if result.inflated_bullets:
        high = sum(1 for item in result.inflated_bullets if item.severity == "high")
        medium = len(result.inflated_bullets) - high
        parts: list[str] = []
        if high:
            parts.append(f'{high} high-severity (e.g., "assisted" upgraded to "spearheaded")')
        if medium:
            parts.append(f'{medium} medium-severity (e.g., "assisted" upgraded to "managed")')
        result.warnings.append(
            f"Scope inflation detected: {', '.join(parts)}. "
            "Review these bullets to ensure the verb matches the candidate's actual role."
        )

    if result.unmatched_bullets:
        result.warnings.append(
            f"{len(result.unmatched_bullets)} tailored bullet(s) could not be matched to any original content. "
            "These may contain fabricated experience."
        )
    return result
