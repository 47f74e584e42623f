from __future__ import annotations

import re

from atsmatch.schemas.validation import FeedbackVerification

from .keywords import IGNORE_WORDS

_TERM_SPLIT_RE = re.compile(r"""[\s,;.!?"'()]+""")


def feedback_terms(feedback: str) -> list[str]:
    terms = _TERM_SPLIT_RE.split((feedback or "").lower())
    return [term for term in terms if len(term) >= 3 and term not in IGNORE_WORDS]


def _verify_one(feedback: str, previous_draft: str, new_draft: str) -> FeedbackVerification:
    previous_lower = previous_draft.lower()
    new_lower = new_draft.lower()
    terms = feedback_terms(feedback)
    matched = [term for term in terms if term in new_lower]
    newly_added = [term for term in matched if term not in previous_lower]
    changed = new_draft != previous_draft

    if not terms:
        # Structural feedback such as "make it shorter".
        applied = changed
    elif newly_added:
        applied = True
    elif len(matched) > len(terms) * 0.5:
        previous_matches = sum(1 for term in terms if term in previous_lower)
        applied = len(matched) > previous_matches or changed
    else:
        applied = False

    return FeedbackVerification(feedback=feedback, applied=applied, matched_terms=matched, newly_added_terms=newly_added)


def verify_feedback_applied(
    feedback: str,
    feedback_history: list[str],
    previous_draft: str,
    new_draft: str,
) -> list[FeedbackVerification]:
    """One verification per history item, then the current feedback."""
    previous_draft = previous_draft or ""
    new_draft = new_draft or ""
    return [_verify_one(item, previous_draft, new_draft) for item in [*feedback_history, feedback]]
