from __future__ import annotations

import re

from atsmatch.matching import TermMatcher, get_default_matcher
from atsmatch.schemas.validation import KeywordValidationResult

IGNORE_WORDS = frozenset(
    """
    a an the and or of to in for with on at by from is are was were be been being have has had do does
    did will would shall should may might can could not but if than that this these those it its my your
    our their his her we they i you he she me us them who whom which what where when how all each every
    both few more most other some such no nor only same so too very just about above after again also am
    as because before below between during into over through under until up down out off then once here
    there why any many much own per via etc
    spearheaded orchestrated mentored galvanized navigated delegated championed directed cultivated
    facilitated architected deployed refactored optimized automated integrated debugged modernized
    standardized visualized deciphered audited forecasted identified interpreted reconciled investigated
    evaluated discovered validated negotiated influenced persuaded presented authored consulted clarified
    collaborated advised mediated generated exceeded reduced accelerated maximized revitalized launched
    secured pioneered transformed managed developed designed implemented created built led improved
    established maintained provided delivered ensured achieved drove enabled enhanced streamlined
    leveraged utilized applied conducted performed supported coordinated contributed oversaw supervised
    analyzed resolved demonstrated accomplished engineered
    experience education skills summary objective projects certifications awards publications languages
    interests references professional work technical career relevant additional contact information
    phone email address results resulting impact team teams company client clients project system
    systems process processes business data development management service services solution solutions
    technology application applications environment platform infrastructure
    dear hiring sincerely regards opportunity position role organization forward discuss contribute bring
    excited look welcome eager happy pleased grateful
    """.split()
)

_TOKEN_RE = re.compile(r"[A-Za-z][A-Za-z0-9.+#_-]{1,}")


def extract_technical_keywords(text: str) -> list[str]:
    """Lowercased tool-like tokens (C++, Node.js, ...) outside the ignore list, first-seen order."""
    keywords: dict[str, None] = {}
    for token in _TOKEN_RE.findall(text or ""):
        lower = token.lower()
        if lower not in IGNORE_WORDS:
            keywords.setdefault(lower, None)
    return list(keywords)


def validate_tailored_content(
    original: str,
    draft: str,
    matcher: TermMatcher | None = None,
) -> KeywordValidationResult:
    matcher = matcher or get_default_matcher()
    original_keywords = set(extract_technical_keywords(original))

    result = KeywordValidationResult()
    for keyword in extract_technical_keywords(draft):
        if keyword in original_keywords or matcher.term_exists(keyword, original or ""):
            continue
        result.flagged_items.append(keyword)

    if result.flagged_items:
        result.warnings.append(
            f"The AI added skills not found in your base resume: {', '.join(result.flagged_items)}. "
            "Please verify these are accurate."
        )
    return result
