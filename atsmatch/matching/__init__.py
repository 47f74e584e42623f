from __future__ import annotations

import logging
from functools import lru_cache

from atsmatch.core.config import settings

from .dates import DateMention, DateRange, extract_date_ranges, extract_dates
from .matcher import TermMatcher
from .synonym_matcher import (
    SynonymTermMatcher,
    contains_word,
    count_occurrences,
    find_word,
    word_boundary_match,
)


@lru_cache(maxsize=1)
def get_default_matcher() -> SynonymTermMatcher:
    logger = logging.getLogger("atsmatch.match") if settings.match_diagnostics else None
    return SynonymTermMatcher(logger=logger)


def term_exists(term: str, text: str) -> bool:
    return get_default_matcher().term_exists(term, text)


__all__ = [
    "DateMention",
    "DateRange",
    "SynonymTermMatcher",
    "TermMatcher",
    "contains_word",
    "count_occurrences",
    "extract_date_ranges",
    "extract_dates",
    "find_word",
    "get_default_matcher",
    "term_exists",
    "word_boundary_match",
]
