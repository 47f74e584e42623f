from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Iterator

from atsmatch.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .dates import DateMention, extract_dates
from .matcher import TermMatcher

# Whitespace and common punctuation only. ':', '*', '_', '#', '|' and '+' are not
# boundaries, so "Databases:MySQL" and "**MySQL**" do not match "MySQL".
BOUNDARY_CHARS = r"""\s,;.!?()\[\]{}/"'\-"""

_CONTEXT_CHARS = 15


@lru_cache(maxsize=4096)
def _boundary_pattern(needle: str) -> re.Pattern[str]:
    escaped = re.escape(needle)
    return re.compile(
        rf"(?:^|[{BOUNDARY_CHARS}]){escaped}(?:$|[{BOUNDARY_CHARS}])",
        re.IGNORECASE,
    )


@lru_cache(maxsize=4096)
def _word_pattern(needle: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(needle)}(?!\w)", re.IGNORECASE)


def word_boundary_match(needle: str, haystack: str) -> bool:
    if not needle:
        return False
    return _boundary_pattern(needle.lower()).search(haystack) is not None


def contains_word(needle: str, haystack: str) -> bool:
    """Word-character boundary search, the `\\b` rule extended to terms like C++ or .NET."""
    if not needle:
        return False
    return _word_pattern(needle.lower()).search(haystack) is not None


def count_occurrences(needle: str, haystack: str) -> int:
    if not needle:
        return 0
    return sum(1 for _ in _word_pattern(needle.lower()).finditer(haystack))


def find_word(needle: str, haystack: str) -> Iterator[re.Match[str]]:
    """Iterate over word-boundary matches of `needle`."""
    if not needle:
        return iter(())
    return _word_pattern(needle.lower()).finditer(haystack)


class SynonymTermMatcher(TermMatcher):
    """Boundary-safe matching with abbreviation/expansion equivalence.

    `logger` is optional. Without one the matcher never performs I/O; with one it
    reports, at debug level, terms that exist as raw substrings but fail the
    boundary rule.
    """

    def __init__(
        self,
        taxonomy: TaxonomyProvider | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._taxonomy = taxonomy or get_default_taxonomy_provider()
        self._logger = logger

    @property
    def taxonomy(self) -> TaxonomyProvider:
        return self._taxonomy

    def term_exists(self, term: str, text: str) -> bool:
        term_lower = (term or "").strip().lower()
        if not term_lower or not text:
            return False

        if word_boundary_match(term_lower, text):
            return True

        for expansion in self._taxonomy.expansions(term_lower):
            if word_boundary_match(expansion, text):
                return True

        for abbreviation in self._taxonomy.abbreviations(term_lower):
            if word_boundary_match(abbreviation, text):
                return True

        if self._logger is not None:
            self._log_boundary_miss(term_lower, text)
        return False

    def extract_dates(self, text: str) -> list[DateMention]:
        return extract_dates(text)

    def _log_boundary_miss(self, term_lower: str, text: str) -> None:
        if not self._logger.isEnabledFor(logging.DEBUG):
            return
        lowered = text.lower()
        index = lowered.find(term_lower)
        if index == -1:
            return
        end = index + len(term_lower)
        before = text[index - 1] if index > 0 else "^"
        after = text[end] if end < len(text) else "$"
        context = text[max(0, index - _CONTEXT_CHARS) : end + _CONTEXT_CHARS]
        self._logger.debug(
            "term_boundary_miss term=%r before=%r after=%r context=%r",
            term_lower,
            before,
            after,
            context,
        )
