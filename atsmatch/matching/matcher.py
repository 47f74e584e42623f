from __future__ import annotations

from typing import Protocol

from .dates import DateMention


class TermMatcher(Protocol):
    def term_exists(self, term: str, text: str) -> bool:
        """True if `term`, or a synonym of it, appears in `text` on match boundaries."""

    def extract_dates(self, text: str) -> list[DateMention]:
        """Month/year date mentions in document order."""
