from __future__ import annotations

from typing import Mapping, Protocol


class TaxonomyProvider(Protocol):
    def normalize_skill(self, raw: str) -> tuple[str, str | None]:
        """Return normalized text and the synonym-group key it belongs to, if any."""

    def expansions(self, term: str) -> tuple[str, ...]:
        """Full-term expansions when `term` is a known abbreviation."""

    def abbreviations(self, expansion: str) -> tuple[str, ...]:
        """Abbreviations whose expansion list contains `expansion`."""

    def synonym_group(self, term: str) -> tuple[str, tuple[str, ...]] | None:
        """The (abbreviation, expansions) group containing `term`, if any."""

    @property
    def technical_lookup(self) -> Mapping[str, str]:
        """Lowercase technical skill -> canonical spelling, in dictionary order."""

    @property
    def certifications(self) -> tuple[str, ...]: ...

    @property
    def domain_lookups(self) -> Mapping[str, Mapping[str, str]]: ...

    @property
    def soft_skills(self) -> tuple[str, ...]: ...

    @property
    def ambiguous_terms(self) -> frozenset[str]: ...

    @property
    def context_indicators(self) -> tuple[str, ...]: ...
