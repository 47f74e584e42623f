from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .provider import TaxonomyProvider


def _build_lookup(skills: list[str]) -> dict[str, str]:
    # Duplicates keep the first spelling and position.
    lookup: dict[str, str] = {}
    for skill in skills:
        lookup.setdefault(skill.lower(), skill)
    return lookup


class LocalTaxonomy(TaxonomyProvider):
    def __init__(
        self,
        synonyms_path: str | Path | None = None,
        skills_path: str | Path | None = None,
    ) -> None:
        synonyms_file = Path(synonyms_path) if synonyms_path else Path(__file__).with_name("synonyms.json")
        skills_file = Path(skills_path) if skills_path else Path(__file__).with_name("skills.json")

        self._synonyms = self._load_synonyms(synonyms_file)
        self._reverse: dict[str, tuple[str, ...]] = {}
        for abbreviation, expansions in self._synonyms.items():
            for expansion in expansions:
                self._reverse[expansion] = self._reverse.get(expansion, ()) + (abbreviation,)

        raw_skills = self._load_json(skills_file)
        technical = raw_skills.get("technical") or {}
        self._categories = {
            str(name): tuple(str(skill) for skill in skills) for name, skills in technical.items()
        }
        self._technical_lookup = _build_lookup(
            [skill for skills in self._categories.values() for skill in skills]
        )
        self._domain_lookups = {
            str(name): MappingProxyType(_build_lookup([str(skill) for skill in skills]))
            for name, skills in (raw_skills.get("domains") or {}).items()
        }
        self._soft_skills = tuple(str(skill) for skill in raw_skills.get("soft_skills") or [])
        self._ambiguous = frozenset(
            str(term).lower() for term in raw_skills.get("ambiguous_short_terms") or []
        )
        self._context_indicators = tuple(
            str(item).lower() for item in raw_skills.get("context_indicators") or []
        )

    @staticmethod
    def _load_json(path: Path) -> dict[str, Any]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise RuntimeError(f"Taxonomy file '{path}' must contain a JSON object.")
        return raw

    @classmethod
    def _load_synonyms(cls, path: Path) -> dict[str, tuple[str, ...]]:
        raw = cls._load_json(path)
        synonyms: dict[str, tuple[str, ...]] = {}
        for key, values in raw.items():
            if isinstance(values, str):
                values = [values]
            synonyms[str(key).strip().lower()] = tuple(str(value).strip().lower() for value in values)
        return synonyms

    def normalize_skill(self, raw: str) -> tuple[str, str | None]:
        normalized = raw.strip().lower()
        group = self.synonym_group(normalized)
        return normalized, group[0] if group else None

    def expansions(self, term: str) -> tuple[str, ...]:
        return self._synonyms.get(term, ())

    def abbreviations(self, expansion: str) -> tuple[str, ...]:
        return self._reverse.get(expansion, ())

    def synonym_group(self, term: str) -> tuple[str, tuple[str, ...]] | None:
        if term in self._synonyms:
            return term, self._synonyms[term]
        abbreviations = self._reverse.get(term)
        if abbreviations:
            key = abbreviations[0]
            return key, self._synonyms[key]
        return None

    @property
    def synonyms(self) -> Mapping[str, tuple[str, ...]]:
        return MappingProxyType(self._synonyms)

    @property
    def categories(self) -> Mapping[str, tuple[str, ...]]:
        return MappingProxyType(self._categories)

    @property
    def technical_lookup(self) -> Mapping[str, str]:
        return MappingProxyType(self._technical_lookup)

    @property
    def certifications(self) -> tuple[str, ...]:
        return self._categories.get("certifications", ())

    @property
    def domain_lookups(self) -> Mapping[str, Mapping[str, str]]:
        return MappingProxyType(self._domain_lookups)

    @property
    def soft_skills(self) -> tuple[str, ...]:
        return self._soft_skills

    @property
    def ambiguous_terms(self) -> frozenset[str]:
        return self._ambiguous

    @property
    def context_indicators(self) -> tuple[str, ...]:
        return self._context_indicators
