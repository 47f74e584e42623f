from __future__ import annotations

import re

from atsmatch.matching import contains_word
from atsmatch.schemas.jd import DegreeRequirement, RequirementMetadata, YearsRequirement
from atsmatch.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

_YEARS_RE = re.compile(
    r"(\d+)\+?\s*years?\s*(?:of\s+)?(?:professional\s+)?(?:experience\s+)?(?:in\s+|with\s+)?([^,.;]+)?",
    re.IGNORECASE,
)
_DEGREE_RE = re.compile(
    r"\b(Bachelor'?s?|Master'?s?|PhD|Doctorate|Associate'?s?)\s*(?:degree\s+)?(?:in\s+)?([^,.;]+)?",
    re.IGNORECASE,
)
_MAX_YEARS = 30


def extract_requirement_metadata(
    relevant_text: str,
    taxonomy: TaxonomyProvider | None = None,
) -> RequirementMetadata:
    taxonomy = taxonomy or get_default_taxonomy_provider()
    text = relevant_text or ""

    years: list[YearsRequirement] = []
    for match in _YEARS_RE.finditer(text):
        minimum = int(match.group(1))
        if not 0 < minimum <= _MAX_YEARS:
            continue
        area = (match.group(2) or "").strip()
        years.append(YearsRequirement(min_years=minimum, area=area if len(area) > 2 else None))

    degree: DegreeRequirement | None = None
    degree_match = _DEGREE_RE.search(text)
    if degree_match:
        field_of_study = (degree_match.group(2) or "").strip()
        degree = DegreeRequirement(level=degree_match.group(1), field_of_study=field_of_study or None)

    certifications = [cert for cert in taxonomy.certifications if contains_word(cert, text)]

    return RequirementMetadata(
        years_experience=years,
        degree_requirement=degree,
        certifications=certifications,
    )
