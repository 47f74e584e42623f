from __future__ import annotations

from dataclasses import dataclass, field

from atsmatch.matching.dates import extract_dates
from atsmatch.normalize.utils import has_email, has_phone
from atsmatch.parsing.sections import has_section_heading

from .common import config_int

NO_HEADINGS_REASON = 'No standard section headings detected (e.g., "Experience," "Skills," "Education")'
NO_CONTACT_REASON = "No contact information (email or phone) detected in document body"
NO_DATES_REASON = "No recognizable date formats detected"
HEAVY_TABS_REASON = (
    "Heavy tab usage detected — possible table-based layout which may confuse ATS parsers"
)


@dataclass(slots=True)
class ParsingGateResult:
    passed: bool
    reasons: list[str] = field(default_factory=list)


def check_parsing_gate(resume: str) -> ParsingGateResult:
    """Binary readability check run before any tier is scored."""
    text = resume or ""
    reasons: list[str] = []

    if not has_section_heading(text):
        reasons.append(NO_HEADINGS_REASON)
    if not has_email(text) and not has_phone(text):
        reasons.append(NO_CONTACT_REASON)
    if not extract_dates(text):
        reasons.append(NO_DATES_REASON)

    max_tabs_per_line = config_int("ats.parsing_gate.max_tabs_per_line", 2, min_value=1, max_value=100)
    if text.count("\t") > len(text.split("\n")) * max_tabs_per_line:
        reasons.append(HEAVY_TABS_REASON)

    return ParsingGateResult(passed=not reasons, reasons=reasons)
