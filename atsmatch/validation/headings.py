from __future__ import annotations

import re

from atsmatch.parsing.sections import APPROVED_HEADINGS, HEADLINE_MAX_LINES, is_all_caps_line, is_section_heading
from atsmatch.schemas.validation import HeadingValidationResult
from atsmatch.scoring.common import config_int

_MARKDOWN_HEADING_RE = re.compile(r"^#{1,3}\s+(.+)$")
_BOLD_LINE_RE = re.compile(r"^\*\*([^*]+)\*\*$")
_MARKER_RE = re.compile(r"[*_#]")
_DIGIT_RE = re.compile(r"\d")


def _candidate_heading(line: str, in_headline: bool) -> str | None:
    markdown = _MARKDOWN_HEADING_RE.match(line)
    if markdown:
        return markdown.group(1).strip()

    bold = _BOLD_LINE_RE.match(line)
    if bold:
        text = bold.group(1).strip()
        # Bold role/date lines ("Engineer | Acme | 2021") are not headings.
        if "|" in text or _DIGIT_RE.search(text):
            return None
        return text

    if not in_headline and is_all_caps_line(line) and 3 <= len(line) <= 40:
        return line
    return None


def validate_section_headings(draft: str) -> HeadingValidationResult:
    """Flag heading-like lines whose text is outside the approved vocabulary.

    ALL-CAPS lines in the leading headline block (a candidate name, say) are not
    treated as headings.
    """
    max_words = config_int("validation.max_heading_words", 4, min_value=1, max_value=20)
    result = HeadingValidationResult()
    seen_heading = False
    leading_lines = 0

    for raw_line in (draft or "").split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        if is_section_heading(line):
            seen_heading = True
        in_headline = not seen_heading and leading_lines < HEADLINE_MAX_LINES
        if not seen_heading:
            leading_lines += 1

        heading = _candidate_heading(line, in_headline)
        if heading is None:
            continue
        normalized = _MARKER_RE.sub("", heading).strip().lower()
        if not normalized or normalized in APPROVED_HEADINGS:
            continue
        if len(normalized.split()) <= max_words and not normalized[0].isdigit():
            result.flagged_items.append(heading)

    if result.flagged_items:
        result.warnings.append(
            f"Non-standard section headings detected: {', '.join(result.flagged_items)}. "
            'Use approved ATS headings like "Professional Summary," "Work Experience," "Skills," '
            '"Education," "Projects," "Certifications."'
        )
    return result
