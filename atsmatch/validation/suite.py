from __future__ import annotations

import logging
from datetime import date

from atsmatch.matching import TermMatcher, get_default_matcher
from atsmatch.schemas.validation import ValidationReport

from .gaps import detect_employment_gaps
from .headings import validate_section_headings
from .keywords import validate_tailored_content
from .metrics import validate_no_fabricated_metrics
from .phrases import validate_no_new_phrases
from .scope import detect_scope_inflation

logger = logging.getLogger(__name__)


def run_validation_suite(
    original: str,
    draft: str,
    today: date | None = None,
    matcher: TermMatcher | None = None,
) -> ValidationReport:
    matcher = matcher or get_default_matcher()
    report = ValidationReport(
        metrics=validate_no_fabricated_metrics(original, draft),
        phrases=validate_no_new_phrases(original, draft, matcher=matcher),
        scope=detect_scope_inflation(original, draft),
        headings=validate_section_headings(draft),
        gaps=detect_employment_gaps(draft, today=today),
        keywords=validate_tailored_content(original, draft, matcher=matcher),
    )
    for checker in (report.metrics, report.phrases, report.scope, report.headings, report.gaps, report.keywords):
        report.warnings.extend(checker.warnings)

    logger.debug("validation_suite_completed warnings=%s", len(report.warnings))
    return report
