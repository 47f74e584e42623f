from __future__ import annotations

import logging
from datetime import date

from atsmatch.matching.dates import extract_date_ranges, format_month_year
from atsmatch.schemas.validation import EmploymentGap, GapDetectionResult
from atsmatch.scoring.common import config_int, round_half_up

logger = logging.getLogger(__name__)

_DAYS_PER_MONTH = 30


def detect_employment_gaps(resume_text: str, today: date | None = None) -> GapDetectionResult:
    """Gaps longer than the threshold between adjacent employment ranges.

    Ranges are ordered by end date, most recent first; "Present" resolves to `today`.
    """
    threshold = config_int("validation.gap_threshold_months", 3, min_value=0, max_value=120)
    ranges = sorted(extract_date_ranges(resume_text, today=today), key=lambda item: item.end, reverse=True)

    result = GapDetectionResult()
    for current, previous in zip(ranges, ranges[1:]):
        months = (current.start - previous.end).days / _DAYS_PER_MONTH
        if months <= threshold:
            continue
        start = format_month_year(previous.end)
        end = format_month_year(current.start)
        rounded = round_half_up(months)
        result.gaps.append(EmploymentGap(start_date=start, end_date=end, months=rounded))
        result.flagged_items.append(f"{start} - {end}")
        result.warnings.append(
            f"Gap detected: {start} to {end} ({rounded} months). Consider adding relevant activity during "
            "this period: freelance/contract work, certifications, coursework, volunteer work, or a "
            '"Professional Development" section.'
        )

    logger.debug("gap_detection ranges=%s gaps=%s", len(ranges), len(result.gaps))
    return result
