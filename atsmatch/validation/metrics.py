from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from atsmatch.schemas.validation import MetricKind, MetricValidationResult, NudgedMetric
from atsmatch.scoring.common import config_float

logger = logging.getLogger(__name__)

PERCENT_RE = re.compile(r"\d+(?:\.\d+)?%")
DOLLAR_RE = re.compile(r"\$\d+(?:,\d{3})*(?:\.\d+)?[KMB]?", re.IGNORECASE)
CONTEXTUAL_RE = re.compile(
    r"\b\d+\s*(?:team|engineers|developers|clients|users|projects|months|years|hours|people|members|"
    r"staff|reports|customers|stakeholders)",
    re.IGNORECASE,
)

_PERCENT_VALUE_RE = re.compile(r"^(\d+(?:\.\d+)?)%$")
_DOLLAR_VALUE_RE = re.compile(r"^\$([\d,]+(?:\.\d+)?)([KMB])?$", re.IGNORECASE)
_LEADING_INT_RE = re.compile(r"^(\d+)")
_SUFFIX_MULTIPLIERS = {"K": 1_000, "M": 1_000_000, "B": 1_000_000_000}

# Percent-suffixed years such as "2023%" are typos, not metrics.
_YEAR_RANGE = (1900, 2100)


@dataclass(frozen=True, slots=True)
class ParsedMetric:
    raw: str
    value: float
    kind: MetricKind


def parse_metric_value(metric: str) -> ParsedMetric | None:
    """Numeric value of "25%", "$1.5M" or "15 engineers"."""
    percent = _PERCENT_VALUE_RE.match(metric)
    if percent:
        return ParsedMetric(raw=metric, value=float(percent.group(1)), kind="percent")

    dollar = _DOLLAR_VALUE_RE.match(metric)
    if dollar:
        value = float(dollar.group(1).replace(",", ""))
        suffix = (dollar.group(2) or "").upper()
        value *= _SUFFIX_MULTIPLIERS.get(suffix, 1)
        return ParsedMetric(raw=metric, value=value, kind="dollar")

    leading = _LEADING_INT_RE.match(metric)
    if leading:
        return ParsedMetric(raw=metric, value=float(leading.group(1)), kind="contextual")
    return None


def find_nudged_metric(candidate: ParsedMetric, originals: list[ParsedMetric], threshold: float) -> str | None:
    for original in originals:
        if original.kind != candidate.kind or original.value == 0:
            continue
        ratio = abs(candidate.value - original.value) / original.value
        if 0 < ratio <= threshold:
            return original.raw
    return None


def _parsed(values: list[str]) -> list[ParsedMetric]:
    return [metric for metric in (parse_metric_value(value) for value in values) if metric is not None]


def validate_no_fabricated_metrics(original: str, draft: str) -> MetricValidationResult:
    """Flag numbers in the draft that the original never stated.

    A flagged number within the nudge threshold of an original number of the same
    kind is reported as a nudged variant of that number.
    """
    original = original or ""
    draft = draft or ""
    threshold = config_float("validation.nudge_threshold", 0.15, max_value=1.0)

    original_percents = PERCENT_RE.findall(original)
    original_dollars = DOLLAR_RE.findall(original)
    original_contextual = CONTEXTUAL_RE.findall(original)
    originals = _parsed(original_percents) + _parsed(original_dollars) + _parsed(original_contextual)

    candidates: list[str] = []
    known_percents = set(original_percents)
    for value in PERCENT_RE.findall(draft):
        if value in known_percents:
            continue
        if _YEAR_RANGE[0] <= float(value.rstrip("%")) <= _YEAR_RANGE[1]:
            continue
        candidates.append(value)

    known_dollars = set(original_dollars)
    candidates.extend(value for value in DOLLAR_RE.findall(draft) if value not in known_dollars)

    known_contextual = {value.lower() for value in original_contextual}
    candidates.extend(value for value in CONTEXTUAL_RE.findall(draft) if value.lower() not in known_contextual)

    result = MetricValidationResult()
    general: list[str] = []
    for value in candidates:
        result.flagged_items.append(value)
        parsed = parse_metric_value(value)
        nudged_from = find_nudged_metric(parsed, originals, threshold) if parsed else None
        if nudged_from is not None:
            result.nudged_metrics.append(NudgedMetric(metric=value, original=nudged_from, kind=parsed.kind))
            result.warnings.append(
                f'"{value}" appears to be a modified version of "{nudged_from}" from the original resume.'
            )
        else:
            general.append(value)

    if general:
        result.warnings.append(
            f"Potentially fabricated metrics detected: {', '.join(general)}. "
            "These numbers do not appear in the original resume."
        )

    logger.debug(
        "metric_validation flagged=%s nudged=%s",
        len(result.flagged_items),
        len(result.nudged_metrics),
    )
    return result
