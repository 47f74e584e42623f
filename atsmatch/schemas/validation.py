from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

MetricKind = Literal["percent", "dollar", "contextual"]
Severity = Literal["high", "medium"]


class ValidationResult(BaseModel):
    """Shared result shape: what a checker flagged plus readable warnings."""

    flagged_items: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.flagged_items


class NudgedMetric(BaseModel):
    metric: str
    original: str
    kind: MetricKind


class MetricValidationResult(ValidationResult):
    nudged_metrics: list[NudgedMetric] = Field(default_factory=list)

    @property
    def fabricated_metrics(self) -> list[str]:
        return self.flagged_items


class PhraseValidationResult(ValidationResult):
    @property
    def new_phrases(self) -> list[str]:
        return self.flagged_items


class InflatedBullet(BaseModel):
    original: str
    tailored: str
    severity: Severity
    reason: Literal["verb_tier", "amplifier"]
    amplifiers: list[str] = Field(default_factory=list)


class ScopeInflationResult(ValidationResult):
    inflated_bullets: list[InflatedBullet] = Field(default_factory=list)
    unmatched_bullets: list[str] = Field(default_factory=list)


class HeadingValidationResult(ValidationResult):
    @property
    def non_standard_headings(self) -> list[str]:
        return self.flagged_items

    @property
    def suggestions(self) -> list[str]:
        return self.warnings


class EmploymentGap(BaseModel):
    start_date: str
    end_date: str
    months: int = Field(ge=0)


class GapDetectionResult(ValidationResult):
    gaps: list[EmploymentGap] = Field(default_factory=list)

    @property
    def recommendations(self) -> list[str]:
        return self.warnings


class KeywordValidationResult(ValidationResult):
    @property
    def flagged_skills(self) -> list[str]:
        return self.flagged_items


class FeedbackVerification(BaseModel):
    feedback: str
    applied: bool
    matched_terms: list[str] = Field(default_factory=list)
    newly_added_terms: list[str] = Field(default_factory=list)


class ValidationReport(BaseModel):
    metrics: MetricValidationResult = Field(default_factory=MetricValidationResult)
    phrases: PhraseValidationResult = Field(default_factory=PhraseValidationResult)
    scope: ScopeInflationResult = Field(default_factory=ScopeInflationResult)
    headings: HeadingValidationResult = Field(default_factory=HeadingValidationResult)
    gaps: GapDetectionResult = Field(default_factory=GapDetectionResult)
    keywords: KeywordValidationResult = Field(default_factory=KeywordValidationResult)
    warnings: list[str] = Field(default_factory=list)
