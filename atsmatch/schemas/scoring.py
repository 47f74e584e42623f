from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

TitleMatchType = Literal["exact", "core", "partial", "elsewhere", "none"]
Score = Annotated[int, Field(ge=0, le=100)]


class ContentCheck(BaseModel):
    label: str
    passed: bool
    detail: str | None = None


class HardSkillTier(BaseModel):
    score: Score = 0
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    skills_gap: list[str] = Field(default_factory=list)


class TitleTier(BaseModel):
    score: Score = 0
    match_type: TitleMatchType = "none"


class ExperienceTier(BaseModel):
    score: Score = 0
    contextual_keywords: int = Field(default=0, ge=0)
    bare_list_keywords: int = Field(default=0, ge=0)
    has_quantified_achievements: bool = False


class SoftSkillTier(BaseModel):
    score: Score = 0
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class StructuralTier(BaseModel):
    score: Score = 0
    issues: list[str] = Field(default_factory=list)
    content_checks: list[ContentCheck] = Field(default_factory=list)


class SupplementaryTier(BaseModel):
    score: Score = 0
    issues: list[str] = Field(default_factory=list)


class TierScores(BaseModel):
    hard_skill_match: HardSkillTier = Field(default_factory=HardSkillTier)
    job_title_alignment: TitleTier = Field(default_factory=TitleTier)
    experience_relevance: ExperienceTier = Field(default_factory=ExperienceTier)
    soft_skill_match: SoftSkillTier = Field(default_factory=SoftSkillTier)
    structural_compliance: StructuralTier = Field(default_factory=StructuralTier)
    supplementary_factors: SupplementaryTier = Field(default_factory=SupplementaryTier)

    def scores(self) -> dict[str, int]:
        return {name: getattr(self, name).score for name in type(self).model_fields}


class KeywordDensity(BaseModel):
    term: str
    density: float = Field(ge=0)
    over_stuffed: bool = False


class JDCoverageDetail(BaseModel):
    overlapping_skills: int = Field(default=0, ge=0)
    total_jd_skills: int = Field(default=0, ge=0)
    percentage: Score = 0


class ScoringDebug(BaseModel):
    hard_skills_from_jd: list[str] = Field(default_factory=list)
    soft_skills_from_jd: list[str] = Field(default_factory=list)
    skills_in_resume: list[str] = Field(default_factory=list)
    overlapping_skills: list[str] = Field(default_factory=list)
    skills_gap: list[str] = Field(default_factory=list)
    noise_percentage_filtered: int = 0
    sections: list[str] = Field(default_factory=list)


class ATSScoreResult(BaseModel):
    total_score: Score = 0
    jd_coverage_score: Score = 0
    jd_coverage_detail: JDCoverageDetail = Field(default_factory=JDCoverageDetail)
    passed_parsing_gate: bool = True
    parsing_fail_reasons: list[str] = Field(default_factory=list)
    tier_scores: TierScores = Field(default_factory=TierScores)
    keyword_density: list[KeywordDensity] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list, max_length=5)
    coverage_percentage: Score = 0
    scoring_debug: ScoringDebug | None = None
