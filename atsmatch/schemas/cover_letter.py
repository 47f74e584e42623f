from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

Score = Annotated[int, Field(ge=0, le=100)]


class KeywordReinforcementTier(BaseModel):
    score: Score = 0
    found: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class PainPointTier(BaseModel):
    score: Score = 0
    addressed: list[str] = Field(default_factory=list)
    missed: list[str] = Field(default_factory=list)


class LengthTier(BaseModel):
    score: Score = 0
    word_count: int = Field(default=0, ge=0)


class DuplicationTier(BaseModel):
    score: Score = 0
    duplicated_sentences: list[str] = Field(default_factory=list)


class LetterStructureTier(BaseModel):
    score: Score = 0
    paragraph_count: int = Field(default=0, ge=0)
    has_bullets: bool = False


class VoiceTier(BaseModel):
    score: Score = 0
    flagged_phrases: list[str] = Field(default_factory=list)


class CoverLetterTierScores(BaseModel):
    keyword_reinforcement: KeywordReinforcementTier = Field(default_factory=KeywordReinforcementTier)
    pain_point_coverage: PainPointTier = Field(default_factory=PainPointTier)
    length_compliance: LengthTier = Field(default_factory=LengthTier)
    no_duplication: DuplicationTier = Field(default_factory=DuplicationTier)
    structural_compliance: LetterStructureTier = Field(default_factory=LetterStructureTier)
    authentic_voice: VoiceTier = Field(default_factory=VoiceTier)


class CoverLetterScoreResult(BaseModel):
    total_score: Score = 0
    tier_scores: CoverLetterTierScores = Field(default_factory=CoverLetterTierScores)
    recommendations: list[str] = Field(default_factory=list)
