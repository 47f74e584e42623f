from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

SectionKind = Literal["relevant", "noise"]
ExtractionMethod = Literal["dictionary", "pattern", "both"]

RELEVANT_FIELDS = (
    "role_overview",
    "responsibilities",
    "requirements",
    "qualifications",
    "tech_stack",
    "nice_to_have",
)
NOISE_FIELDS = (
    "company_description",
    "benefits",
    "salary",
    "location",
    "eeo",
    "application_process",
    "other_noise",
)


def _dedupe_terms(values: list[str]) -> list[str]:
    output: list[str] = []
    seen: set[str] = set()
    for value in values:
        cleaned = value.strip()
        key = cleaned.lower()
        if not cleaned or key in seen:
            continue
        seen.add(key)
        output.append(cleaned)
    return output


class JDSegment(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: SectionKind
    field: str
    start: int = Field(ge=0)
    content: str

    @field_validator("field")
    @classmethod
    def _validate_field(cls, value: str) -> str:
        if value not in RELEVANT_FIELDS and value not in NOISE_FIELDS:
            raise ValueError(f"unknown section field '{value}'")
        return value


class RelevantSections(BaseModel):
    model_config = ConfigDict(extra="forbid")

    role_overview: str | None = None
    responsibilities: str | None = None
    requirements: str | None = None
    qualifications: str | None = None
    tech_stack: str | None = None
    nice_to_have: str | None = None


class NoiseSections(BaseModel):
    model_config = ConfigDict(extra="forbid")

    company_description: str | None = None
    benefits: str | None = None
    salary: str | None = None
    location: str | None = None
    eeo: str | None = None
    application_process: str | None = None
    other_noise: str | None = None


class JDSections(BaseModel):
    model_config = ConfigDict(extra="forbid")

    relevant: RelevantSections = Field(default_factory=RelevantSections)
    noise: NoiseSections = Field(default_factory=NoiseSections)
    segments: list[JDSegment] = Field(default_factory=list)
    full_relevant_text: str = ""

    def found_fields(self) -> tuple[list[str], list[str]]:
        relevant = [name for name in RELEVANT_FIELDS if getattr(self.relevant, name)]
        noise = [name for name in NOISE_FIELDS if getattr(self.noise, name)]
        return relevant, noise


class ExtractedSkills(BaseModel):
    model_config = ConfigDict(extra="forbid")

    hard_skills: list[str] = Field(default_factory=list)
    soft_skills: list[str] = Field(default_factory=list)

    @field_validator("hard_skills", "soft_skills")
    @classmethod
    def _validate_terms(cls, values: list[str]) -> list[str]:
        return _dedupe_terms(values)


class YearsRequirement(BaseModel):
    model_config = ConfigDict(extra="forbid")

    min_years: int = Field(gt=0, le=30)
    area: str | None = None


class DegreeRequirement(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: str = Field(min_length=1)
    field_of_study: str | None = None


class RequirementMetadata(BaseModel):
    model_config = ConfigDict(extra="forbid")

    years_experience: list[YearsRequirement] = Field(default_factory=list)
    degree_requirement: DegreeRequirement | None = None
    certifications: list[str] = Field(default_factory=list)


class JDDebug(BaseModel):
    model_config = ConfigDict(extra="forbid")

    total_words_in_raw: int = Field(default=0, ge=0)
    total_words_in_relevant: int = Field(default=0, ge=0)
    noise_percentage_filtered: int = Field(default=0, ge=0, le=100)
    extraction_method: dict[str, ExtractionMethod] = Field(default_factory=dict)


class ProcessedJD(BaseModel):
    """A job description analyzed once and reused by every scorer."""

    model_config = ConfigDict(extra="forbid")

    cleaned_text: str = ""
    sections: JDSections = Field(default_factory=JDSections)
    extracted_skills: ExtractedSkills = Field(default_factory=ExtractedSkills)
    metadata: RequirementMetadata = Field(default_factory=RequirementMetadata)
    job_title: str = ""
    debug: JDDebug = Field(default_factory=JDDebug)
    warnings: list[str] = Field(default_factory=list)


class SanitizeStats(BaseModel):
    original_word_count: int = Field(ge=0)
    cleaned_word_count: int = Field(ge=0)
    words_removed: int
    noise_percentage: int
    stripped_items: list[str] = Field(default_factory=list)
    boilerplate_word_count: int = Field(default=0, ge=0)
    relevant_sections_found: list[str] = Field(default_factory=list)
    noise_sections_found: list[str] = Field(default_factory=list)


class SanitizedPosting(BaseModel):
    title: str = ""
    company: str = ""
    auto_title: str | None = None
    auto_company: str | None = None
    description: str = ""
    requirements: list[str] = Field(default_factory=list)
    extracted_skills: ExtractedSkills = Field(default_factory=ExtractedSkills)
    metadata: RequirementMetadata = Field(default_factory=RequirementMetadata)
    stats: SanitizeStats
