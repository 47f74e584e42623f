from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, Field


class Zone(IntEnum):
    HEADLINE = 1
    SUMMARY = 2
    SKILLS = 3
    EXPERIENCE = 4
    EDUCATION = 5


class ResumeSection(BaseModel):
    name: str
    content: str = ""
    zone: Zone


class DocumentSection(BaseModel):
    title: str
    content: list[str] = Field(default_factory=list)
