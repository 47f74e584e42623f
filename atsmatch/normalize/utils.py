from __future__ import annotations

import re

_BULLET_LINE_RE = re.compile(r"^[-•*]\s+.+$", re.MULTILINE)
_BULLET_PREFIX_RE = re.compile(r"^[-•*]\s*")
_EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_PHONE_RE = re.compile(r"\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
_LINKEDIN_RE = re.compile(r"linkedin\.com", re.IGNORECASE)
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def extract_bullets(text: str) -> list[str]:
    return _BULLET_LINE_RE.findall(text or "")


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PREFIX_RE.sub("", line).strip()


def has_email(text: str) -> bool:
    return bool(_EMAIL_RE.search(text or ""))


def has_phone(text: str) -> bool:
    return bool(_PHONE_RE.search(text or ""))


def has_linkedin(text: str) -> bool:
    return bool(_LINKEDIN_RE.search(text or ""))


def contact_channel_count(text: str) -> int:
    return sum((has_email(text), has_phone(text), has_linkedin(text)))


def split_paragraphs(text: str) -> list[str]:
    return [part for part in _PARAGRAPH_SPLIT_RE.split(text or "") if part.strip()]


def split_sentences(text: str, min_length: int = 0) -> list[str]:
    sentences = (part.strip() for part in _SENTENCE_SPLIT_RE.split(text or ""))
    return [sentence for sentence in sentences if len(sentence) > min_length]
