from __future__ import annotations

import re

_CONCATENATION_RES = (
    (re.compile(r"\.([A-Z])"), r". \1"),
    (re.compile(r"\)([A-Z])"), r") \1"),
    (re.compile(r":([A-Z])"), r": \1"),
    (re.compile(r";([A-Z])"), r"; \1"),
)
_LINE_BREAKS_RE = re.compile(r"[\r\n\t]+")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")
_SINGLE_QUOTES_RE = re.compile("[\u2018\u2019\u201a\u201b]")
_DOUBLE_QUOTES_RE = re.compile("[\u201c\u201d\u201e\u201f]")
_DASHES_RE = re.compile("[\u2013\u2014]")
_INVISIBLE_RE = re.compile("[\u200b\u200c\u200d\ufeff\u00ad]")


def clean_jd_text(raw_text: str) -> str:
    """Flatten scraped job-description text into one normalized line.

    Repairs sentences glued together by scrapers ("team.You will"), collapses
    whitespace, maps curly quotes and en/em dashes to ASCII and drops
    zero-width characters.
    """
    text = raw_text or ""
    for pattern, replacement in _CONCATENATION_RES:
        text = pattern.sub(replacement, text)

    text = _LINE_BREAKS_RE.sub(" ", text)
    text = _MULTI_SPACE_RE.sub(" ", text)

    text = _SINGLE_QUOTES_RE.sub("'", text)
    text = _DOUBLE_QUOTES_RE.sub('"', text)
    text = _DASHES_RE.sub("-", text)
    text = _INVISIBLE_RE.sub("", text)

    return text.strip()


def count_words(text: str) -> int:
    return len((text or "").split())
