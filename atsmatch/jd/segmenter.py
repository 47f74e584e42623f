from __future__ import annotations

import re
from dataclasses import dataclass

from atsmatch.schemas.jd import JDSections, JDSegment, NoiseSections, RelevantSections, SectionKind


@dataclass(frozen=True, slots=True)
class SectionHeader:
    kind: SectionKind
    field: str
    patterns: tuple[re.Pattern[str], ...]


def _header(kind: SectionKind, field: str, *patterns: str) -> SectionHeader:
    return SectionHeader(
        kind=kind,
        field=field,
        patterns=tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns),
    )


SECTION_HEADERS = (
    _header(
        "relevant",
        "role_overview",
        r"\b(?:role\s+overview|about\s+the\s+role|the\s+role|position\s+summary|job\s+summary"
        r"|what\s+you'?ll\s+do|what\s+you\s+will\s+do|the\s+opportunity)\b",
    ),
    _header(
        "relevant",
        "responsibilities",
        r"\b(?:key\s+)?responsibilities\b",
        r"\b(?:what\s+you'?ll\s+be\s+doing|your\s+responsibilities|duties|day\s+to\s+day"
        r"|in\s+this\s+role\s+you\s+will)\b",
    ),
    _header(
        "relevant",
        "requirements",
        r"\b(?:requirements|minimum\s+qualifications|required\s+qualifications|must\s+have"
        r"|who\s+you\s+are|what\s+you\s+bring|your\s+background)\b",
        r"\b(?:what\s+we'?re\s+looking\s+for|what\s+you'?ll\s+need)\b",
    ),
    _header("relevant", "qualifications", r"\bqualifications\b"),
    _header(
        "relevant",
        "tech_stack",
        r"\b(?:tech\s+stack|technology\s+stack|our\s+stack|tools\s+we\s+use|technologies"
        r"|technical\s+environment)\b",
    ),
    _header(
        "relevant",
        "nice_to_have",
        r"\b(?:nice\s+to\s+have|bonus|preferred\s+qualifications|preferred\s+experience"
        r"|additional\s+qualifications|desired\s+qualifications)\b",
    ),
    _header(
        "noise",
        "company_description",
        r"\b(?:about\s+the\s+company|about\s+us|who\s+we\s+are|our\s+mission|company\s+overview"
        r"|about\s+the\s+team)\b",
    ),
    _header(
        "noise",
        "benefits",
        r"\b(?:benefits|perks|wellbeing|what\s+we\s+offer|total\s+rewards|benefits/perks)\b",
    ),
    _header(
        "noise",
        "salary",
        r"\b(?:salary|pay\s+range|compensation\s+range|base\s+pay|compensation)\b",
    ),
    _header(
        "noise",
        "location",
        r"\b(?:location|where\s+you'?ll\s+work|office\s+locations|working\s+at)\b",
    ),
    _header(
        "noise",
        "eeo",
        r"\b(?:equal\s+opportunity|eeo|diversity|accessibility"
        r"|we\s+want\s+our\s+interview\s+process|accommodation)\b",
    ),
    _header(
        "noise",
        "application_process",
        r"\b(?:how\s+to\s+apply|application\s+process|to\s+apply)\b",
    ),
)

# Headers glued to the next word by scrapers, e.g. "Key ResponsibilitiesDesign ...".
CONCATENATED_HEADERS: tuple[tuple[SectionKind, str, re.Pattern[str]], ...] = (
    ("relevant", "responsibilities", re.compile(r"(?:Key\s+)?Responsibilities(?=[A-Z\d])")),
    ("relevant", "requirements", re.compile(r"Requirements(?=[A-Z\d])")),
    ("relevant", "qualifications", re.compile(r"Qualifications(?=[A-Z\d])")),
    ("relevant", "tech_stack", re.compile(r"Tech\s*Stack(?=[A-Z\d])")),
    ("relevant", "nice_to_have", re.compile(r"Nice\s+to\s+Have(?=[A-Z\d])")),
    ("noise", "company_description", re.compile(r"About\s+(?:the\s+Company|Us)(?=[A-Z\d])")),
    ("noise", "benefits", re.compile(r"Benefits(?=[A-Z\d])")),
)

BENEFITS_KEYWORDS = (
    "401k", "401(k)", "dental", "vacation", "pto", "parental leave",
    "health insurance", "medical insurance", "vision insurance", "life insurance",
    "disability insurance", "wellness", "stipend", "tuition reimbursement",
)
EEO_KEYWORDS = (
    "equal opportunity", "regardless of race", "accommodation",
    "affirmative action", "protected veteran", "disability status",
    "gender identity", "sexual orientation",
)

_HEADER_DEDUPE_DISTANCE = 10
_SALARY_RE = re.compile(r"\$[\d,]+")
_LOCATION_LIST_RE = re.compile(r"\w+\s*\|\s*\w+\s*\|\s*\w+")
_SENTENCE_END_RE = re.compile(r"(?<=[.!?])\s+")


@dataclass(frozen=True, slots=True)
class _HeaderHit:
    kind: SectionKind
    field: str
    index: int


def _add_hit(hits: list[_HeaderHit], kind: SectionKind, field: str, index: int) -> None:
    for hit in hits:
        if hit.field == field and abs(hit.index - index) < _HEADER_DEDUPE_DISTANCE:
            return
    hits.append(_HeaderHit(kind=kind, field=field, index=index))


def detect_section_headers(cleaned_text: str) -> list[_HeaderHit]:
    hits: list[_HeaderHit] = []
    for header in SECTION_HEADERS:
        for pattern in header.patterns:
            match = pattern.search(cleaned_text)
            if match:
                _add_hit(hits, header.kind, header.field, match.start())

    for kind, field, pattern in CONCATENATED_HEADERS:
        for match in pattern.finditer(cleaned_text):
            _add_hit(hits, kind, field, match.start())

    return sorted(hits, key=lambda hit: hit.index)


def is_noise_sentence(sentence: str) -> bool:
    lower = sentence.lower()
    if _SALARY_RE.search(sentence):
        return True
    if _LOCATION_LIST_RE.search(sentence):
        return True
    if any(keyword in lower for keyword in BENEFITS_KEYWORDS):
        return True
    return any(keyword in lower for keyword in EEO_KEYWORDS)


def _build_sections(segments: list[JDSegment], fallback_text: str) -> JDSections:
    relevant: dict[str, str] = {}
    noise: dict[str, str] = {}
    relevant_texts: list[str] = []

    for segment in segments:
        target = relevant if segment.kind == "relevant" else noise
        # A field seen twice keeps both spans.
        previous = target.get(segment.field)
        target[segment.field] = f"{previous} {segment.content}" if previous else segment.content
        if segment.kind == "relevant":
            relevant_texts.append(segment.content)

    full_relevant_text = " ".join(relevant_texts)
    if not full_relevant_text.strip():
        full_relevant_text = fallback_text

    return JDSections(
        relevant=RelevantSections(**relevant),
        noise=NoiseSections(**noise),
        segments=segments,
        full_relevant_text=full_relevant_text,
    )


def heuristic_segmentation(cleaned_text: str) -> JDSections:
    """Sentence-level relevant/noise split for postings without any recognizable header."""
    relevant_sentences: list[str] = []
    noise_sentences: list[str] = []
    for sentence in _SENTENCE_END_RE.split(cleaned_text):
        if not sentence:
            continue
        if is_noise_sentence(sentence):
            noise_sentences.append(sentence)
        else:
            relevant_sentences.append(sentence)

    segments: list[JDSegment] = []
    relevant_text = " ".join(relevant_sentences).strip()
    noise_text = " ".join(noise_sentences).strip()
    if relevant_text:
        segments.append(JDSegment(kind="relevant", field="role_overview", start=0, content=relevant_text))
    if noise_text:
        segments.append(JDSegment(kind="noise", field="other_noise", start=0, content=noise_text))
    return _build_sections(segments, cleaned_text)


def segment_jd_sections(cleaned_text: str) -> JDSections:
    """Split cleaned job-description text into ordered relevant and noise spans.

    Each detected header opens a span that runs to the next header. Text ahead of the
    first header counts as role overview. Without any header the sentence heuristic
    takes over, so segmentation always yields a relevant text.
    """
    hits = detect_section_headers(cleaned_text)
    if not hits:
        return heuristic_segmentation(cleaned_text)

    segments: list[JDSegment] = []
    preamble = cleaned_text[: hits[0].index].strip()
    if preamble:
        segments.append(JDSegment(kind="relevant", field="role_overview", start=0, content=preamble))

    for position, hit in enumerate(hits):
        end = hits[position + 1].index if position + 1 < len(hits) else len(cleaned_text)
        content = cleaned_text[hit.index : end].strip()
        if not content:
            continue
        segments.append(JDSegment(kind=hit.kind, field=hit.field, start=hit.index, content=content))

    return _build_sections(segments, cleaned_text)
