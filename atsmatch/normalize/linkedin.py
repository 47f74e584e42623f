from __future__ import annotations

import re
from dataclasses import dataclass, field

from .text import count_words

# Lowercase terms whose presence keeps a paragraph that otherwise looks like HR boilerplate.
TECH_TERMS = (
    "python", "javascript", "typescript", "java", "c++", "c#", "go", "golang",
    "rust", "ruby", "php", "swift", "kotlin", "scala", "sql", "html", "css",
    "react", "angular", "vue", "next.js", "django", "flask", "fastapi",
    "spring", "express", "node.js", "nestjs", "rails", "laravel", ".net",
    "tensorflow", "pytorch", "pandas", "numpy", "spark", "kafka",
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "jenkins",
    "github actions", "datadog", "grafana", "prometheus", "elasticsearch",
    "postgresql", "mysql", "mongodb", "redis", "dynamodb", "snowflake",
    "firebase", "supabase", "cassandra", "neo4j",
    "ci/cd", "agile", "scrum", "microservices", "rest", "graphql", "grpc",
    "machine learning", "deep learning", "nlp", "llm", "etl", "data pipeline",
    "distributed systems", "api design",
)

EXACT_ARTIFACT_LINES = frozenset(
    {
        "see more", "show more", "show less", "report this job", "follow", "save",
        "apply", "easy apply", "share", "message", "jobs", "people", "companies",
        "linkedin", "actively recruiting", "matches your job preferences",
        "repost", "like", "comment", "about the job", "done",
    }
)

_WORK_MODE = r"\((?:Remote|On-site|Hybrid|On\s*site)\)"
ARTIFACT_LINE_PATTERNS = (
    re.compile(r"^\d+\s+applicants?$", re.IGNORECASE),
    re.compile(r"^posted\s+\d+\s+(days?|weeks?|months?|hours?)\s+ago$", re.IGNORECASE),
    re.compile(r"^reposted\s+\d+\s+(days?|weeks?|months?|hours?)\s+ago$", re.IGNORECASE),
    re.compile(r"^\d[\d,]*\s+employees?$", re.IGNORECASE),
    re.compile(r"^\d[\d,]*-\d[\d,]*\s+employees?$", re.IGNORECASE),
    re.compile(r"^job\s*id\s*:?\s*.+$", re.IGNORECASE),
    re.compile(r"^seniority\s+level\s*:?\s*.*", re.IGNORECASE),
    re.compile(r"^employment\s+type\s*:?\s*.*", re.IGNORECASE),
    re.compile(r"^job\s+function\s*:?\s*.*", re.IGNORECASE),
    re.compile(r"^industries?\s*:?\s*.*", re.IGNORECASE),
    re.compile(rf"^[A-Z][a-z]+(?:\s[A-Z][a-z]+)*,\s*[A-Z]{{2}}\s*{_WORK_MODE}$"),
    re.compile(rf"^[A-Z][a-z]+(?:\s[A-Z][a-z]+)*,\s*[A-Z][a-z]+(?:\s[A-Z][a-z]+)*\s*{_WORK_MODE}$"),
    re.compile(r"^know\s+someone\s+who\s+would\s+be\s+a\s+great\s+fit", re.IGNORECASE),
    re.compile(r"^refer\s+a\s+friend", re.IGNORECASE),
    re.compile(r"^\d+\s+(likes?|comments?|reposts?|reactions?)$", re.IGNORECASE),
)
_ARTIFACT_PATTERN_MAX_CHARS = 80

BOILERPLATE_INDICATORS = (
    re.compile(r"equal\s+opportunity\s+employer", re.IGNORECASE),
    re.compile(r"regardless\s+of\s+race", re.IGNORECASE),
    re.compile(r"affirmative\s+action", re.IGNORECASE),
    re.compile(r"protected\s+veteran", re.IGNORECASE),
    re.compile(r"disability\s+status", re.IGNORECASE),
    re.compile(r"gender\s+identity", re.IGNORECASE),
    re.compile(r"sexual\s+orientation", re.IGNORECASE),
    re.compile(r"we\s+are\s+an?\s+(?:equal|inclusive)", re.IGNORECASE),
    re.compile(
        r"accommodation\s+(?:for|during|in)\s+(?:the\s+)?(?:application|interview|hiring)",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:401k|401\(k\)|dental\s+(?:insurance|plan)|vision\s+(?:insurance|plan)"
        r"|health\s+insurance|medical\s+insurance|pto|paid\s+time\s+off|parental\s+leave"
        r"|tuition\s+reimbursement|wellness\s+(?:stipend|program)|life\s+insurance"
        r"|disability\s+insurance|stock\s+options|equity\s+compensation)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\bpay\s+(?:range|scale|transparency)\b", re.IGNORECASE),
    re.compile(r"\bbase\s+(?:salary|pay)\s+range", re.IGNORECASE),
    re.compile(r"\$[\d,]+\s*[-–]\s*\$[\d,]+"),
)

ROLE_KEYWORDS_RE = re.compile(
    r"\b(?:engineer|developer|manager|director|analyst|designer|architect|scientist|lead"
    r"|coordinator|specialist|consultant|administrator|intern|associate|officer"
    r"|vice\s+president|vp|head\s+of|chief)\b",
    re.IGNORECASE,
)

_BLANK_RUN_RE = re.compile(r"\n{3,}")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
_TITLE_CANDIDATE_MAX_CHARS = 100


@dataclass(slots=True)
class SanitizedText:
    text: str
    stripped_items: list[str] = field(default_factory=list)


@dataclass(slots=True)
class BoilerplateResult:
    text: str
    boilerplate_word_count: int = 0


@dataclass(slots=True)
class TitleCompany:
    title: str | None = None
    company: str | None = None


def is_artifact_line(line: str) -> bool:
    trimmed = line.strip()
    if trimmed.lower() in EXACT_ARTIFACT_LINES:
        return True
    if len(trimmed) >= _ARTIFACT_PATTERN_MAX_CHARS:
        return False
    return any(pattern.search(trimmed) for pattern in ARTIFACT_LINE_PATTERNS)


def strip_linkedin_artifacts(raw_text: str) -> SanitizedText:
    """Drop job-board UI lines (buttons, applicant counts, metadata rows) from a paste."""
    kept: list[str] = []
    stripped_items: list[str] = []

    for line in (raw_text or "").split("\n"):
        trimmed = line.strip()
        if not trimmed:
            kept.append("")
            continue
        if is_artifact_line(trimmed):
            stripped_items.append(trimmed)
            continue
        kept.append(line)

    text = _BLANK_RUN_RE.sub("\n\n", "\n".join(kept)).strip()
    return SanitizedText(text=text, stripped_items=stripped_items)


def _mentions_tech_term(paragraph: str) -> bool:
    lower = paragraph.lower()
    return any(term in lower for term in TECH_TERMS)


def strip_hr_boilerplate(text: str) -> BoilerplateResult:
    """Remove EEO, benefits and pay-disclosure paragraphs that carry no technical content."""
    kept: list[str] = []
    boilerplate_words = 0

    for paragraph in _PARAGRAPH_SPLIT_RE.split(text or ""):
        trimmed = paragraph.strip()
        if not trimmed:
            continue
        is_boilerplate = any(pattern.search(trimmed) for pattern in BOILERPLATE_INDICATORS)
        if is_boilerplate and not _mentions_tech_term(trimmed):
            boilerplate_words += count_words(trimmed)
            continue
        kept.append(trimmed)

    return BoilerplateResult(text="\n\n".join(kept), boilerplate_word_count=boilerplate_words)


def extract_title_company(raw_text: str) -> TitleCompany:
    candidates: list[str] = []
    for line in (raw_text or "").split("\n"):
        trimmed = line.strip()
        if not trimmed or len(trimmed) > _TITLE_CANDIDATE_MAX_CHARS:
            continue
        if trimmed.lower() in EXACT_ARTIFACT_LINES:
            continue
        if any(pattern.search(trimmed) for pattern in ARTIFACT_LINE_PATTERNS):
            continue
        if len(trimmed) < 3 or trimmed.isdigit():
            continue
        candidates.append(trimmed)
        if len(candidates) >= 2:
            break

    result = TitleCompany()
    if candidates:
        result.title = candidates[0]
    if len(candidates) >= 2 and not ROLE_KEYWORDS_RE.search(candidates[1]):
        result.company = candidates[1]
    return result
