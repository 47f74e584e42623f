from __future__ import annotations

import re

from atsmatch.matching import TermMatcher, get_default_matcher
from atsmatch.schemas.validation import PhraseValidationResult

KNOWN_TECHNICAL_PHRASES = frozenset(
    {
        "machine learning", "deep learning", "data pipeline", "data engineering",
        "project management", "product management", "system design", "cloud computing",
        "distributed systems", "microservices architecture", "test driven",
        "continuous integration", "continuous deployment", "data science",
        "full stack", "front end", "back end", "web development",
        "mobile development", "devops engineering", "site reliability",
        "software engineering", "data analytics", "business intelligence",
        "user experience", "user interface", "quality assurance",
        "agile methodology", "scrum master", "technical lead",
        "solutions architect", "cloud infrastructure", "data warehouse",
        "natural language processing", "computer vision", "neural network",
        "version control", "code review", "pull request",
        "load balancing", "auto scaling", "event driven",
        "object oriented", "functional programming", "design patterns",
        "infrastructure as code", "container orchestration", "service mesh",
        "blue green deployment", "canary deployment", "rolling deployment",
        "configuration management", "secrets management", "log aggregation",
        "monitoring and alerting", "incident response", "disaster recovery",
        "high availability", "fault tolerance", "chaos engineering",
        "penetration testing", "threat modeling", "security audit",
        "identity management", "access control", "zero trust",
        "data encryption", "vulnerability assessment", "compliance framework",
        "sprint planning", "backlog grooming", "product roadmap",
        "stakeholder management", "risk management", "change management",
        "requirements gathering", "technical writing", "release management",
        "kanban board", "story points", "velocity tracking",
        "feature engineering", "model training", "model deployment",
        "a/b testing", "data modeling", "data governance",
        "real time analytics", "stream processing", "batch processing",
        "data lake", "data mesh", "data catalog",
        "recommendation engine", "anomaly detection", "sentiment analysis",
        "domain driven design", "service oriented architecture", "api gateway",
        "message queue", "event sourcing", "cqrs pattern",
        "clean architecture", "hexagonal architecture", "serverless architecture",
        "edge computing", "content delivery", "reverse proxy",
        "unit testing", "integration testing", "end to end testing",
        "test automation", "performance testing", "load testing",
        "regression testing", "acceptance testing", "behavior driven",
        "cloud native", "cloud migration", "multi cloud",
        "hybrid cloud", "cloud security", "cost optimization",
        "cross functional", "digital transformation", "process automation",
        "strategic planning", "vendor management", "budget management",
        "revenue growth", "cost reduction", "customer success",
    }
)

_PUNCTUATION_RE = re.compile(r"[^\w\s]")


def _words(text: str) -> list[str]:
    return [word for word in _PUNCTUATION_RE.sub(" ", (text or "").lower()).split() if len(word) > 1]


def generate_ngrams(text: str, n: int) -> list[str]:
    """Distinct n-grams in first-seen order."""
    words = _words(text)
    seen: dict[str, None] = {}
    for index in range(len(words) - n + 1):
        seen.setdefault(" ".join(words[index : index + n]), None)
    return list(seen)


def validate_no_new_phrases(
    original: str,
    draft: str,
    matcher: TermMatcher | None = None,
) -> PhraseValidationResult:
    matcher = matcher or get_default_matcher()
    result = PhraseValidationResult()

    for n in (2, 3):
        original_ngrams = set(generate_ngrams(original, n))
        for phrase in generate_ngrams(draft, n):
            if phrase not in KNOWN_TECHNICAL_PHRASES or phrase in original_ngrams:
                continue
            if not matcher.term_exists(phrase, original or ""):
                result.flagged_items.append(phrase)

    if result.flagged_items:
        result.warnings.append(
            f"New multi-word technical terms detected: {', '.join(result.flagged_items)}. "
            "These phrases do not appear in the original resume."
        )
    return result
