from __future__ import annotations

import re
from dataclasses import dataclass, field

from atsmatch.schemas.resume import DocumentSection, ResumeSection, Zone

# Headings an ATS reliably recognizes; the heading validator flags anything else.
APPROVED_HEADINGS = frozenset(
    {
        "professional summary", "summary", "profile",
        "work experience", "experience", "professional experience", "employment history",
        "education", "academic background",
        "skills", "technical skills", "core competencies", "core skills",
        "projects", "key projects", "selected projects",
        "certifications", "licenses & certifications", "professional certifications",
        "awards", "awards & honors",
        "publications",
        "volunteer experience", "community involvement",
    }
)

# Everything the section splitter treats as a heading.
SECTION_HEADERS = APPROVED_HEADINGS | frozenset(
    {
        "objective", "languages", "interests", "references",
        "career objective",
    }
)

HEADLINE_MAX_LINES = 5

_MARKDOWN_HEADING_RE = re.compile(r"^#{1,3}\s+(.+)$")
_BOLD_LINE_RE = re.compile(r"^\*\*([^*]+)\*\*$")
_ALL_CAPS_RE = re.compile(r"^[A-Z\s&/]+$")
_EMPHASIS_RE = re.compile(r"[*_]")
_INLINE_HEADING_RE = re.compile(r"^\*{0,2}([A-Za-z &]+?)\*{0,2}:\s*\S")
_ALL_CAPS_EXCLUDE = (
    re.compile(r"^[A-Z]{1,5}$"),
    re.compile(r",\s*[A-Z]{2}$"),
    re.compile(r"\d"),
    re.compile(r"^(BS|BA|MS|MA|MBA|PHD|MD|JD|DO|LLC|INC|LTD|CORP|CO)$", re.IGNORECASE),
)

_ZONE_RULES = (
    (re.compile(r"summary|profile|objective"), Zone.SUMMARY),
    (re.compile(r"skills|competenc|technical|language"), Zone.SKILLS),
    (re.compile(r"experience|employment|work"), Zone.EXPERIENCE),
    (re.compile(r"education|academic|certification|award|publication"), Zone.EDUCATION),
)


def is_all_caps_line(line: str) -> bool:
    return line == line.upper() and bool(_ALL_CAPS_RE.match(line))


def _known_heading(text: str) -> bool:
    return text.strip().lower().rstrip(":").strip() in SECTION_HEADERS


def is_section_heading(line: str) -> bool:
    """Markdown, bold, "Heading:" and guarded ALL-CAPS lines naming a known section."""
    trimmed = line.strip()
    if not trimmed:
        return False

    markdown = _MARKDOWN_HEADING_RE.match(trimmed)
    if markdown:
        return _known_heading(_EMPHASIS_RE.sub("", markdown.group(1)))

    bold = _BOLD_LINE_RE.match(trimmed)
    if bold:
        return _known_heading(bold.group(1))

    if _known_heading(trimmed):
        return True

    if is_all_caps_line(trimmed) and 4 <= len(trimmed) < 40:
        if any(pattern.search(trimmed) for pattern in _ALL_CAPS_EXCLUDE):
            return False
        lowered = trimmed.lower()
        return any(header in lowered or lowered in header for header in SECTION_HEADERS)

    return False


def heading_text(line: str) -> str:
    text = line.strip()
    text = re.sub(r"^#{1,3}\s+", "", text)
    text = re.sub(r"^\*\*|\*\*$", "", text)
    text = re.sub(r":$", "", text)
    return text.strip()


def zone_for_heading(name: str) -> Zone:
    lowered = name.lower()
    for pattern, zone in _ZONE_RULES:
        if pattern.search(lowered):
            return zone
    return Zone.EXPERIENCE


def is_inline_heading(line: str) -> bool:
    """Inline labels such as "Experience: Acme Corp, 2020" naming an approved heading."""
    match = _INLINE_HEADING_RE.match(line.strip())
    return bool(match) and match.group(1).strip().lower() in APPROVED_HEADINGS


def heading_lines(text: str) -> list[str]:
    return [line for line in (text or "").split("\n") if is_section_heading(line) or is_inline_heading(line)]


def has_section_heading(text: str) -> bool:
    return bool(heading_lines(text))


@dataclass(slots=True)
class _OpenSection:
    name: str
    zone: Zone
    lines: list[str] = field(default_factory=list)

    def close(self) -> ResumeSection:
        return ResumeSection(name=self.name, content="\n".join(self.lines), zone=self.zone)


def parse_resume_zones(text: str) -> list[ResumeSection]:
    """Split a resume into weighted zones in document order.

    The first non-empty lines before any heading (at most five) form the headline.
    Further pre-heading lines become an unnamed summary. Each heading opens a
    section that collects lines until the next heading.
    """
    headline_lines: list[str] = []
    preamble_lines: list[str] = []
    opened: list[_OpenSection] = []

    for raw_line in (text or "").split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        if is_section_heading(line):
            name = heading_text(line).lower()
            opened.append(_OpenSection(name=name, zone=zone_for_heading(name)))
        elif opened:
            opened[-1].lines.append(line)
        elif len(headline_lines) < HEADLINE_MAX_LINES:
            headline_lines.append(line)
        else:
            preamble_lines.append(line)

    sections = [ResumeSection(name="headline", content="\n".join(headline_lines), zone=Zone.HEADLINE)]
    if preamble_lines:
        sections.append(ResumeSection(name="summary", content="\n".join(preamble_lines), zone=Zone.SUMMARY))
    sections.extend(section.close() for section in opened)
    return sections


def sections_in_zone(sections: list[ResumeSection], zone: Zone) -> list[ResumeSection]:
    return [section for section in sections if section.zone == zone]


def parse_resume_into_sections(text: str) -> list[DocumentSection]:
    """Titled sections for document rendering; lines before the first heading go under "Header"."""
    sections: list[DocumentSection] = []
    header: DocumentSection | None = None

    for raw_line in (text or "").split("\n"):
        if not raw_line.strip():
            continue
        if is_section_heading(raw_line):
            sections.append(DocumentSection(title=heading_text(raw_line)))
        elif sections:
            sections[-1].content.append(raw_line)
        else:
            if header is None:
                header = DocumentSection(title="Header")
            header.content.append(raw_line)

    if header is not None:
        sections.insert(0, header)
    return sections
