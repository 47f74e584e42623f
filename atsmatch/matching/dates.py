from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_MONTH_INDEX = {name.lower(): index + 1 for index, name in enumerate(MONTH_NAMES)}
_MONTH_INDEX.update({abbr.lower(): index + 1 for index, abbr in enumerate(MONTH_ABBREVIATIONS)})

_FULL = "|".join(MONTH_NAMES)
_ABBR = "|".join(MONTH_ABBREVIATIONS)

_DATE_RE = re.compile(
    rf"(?P<full>{_FULL})\s+(?P<full_year>\d{{4}})"
    rf"|(?P<abbr>{_ABBR})\s+(?P<abbr_year>\d{{4}})"
    r"|(?P<num_month>\d{1,2})/(?P<num_year>\d{4})"
)
_RANGE_POINT = rf"(?:(?:{_FULL}|{_ABBR})\s+\d{{4}}|\d{{1,2}}/\d{{4}})"
_RANGE_RE = re.compile(
    rf"(?P<start>{_RANGE_POINT})\s*[–—-]\s*(?P<end>{_RANGE_POINT}|Present|Current)",
    re.IGNORECASE,
)
_MONTH_YEAR_RE = re.compile(rf"^({_FULL}|{_ABBR})\s+(\d{{4}})$", re.IGNORECASE)
_NUMERIC_RE = re.compile(r"^(\d{1,2})/(\d{4})$")
_YEAR_RE = re.compile(r"20\d{2}")

FORMAT_MONTH_NAME = "month_name"
FORMAT_MONTH_ABBREVIATION = "month_abbreviation"
FORMAT_NUMERIC = "numeric"
FORMAT_AMBIGUOUS = "ambiguous"


@dataclass(frozen=True, slots=True)
class DateMention:
    text: str
    month: int
    year: int
    format: str
    position: int


@dataclass(frozen=True, slots=True)
class DateRange:
    raw: str
    start: date
    end: date
    is_current: bool
    position: int


def extract_dates(text: str) -> list[DateMention]:
    """Month/year mentions in document order.

    "May" is spelled the same in both month styles, so it is tagged ambiguous
    and ignored when judging format consistency.
    """
    mentions: list[DateMention] = []
    for match in _DATE_RE.finditer(text or ""):
        if match.group("full"):
            word = match.group("full")
            month = _MONTH_INDEX[word.lower()]
            year = int(match.group("full_year"))
            fmt = FORMAT_AMBIGUOUS if word == "May" else FORMAT_MONTH_NAME
        elif match.group("abbr"):
            word = match.group("abbr")
            month = _MONTH_INDEX[word.lower()]
            year = int(match.group("abbr_year"))
            fmt = FORMAT_MONTH_ABBREVIATION
        else:
            month = int(match.group("num_month"))
            year = int(match.group("num_year"))
            fmt = FORMAT_NUMERIC
            if not 1 <= month <= 12:
                continue
        mentions.append(
            DateMention(text=match.group(0), month=month, year=year, format=fmt, position=match.start())
        )
    return mentions


def date_formats_used(text: str) -> set[str]:
    return {mention.format for mention in extract_dates(text) if mention.format != FORMAT_AMBIGUOUS}


def extract_years(text: str) -> list[int]:
    return [int(value) for value in _YEAR_RE.findall(text or "")]


def parse_date_point(value: str, today: date | None = None) -> date | None:
    stripped = value.strip()
    lowered = stripped.lower()
    if lowered in {"present", "current"}:
        return today or date.today()

    month_year = _MONTH_YEAR_RE.match(stripped)
    if month_year:
        return date(int(month_year.group(2)), _MONTH_INDEX[month_year.group(1).lower()], 1)

    numeric = _NUMERIC_RE.match(stripped)
    if numeric:
        month = int(numeric.group(1))
        if 1 <= month <= 12:
            return date(int(numeric.group(2)), month, 1)
    return None


def extract_date_ranges(text: str, today: date | None = None) -> list[DateRange]:
    """Employment-style ranges such as "Jan 2020 - Present", unparseable ones skipped."""
    reference = today or date.today()
    ranges: list[DateRange] = []
    for match in _RANGE_RE.finditer(text or ""):
        start = parse_date_point(match.group("start"), reference)
        end = parse_date_point(match.group("end"), reference)
        if start is None or end is None:
            continue
        ranges.append(
            DateRange(
                raw=match.group(0),
                start=start,
                end=end,
                is_current=match.group("end").lower() in {"present", "current"},
                position=match.start(),
            )
        )
    return ranges


def format_month_year(value: date) -> str:
    return f"{MONTH_NAMES[value.month - 1]} {value.year}"
