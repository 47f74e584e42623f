from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)

RESUME_RULES_FILE = "resume-rules.md"
COVER_LETTER_RULES_FILE = "cover-letter-rules.md"

_HTML_COMMENT_RE = re.compile(r"<!--[\s\S]*?-->")
_HEADING_LINE_RE = re.compile(r"^#.*$", re.MULTILINE)


@dataclass(slots=True)
class _CacheEntry:
    value: str | None
    refreshed_at: float


def has_rule_content(content: str) -> bool:
    """True when something besides comments and heading lines is left."""
    stripped = _HTML_COMMENT_RE.sub("", content)
    stripped = _HEADING_LINE_RE.sub("", stripped)
    return bool(stripped.strip())


class RulesCache:
    """Read-through cache for the rule files that feed prompt assembly.

    Each file keeps its own refresh timestamp. A stale entry is re-read from disk
    and replaced wholesale, so concurrent readers see either the old or the new
    value, never a partial one.
    """

    def __init__(
        self,
        rules_dir: str | Path = ".",
        ttl_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._rules_dir = Path(rules_dir)
        self._ttl_seconds = float(ttl_seconds)
        self._clock = clock
        self._entries: dict[str, _CacheEntry] = {}

    @property
    def rules_dir(self) -> Path:
        return self._rules_dir

    def get(self, filename: str) -> str | None:
        now = self._clock()
        entry = self._entries.get(filename)
        if entry is not None and (now - entry.refreshed_at) < self._ttl_seconds:
            return entry.value

        value = self._load(filename)
        self._entries[filename] = _CacheEntry(value=value, refreshed_at=now)
        return value

    def resume_rules(self) -> str | None:
        return self.get(RESUME_RULES_FILE)

    def cover_letter_rules(self) -> str | None:
        return self.get(COVER_LETTER_RULES_FILE)

    def invalidate(self) -> None:
        self._entries = {}

    def _load(self, filename: str) -> str | None:
        path = self._rules_dir / filename
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("rules_file_missing path=%s", path)
            return None
        except OSError as exc:
            logger.warning("rules_file_unreadable path=%s error=%s", path, exc)
            return None

        if not has_rule_content(content):
            logger.debug("rules_file_empty path=%s", path)
            return None
        return content
