"""Regex helpers shared by the checks, and code snippet extraction."""

import math
import re
from typing import Optional, Union

from .models import Evidence


Pattern = Union[str, "re.Pattern[str]"]

MAX_SNIPPET_LENGTH = 500


def _compile(pattern: Pattern) -> "re.Pattern[str]":
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, re.IGNORECASE)


def literal(text: str) -> "re.Pattern[str]":
    """Case-insensitive pattern matching ``text`` verbatim."""
    return re.compile(re.escape(text), re.IGNORECASE)


def has(pattern: Pattern, text: str) -> bool:
    return _compile(pattern).search(text) is not None


def find_all(pattern: Pattern, text: str) -> list[str]:
    """Return every full match (never the capture groups)."""
    return [m.group(0) for m in _compile(pattern).finditer(text)]


def count(pattern: Pattern, text: str) -> int:
    return sum(1 for _ in _compile(pattern).finditer(text))


def round_half_up(value: float) -> int:
    """Round with halves going up, so 12.5 gives 13 and 52.5 gives 53."""
    return math.floor(value + 0.5)


def percent(part: int, whole: int) -> int:
    return round_half_up(part / whole * 100) if whole else 0


def extract_snippet(html: str, pattern: Pattern, context: int = 2) -> Optional[Evidence]:
    """Locate the first line matching ``pattern`` and cut a snippet around it.

    String patterns are matched case-insensitively. The snippet holds
    ``context`` lines either side of the match, stripped and capped at
    500 characters; the line number is 1-based. Returns None when no
    line matches.
    """
    regex = _compile(pattern)
    lines = html.split("\n")
    for i, line in enumerate(lines):
        if regex.search(line):
            start = max(0, i - context)
            end = min(len(lines), i + context + 1)
            snippet = "\n".join(lines[start:end]).strip()[:MAX_SNIPPET_LENGTH]
            return Evidence(snippet=snippet, line_number=i + 1)
    return None
