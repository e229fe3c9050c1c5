"""Shared table lookup for the line-oriented structural matchers."""

import re
from collections.abc import Iterable, Mapping
from typing import TypeVar

import structlog

from diff_insight.core.domain.analysis import DiffLine, LineMatches

logger = structlog.get_logger()

T = TypeVar("T")


def lookup_patterns(table: Mapping[str, T], language: str, matcher: str) -> T | None:
    """Return the table entry for ``language``, logging when there is none."""
    patterns = table.get(language)
    if patterns is None:
        logger.warning("No patterns defined for language", language=language, matcher=matcher)
    return patterns


def match_any(
    added_lines: Iterable[DiffLine],
    language: str,
    table: Mapping[str, tuple[re.Pattern[str], ...]],
    matcher: str,
) -> LineMatches:
    """Keep every added line that matches at least one of the language's patterns."""
    patterns = lookup_patterns(table, language, matcher)
    if patterns is None:
        return LineMatches.unsupported()
    lines: list[str] = []
    line_numbers: list[int] = []
    for diff_line in added_lines:
        if any(pattern.search(diff_line.content) for pattern in patterns):
            lines.append(diff_line.content.strip())
            line_numbers.append(diff_line.line_number)
    return LineMatches(lines=tuple(lines), line_numbers=tuple(line_numbers))
