"""Detect new function and method headers among added lines."""

from collections.abc import Iterable

from diff_insight.core.application.patterns.line_matcher import lookup_patterns
from diff_insight.core.application.patterns.pattern_tables import (
    CONTROL_FLOW_EXCLUSIONS,
    FUNCTION_PATTERNS,
    FunctionForm,
    FunctionPatterns,
)
from diff_insight.core.domain.analysis import DiffLine, FunctionMatches


def match_functions(added_lines: Iterable[DiffLine], language: str) -> FunctionMatches:
    """Return the added lines that open a function or method definition.

    A line is recorded at most once, against the first form that accepts it
    (declaration, then expression, then method). Control-flow lines are
    rejected before any form is tried.
    """
    forms = lookup_patterns(FUNCTION_PATTERNS, language, matcher="functions")
    if forms is None:
        return FunctionMatches.unsupported()

    lines: list[str] = []
    line_numbers: list[int] = []
    for diff_line in added_lines:
        if match_function_form(diff_line.content, forms) is not None:
            lines.append(diff_line.content.strip())
            line_numbers.append(diff_line.line_number)
    return FunctionMatches(lines=tuple(lines), line_numbers=tuple(line_numbers))


def match_function_form(content: str, forms: FunctionPatterns) -> FunctionForm | None:
    if is_control_flow(content):
        return None
    for form, pattern in forms:
        if pattern.search(content):
            return form
    return None


def is_control_flow(content: str) -> bool:
    return any(pattern.search(content) for pattern in CONTROL_FLOW_EXCLUSIONS)
