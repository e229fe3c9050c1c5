from collections.abc import Iterable

from diff_insight.core.application.patterns.line_matcher import match_any
from diff_insight.core.application.patterns.pattern_tables import TEST_DECLARATION_PATTERNS
from diff_insight.core.domain.analysis import DiffLine, LineMatches


def match_test_declarations(added_lines: Iterable[DiffLine], language: str) -> LineMatches:
    """New test cases or suites (``describe(``, ``def test_``, ``@Test`` ...)."""
    return match_any(added_lines, language, TEST_DECLARATION_PATTERNS, matcher="test_declarations")
