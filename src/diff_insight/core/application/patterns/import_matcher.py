from collections.abc import Iterable

from diff_insight.core.application.patterns.line_matcher import match_any
from diff_insight.core.application.patterns.pattern_tables import IMPORT_PATTERNS
from diff_insight.core.domain.analysis import DiffLine, LineMatches


def match_imports(added_lines: Iterable[DiffLine], language: str) -> LineMatches:
    """New import, require or use statements among the added lines."""
    return match_any(added_lines, language, IMPORT_PATTERNS, matcher="imports")
