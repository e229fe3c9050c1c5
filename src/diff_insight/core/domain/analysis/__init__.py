from diff_insight.core.domain.analysis.analysis_result import AnalysisResult
from diff_insight.core.domain.analysis.value_objects.diff_line import DiffLine
from diff_insight.core.domain.analysis.value_objects.function_matches import FunctionMatches
from diff_insight.core.domain.analysis.value_objects.language_tag import (
    DEFAULT_LANGUAGE_ALIASES,
    UNKNOWN_LANGUAGE,
)
from diff_insight.core.domain.analysis.value_objects.line_matches import LineMatches
from diff_insight.core.domain.analysis.value_objects.line_mode import LineMode

__all__ = [
    "AnalysisResult",
    "DEFAULT_LANGUAGE_ALIASES",
    "DiffLine",
    "FunctionMatches",
    "LineMatches",
    "LineMode",
    "UNKNOWN_LANGUAGE",
]
