"""Language-aware classification of unified-diff patches."""

from diff_insight.core.application.batch_analyzer import (
    BatchAnalysisReport,
    BatchAnalyzer,
    FilePatch,
    SkippedFile,
)
from diff_insight.core.application.diff_analyzer import DiffAnalyzer, analyze
from diff_insight.core.domain.analysis import (
    AnalysisResult,
    DiffLine,
    FunctionMatches,
    LineMatches,
    LineMode,
)
from diff_insight.core.exceptions import DomainError, InvalidPatchError

__all__ = [
    "AnalysisResult",
    "BatchAnalysisReport",
    "BatchAnalyzer",
    "DiffAnalyzer",
    "DiffLine",
    "DomainError",
    "FilePatch",
    "FunctionMatches",
    "InvalidPatchError",
    "LineMatches",
    "LineMode",
    "SkippedFile",
    "analyze",
]
