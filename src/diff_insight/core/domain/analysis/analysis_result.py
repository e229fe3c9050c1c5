from dataclasses import dataclass

from diff_insight.core.domain.analysis.value_objects.diff_line import DiffLine
from diff_insight.core.domain.analysis.value_objects.function_matches import FunctionMatches
from diff_insight.core.domain.analysis.value_objects.line_matches import LineMatches


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Immutable classification of a single file patch.

    Everything a reviewer needs to reason about the change without re-reading
    the raw patch: which lines moved, what the file is, and which structural
    signals (new functions, imports, test declarations) the added lines carry.
    """

    added_lines: tuple[DiffLine, ...]
    deleted_lines: tuple[DiffLine, ...]
    filename: str | None
    language: str
    is_test_file: bool
    function_matches: FunctionMatches
    import_matches: LineMatches
    test_declaration_matches: LineMatches

    @property
    def language_supported(self) -> bool:
        return not self.unsupported_matchers

    @property
    def unsupported_matchers(self) -> tuple[str, ...]:
        """Names of the matchers that had no pattern table for this language."""
        checks = (
            ("functions", self.function_matches),
            ("imports", self.import_matches),
            ("test_declarations", self.test_declaration_matches),
        )
        return tuple(name for name, matches in checks if not matches.language_supported)
