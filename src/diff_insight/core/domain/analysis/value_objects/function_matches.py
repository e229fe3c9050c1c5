from dataclasses import dataclass

from diff_insight.core.domain.analysis.value_objects.line_matches import LineMatches


@dataclass(frozen=True, slots=True)
class FunctionMatches(LineMatches):
    """New function or method headers found among the added lines."""

    @property
    def has_new_functions(self) -> bool:
        return bool(self.lines)
