"""Unit tests — LineMatches / FunctionMatches invariants."""

import dataclasses

import pytest

from diff_insight import AnalysisResult, FunctionMatches, LineMatches


class TestLineMatches:
    def test_rejects_non_parallel_arrays(self) -> None:
        with pytest.raises(ValueError, match="parallel"):
            LineMatches(lines=("import os",), line_numbers=())

    def test_unsupported_variant_is_empty(self) -> None:
        matches = FunctionMatches.unsupported()

        assert isinstance(matches, FunctionMatches)
        assert matches.language_supported is False
        assert matches.has_new_functions is False
        assert not matches

    def test_is_immutable(self) -> None:
        matches = LineMatches(lines=("a",), line_numbers=(1,))

        with pytest.raises(dataclasses.FrozenInstanceError):
            matches.lines = ()  # type: ignore[misc]


class TestAnalysisResult:
    def test_unsupported_matchers_lists_only_missing_tables(self) -> None:
        result = AnalysisResult(
            added_lines=(),
            deleted_lines=(),
            filename="a.py",
            language="py",
            is_test_file=False,
            function_matches=FunctionMatches(),
            import_matches=LineMatches.unsupported(),
            test_declaration_matches=LineMatches(),
        )

        assert result.unsupported_matchers == ("imports",)
        assert result.language_supported is False
