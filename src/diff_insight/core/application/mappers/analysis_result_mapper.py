from diff_insight.core.application.contracts import (
    AnalysisResultSchema,
    DiffLineSchema,
    FunctionMatchesSchema,
)
from diff_insight.core.domain.analysis import AnalysisResult, DiffLine


class AnalysisResultMapper:
    """Maps the domain AnalysisResult onto its camelCase wire schema."""

    @staticmethod
    def to_schema(result: AnalysisResult) -> AnalysisResultSchema:
        functions = result.function_matches
        return AnalysisResultSchema(
            added_lines=_lines(result.added_lines),
            deleted_lines=_lines(result.deleted_lines),
            filename=result.filename,
            language=result.language,
            is_test_file=result.is_test_file,
            function_matches=FunctionMatchesSchema(
                has_new_functions=functions.has_new_functions,
                matched_lines=list(functions.lines),
                line_numbers=list(functions.line_numbers),
            ),
            import_matches=list(result.import_matches.lines),
            test_declaration_matches=list(result.test_declaration_matches.lines),
            language_supported=result.language_supported,
        )

    @staticmethod
    def to_json(result: AnalysisResult, indent: int | None = None) -> str:
        return AnalysisResultMapper.to_schema(result).model_dump_json(by_alias=True, indent=indent)


def _lines(diff_lines: tuple[DiffLine, ...]) -> list[DiffLineSchema]:
    return [DiffLineSchema(line_number=line.line_number, content=line.content) for line in diff_lines]
