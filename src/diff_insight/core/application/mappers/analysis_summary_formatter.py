from diff_insight.core.domain.analysis import AnalysisResult


class AnalysisSummaryFormatter:
    """Renders an AnalysisResult as an XML-delimited block for review prompts.

    The block only carries structured facts; wording of the prompt around it
    belongs to the caller.
    """

    @staticmethod
    def format(result: AnalysisResult) -> str:
        sections = [
            _file_section(result),
            _functions_section(result),
            _list_section("new_imports", result.import_matches.lines),
            _list_section("new_test_declarations", result.test_declaration_matches.lines),
            _line_counts_section(result),
        ]
        body = "\n".join(section for section in sections if section)
        return f"<file_analysis>\n{body}\n</file_analysis>"


# ── Section helpers ──────────────────────────────────────────────────


def _file_section(result: AnalysisResult) -> str:
    lines = [
        f"filename: {result.filename or 'unknown'}",
        f"language: {result.language}",
        f"is_test_file: {str(result.is_test_file).lower()}",
    ]
    if result.unsupported_matchers:
        lines.append(f"unsupported_checks: {', '.join(result.unsupported_matchers)}")
    return "\n".join(lines)


def _functions_section(result: AnalysisResult) -> str:
    matches = result.function_matches
    if not matches.has_new_functions:
        return ""
    entries = "\n".join(
        f"  L{number}: {line}" for number, line in zip(matches.line_numbers, matches.lines, strict=True)
    )
    return f"<new_functions>\n{entries}\n</new_functions>"


def _list_section(tag: str, items: tuple[str, ...]) -> str:
    if not items:
        return ""
    entries = "\n".join(f"  {item}" for item in items)
    return f"<{tag}>\n{entries}\n</{tag}>"


def _line_counts_section(result: AnalysisResult) -> str:
    return f"added_lines: {len(result.added_lines)}\ndeleted_lines: {len(result.deleted_lines)}"
