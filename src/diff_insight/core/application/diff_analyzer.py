"""Orchestrator composing the diff components into one AnalysisResult per file."""

from collections.abc import Mapping
from types import MappingProxyType

import structlog

from diff_insight.core.application.diff import (
    extract_target_path,
    is_test_file,
    language_from_path,
    resolve_language,
    track_lines,
)
from diff_insight.core.application.patterns import (
    match_functions,
    match_imports,
    match_test_declarations,
)
from diff_insight.core.domain.analysis import DEFAULT_LANGUAGE_ALIASES, AnalysisResult, LineMode
from diff_insight.core.exceptions import InvalidPatchError

logger = structlog.get_logger()


class DiffAnalyzer:
    """Turns the unified-diff text of one file into an immutable AnalysisResult.

    Holds only read-only configuration (extension aliases), so a single
    instance can be built at startup and shared across threads and tasks.
    """

    def __init__(self, language_aliases: Mapping[str, str] | None = None) -> None:
        aliases = dict(DEFAULT_LANGUAGE_ALIASES)
        if language_aliases:
            aliases.update({key.lower(): value.lower() for key, value in language_aliases.items()})
        self._language_aliases = MappingProxyType(aliases)

    @property
    def language_aliases(self) -> Mapping[str, str]:
        return self._language_aliases

    def analyze(self, patch: str, filename: str | None = None) -> AnalysisResult:
        """Classify ``patch``.

        Malformed or unrecognised diff lines degrade the result instead of
        failing it; only a missing or non-text patch raises InvalidPatchError.
        ``filename`` identifies the file when the patch has no ``+++`` header,
        as with per-file patches returned by code-hosting APIs.
        """
        if not isinstance(patch, str):
            raise InvalidPatchError(patch)

        added_lines = track_lines(patch, LineMode.ADDED)
        deleted_lines = track_lines(patch, LineMode.REMOVED)
        target_path = extract_target_path(patch) or filename or None
        language = language_from_path(target_path)
        pattern_key = resolve_language(language, self._language_aliases)

        result = AnalysisResult(
            added_lines=added_lines,
            deleted_lines=deleted_lines,
            filename=target_path,
            language=language,
            is_test_file=is_test_file(target_path),
            function_matches=match_functions(added_lines, pattern_key),
            import_matches=match_imports(added_lines, pattern_key),
            test_declaration_matches=match_test_declarations(added_lines, pattern_key),
        )
        logger.debug(
            "Diff analyzed",
            file_path=target_path,
            language=language,
            added=len(added_lines),
            deleted=len(deleted_lines),
            new_functions=len(result.function_matches),
        )
        return result


_DEFAULT_ANALYZER = DiffAnalyzer()


def analyze(patch: str, filename: str | None = None) -> AnalysisResult:
    """Analyze ``patch`` with the built-in language aliases."""
    return _DEFAULT_ANALYZER.analyze(patch, filename=filename)
