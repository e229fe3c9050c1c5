"""Analyze every changed file of a change set without letting one bad patch stop the rest."""

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from diff_insight.core.application.diff import boundary_target_path, split_file_patches
from diff_insight.core.application.diff_analyzer import DiffAnalyzer
from diff_insight.core.domain.analysis import AnalysisResult
from diff_insight.core.exceptions import DomainError

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class FilePatch:
    """One changed file as listed by a code-hosting API.

    ``patch`` is None for binary or oversized files, which hosting APIs list
    without a diff body.
    """

    filename: str
    patch: str | None
    status: str = "modified"


@dataclass(frozen=True, slots=True)
class SkippedFile:
    filename: str
    reason: str
    status: str = "modified"


@dataclass(frozen=True)
class BatchAnalysisReport:
    results: tuple[AnalysisResult, ...] = field(default_factory=tuple)
    skipped: tuple[SkippedFile, ...] = field(default_factory=tuple)

    @property
    def files_with_new_functions(self) -> tuple[str, ...]:
        return tuple(
            result.filename or "<unknown>"
            for result in self.results
            if result.function_matches.has_new_functions
        )

    @property
    def test_files(self) -> tuple[str, ...]:
        return tuple(result.filename or "<unknown>" for result in self.results if result.is_test_file)


class BatchAnalyzer:
    """Runs a shared DiffAnalyzer over many files, isolating per-file failures."""

    def __init__(self, analyzer: DiffAnalyzer) -> None:
        self._analyzer = analyzer

    def analyze_files(self, files: Iterable[FilePatch]) -> BatchAnalysisReport:
        results: list[AnalysisResult] = []
        skipped: list[SkippedFile] = []
        for file_patch in files:
            outcome = self._analyze_one(file_patch)
            if isinstance(outcome, SkippedFile):
                skipped.append(outcome)
            else:
                results.append(outcome)
        logger.info(
            "Batch analysis finished",
            analyzed=len(results),
            skipped=len(skipped),
        )
        return BatchAnalysisReport(results=tuple(results), skipped=tuple(skipped))

    def analyze_diff(self, diff_text: str) -> BatchAnalysisReport:
        """Split a multi-file ``git diff`` and analyze each file patch."""
        files = [
            FilePatch(filename=boundary_target_path(patch) or f"<patch {index}>", patch=patch)
            for index, patch in enumerate(split_file_patches(diff_text), start=1)
        ]
        return self.analyze_files(files)

    def _analyze_one(self, file_patch: FilePatch) -> AnalysisResult | SkippedFile:
        filename, status = file_patch.filename, file_patch.status
        try:
            return self._analyzer.analyze(file_patch.patch, filename=filename)
        except DomainError as exc:
            logger.warning(
                "Skipping unparseable diff",
                file_path=filename,
                file_status=status,
                error_details=str(exc),
            )
            return SkippedFile(filename=filename, reason=str(exc), status=status)
        except Exception as exc:
            logger.exception(
                "Unexpected failure analyzing diff", file_path=filename, file_status=status
            )
            return SkippedFile(
                filename=filename, reason=f"{type(exc).__name__}: {exc}", status=status
            )
