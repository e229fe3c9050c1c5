"""Composition root: builds the shared analyzers from settings."""

from pydantic import ValidationError

from diff_insight.core.application.batch_analyzer import BatchAnalyzer
from diff_insight.core.application.diff_analyzer import DiffAnalyzer
from diff_insight.core.exceptions import ConfigurationError
from diff_insight.infrastructure.config.analyzer_settings import AnalyzerSettings
from diff_insight.infrastructure.observability.logging_setup import configure_logging, get_logger


def load_settings() -> AnalyzerSettings:
    try:
        return AnalyzerSettings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid analyzer settings: {exc}") from exc


def build_diff_analyzer(settings: AnalyzerSettings | None = None) -> DiffAnalyzer:
    """Configure logging once and return a DiffAnalyzer wired with configured aliases."""
    settings = settings or load_settings()
    configure_logging(
        level=settings.log_level,
        log_format=settings.log_format,
        app_env=settings.app_env,
    )
    analyzer = DiffAnalyzer(language_aliases=settings.language_aliases)
    get_logger("container").info(
        "Diff analyzer ready",
        custom_aliases=sorted(settings.language_aliases),
    )
    return analyzer


def build_batch_analyzer(settings: AnalyzerSettings | None = None) -> BatchAnalyzer:
    return BatchAnalyzer(build_diff_analyzer(settings))
