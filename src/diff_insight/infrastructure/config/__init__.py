from diff_insight.infrastructure.config.analyzer_settings import AnalyzerSettings
from diff_insight.infrastructure.config.container import (
    build_batch_analyzer,
    build_diff_analyzer,
    load_settings,
)

__all__ = ["AnalyzerSettings", "build_batch_analyzer", "build_diff_analyzer", "load_settings"]
