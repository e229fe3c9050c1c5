from diff_insight.core.application.mappers.analysis_result_mapper import AnalysisResultMapper
from diff_insight.core.application.mappers.analysis_summary_formatter import (
    AnalysisSummaryFormatter,
)

__all__ = ["AnalysisResultMapper", "AnalysisSummaryFormatter"]
