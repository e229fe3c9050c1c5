from diff_insight.core.application.contracts.analysis_result_schema import (
    AnalysisResultSchema,
    DiffLineSchema,
    FunctionMatchesSchema,
)

__all__ = ["AnalysisResultSchema", "DiffLineSchema", "FunctionMatchesSchema"]
