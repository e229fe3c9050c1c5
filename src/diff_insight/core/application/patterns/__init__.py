from diff_insight.core.application.patterns.function_matcher import match_functions
from diff_insight.core.application.patterns.import_matcher import match_imports
from diff_insight.core.application.patterns.pattern_tables import FunctionForm
from diff_insight.core.application.patterns.test_declaration_matcher import (
    match_test_declarations,
)

__all__ = [
    "FunctionForm",
    "match_functions",
    "match_imports",
    "match_test_declarations",
]
