from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class DiffLineSchema(_CamelModel):
    line_number: int = Field(description="Post-change line number (running counter for removals)")
    content: str = Field(description="Line text without the leading diff marker")


class FunctionMatchesSchema(_CamelModel):
    has_new_functions: bool
    matched_lines: list[str] = Field(default_factory=list)
    line_numbers: list[int] = Field(default_factory=list)


class AnalysisResultSchema(_CamelModel):
    """Wire shape of an AnalysisResult for collaborators outside the engine."""

    added_lines: list[DiffLineSchema] = Field(default_factory=list)
    deleted_lines: list[DiffLineSchema] = Field(default_factory=list)
    filename: str | None = None
    language: str = Field(description="Extension-derived language tag or 'unknown'")
    is_test_file: bool
    function_matches: FunctionMatchesSchema
    import_matches: list[str] = Field(default_factory=list)
    test_declaration_matches: list[str] = Field(default_factory=list)
    language_supported: bool = Field(
        description="False when no pattern table exists for the language; "
        "callers should fall back to a general classification"
    )
