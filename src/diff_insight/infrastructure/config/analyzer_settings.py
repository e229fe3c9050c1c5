import json
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class AnalyzerSettings(BaseSettings):
    """Process-level settings for the diff analysis engine."""

    # ── Logging ──
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="", alias="LOG_FORMAT")
    app_env: str = Field(default="local", alias="APP_ENV")

    # ── Language detection ──
    language_aliases: Annotated[dict[str, str], NoDecode] = Field(
        default_factory=dict, alias="DIFF_LANGUAGE_ALIASES"
    )

    @field_validator("language_aliases", mode="before")
    @classmethod
    def parse_json_mapping(cls, value: object) -> dict[str, str]:
        """Parse a JSON object string from .env into a dict of extension -> language."""
        if isinstance(value, str):
            if not value.strip():
                return {}
            parsed = json.loads(value)
            if not isinstance(parsed, dict):
                raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}")
            return parsed
        if isinstance(value, dict):
            return value
        return {}

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level '{value}'")
        return level

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
