from __future__ import annotations

from diff_insight.core.exceptions.domain_error import DomainError


class ConfigurationError(DomainError):
    """Raised when configuration is invalid or incomplete."""
