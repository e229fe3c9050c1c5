from diff_insight.core.exceptions.configuration_error import ConfigurationError
from diff_insight.core.exceptions.domain_error import DomainError
from diff_insight.core.exceptions.invalid_patch_error import InvalidPatchError

__all__ = [
    "ConfigurationError",
    "DomainError",
    "InvalidPatchError",
]
