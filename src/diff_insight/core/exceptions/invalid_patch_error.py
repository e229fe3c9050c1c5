from __future__ import annotations

from diff_insight.core.exceptions.domain_error import DomainError


class InvalidPatchError(DomainError):
    """Raised when the patch argument is absent or not text."""

    def __init__(self, received: object) -> None:
        self.received_type = type(received).__name__
        super().__init__(f"Patch must be a str, got {self.received_type}")
