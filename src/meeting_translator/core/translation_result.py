"""Translation Result entity - tagged success/failure outcome of a rewrite."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorCategory(Enum):
    """User-facing failure categories."""

    VALIDATION = "ValidationError"
    CONFIGURATION = "ConfigurationError"
    AUTH = "AuthError"
    QUOTA = "QuotaError"
    CONTENT_POLICY = "ContentPolicyError"
    UNKNOWN = "UnknownError"


@dataclass(frozen=True)
class TranslationResult:
    """
    Result of a translation request.

    Exactly one of ``text`` (success) or ``error`` (failure) is meaningful.
    Use the ``success`` and ``failure`` constructors rather than building
    instances directly.
    """

    text: Optional[str] = None
    error: Optional[ErrorCategory] = None
    message: str = ""

    @classmethod
    def success(cls, text: str) -> "TranslationResult":
        return cls(text=text)

    @classmethod
    def failure(cls, category: ErrorCategory, message: str) -> "TranslationResult":
        return cls(error=category, message=message)

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None
