"""Generation Service - abstract text generation collaborator and its result types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from meeting_translator.core import ErrorCategory

# Ordered: the first rule whose marker appears in the message wins.
_MESSAGE_RULES = (
    (ErrorCategory.AUTH, ("API_KEY_INVALID", "API key")),
    (ErrorCategory.QUOTA, ("quota", "limit")),
    (ErrorCategory.CONTENT_POLICY, ("SAFETY", "blocked")),
)


def classify_error_message(message: str) -> ErrorCategory:
    """
    Best-effort classification of an upstream error message.

    Matching is a case-sensitive substring search, so it may misclassify if
    the upstream wording changes.
    """
    for category, markers in _MESSAGE_RULES:
        if any(marker in message for marker in markers):
            return category
    return ErrorCategory.UNKNOWN


@dataclass(frozen=True)
class ClassifiedError:
    """An upstream failure with its category already decided."""

    category: ErrorCategory
    message: str


@dataclass(frozen=True)
class GenerationResult:
    """Result of a single text generation call."""

    text: Optional[str]
    model: str
    error: Optional[ClassifiedError] = None

    @property
    def is_error(self) -> bool:
        """True if generation failed."""
        return self.error is not None


class GenerationService(ABC):
    """
    Abstract collaborator that turns a prompt into generated text.

    Implementations (e.g., GeminiGenerationService) handle API calls and
    classify their own failures where the raw upstream error is known.
    """

    @abstractmethod
    def generate_text(self, prompt: str, api_key: str) -> GenerationResult:
        """
        Generate text for a prompt.

        Args:
            prompt: Instruction to send to the model.
            api_key: Model provider API key for authentication.

        Returns:
            GenerationResult with text or a classified error.
        """
        pass
