"""Generation services - abstract collaborator interface and Gemini implementation."""

from meeting_translator.services.generation.generation_service import (
    ClassifiedError,
    GenerationResult,
    GenerationService,
    classify_error_message,
)
from meeting_translator.services.generation.gemini_generation_service import GeminiGenerationService

__all__ = [
    "ClassifiedError",
    "GenerationResult",
    "GenerationService",
    "classify_error_message",
    "GeminiGenerationService",
]
