"""Services layer - business logic and external integrations."""

# Generation services
from meeting_translator.services.generation import (
	ClassifiedError,
	GeminiGenerationService,
	GenerationResult,
	GenerationService,
	classify_error_message,
)
from meeting_translator.services.settings_manager import SettingsManager
from meeting_translator.services.translation_handler import FAILURE_MESSAGES, TranslationRequestHandler

# Text processing services
from meeting_translator.services.text_processing import format_markdown, TranslationWorker, WorkerSignals

__all__ = [
	"ClassifiedError",
	"GeminiGenerationService",
	"GenerationResult",
	"GenerationService",
	"classify_error_message",
	"SettingsManager",
	"FAILURE_MESSAGES",
	"TranslationRequestHandler",
	"format_markdown",
	"TranslationWorker",
	"WorkerSignals",
]
