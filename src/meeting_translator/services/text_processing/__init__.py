"""Text processing services - output formatting and background workers."""

from meeting_translator.services.text_processing.markup_formatting import format_markdown
from meeting_translator.services.text_processing.api_workers import TranslationWorker, WorkerSignals

__all__ = [
    "format_markdown",
    "TranslationWorker",
    "WorkerSignals",
]
