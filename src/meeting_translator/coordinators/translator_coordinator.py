"""Translator Coordinator - Manages the translate workflow and its loading state."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from meeting_translator.core import ErrorCategory, TranslationResult, is_valid_style
from meeting_translator.services import (
    SettingsManager,
    TranslationRequestHandler,
    TranslationWorker,
    format_markdown,
)

logger = logging.getLogger(__name__)

DISPLAY_MESSAGES = {
    ErrorCategory.VALIDATION: "⚠️ Please enter text and select a style first.",
    ErrorCategory.CONFIGURATION: "❌ API key not found. Please check your .env file.",
    ErrorCategory.AUTH: "❌ Invalid API key. Please check your environment variables.",
    ErrorCategory.QUOTA: "❌ API quota exceeded. Please try again later.",
    ErrorCategory.CONTENT_POLICY: (
        "❌ The response was blocked due to safety settings. Please try a different input."
    ),
}


def describe_failure(result: TranslationResult) -> str:
    """Turn a failed TranslationResult into the text shown to the user."""
    return DISPLAY_MESSAGES.get(result.error, f"❌ An error occurred: {result.message}")


class TranslatorCoordinator(QObject):
    """
    Orchestrates the meeting notes translation workflow.

    Responsibilities:
    - Hold the notes text and selected style (the style selector's state).
    - Gate the translate action behind a loading flag.
    - Run the handler off the UI thread and publish formatted output or errors.

    The loading flag is advisory: it only stops this coordinator from starting
    a second request, the handler itself is reentrant.
    """

    translation_started = Signal()
    translation_completed = Signal(str)  # formatted rich text
    translation_failed = Signal(str)  # display message
    loading_changed = Signal(bool)
    translate_enabled_changed = Signal(bool)

    def __init__(
        self,
        handler: TranslationRequestHandler,
        settings_manager: SettingsManager,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.handler = handler
        # Credential is read once at startup
        self.api_key: Optional[str] = settings_manager.get_gemini_api_key()
        if not self.api_key:
            logger.warning("GEMINI_API_KEY is not set; translations will fail until it is configured")

        self.source_text = ""
        self.selected_style: Optional[str] = None
        self.loading = False
        self.output_text = ""

        self.thread_pool = thread_pool or QThreadPool.globalInstance()

    def set_source_text(self, text: str) -> None:
        """Store the notes the user typed."""
        self.source_text = text
        self.translate_enabled_changed.emit(self.can_translate())

    def select_style(self, label: str) -> None:
        """Select a style from the catalog; unknown labels are ignored."""
        if not is_valid_style(label):
            logger.debug("Ignoring unknown style %r", label)
            return
        self.selected_style = label
        self.translate_enabled_changed.emit(self.can_translate())

    def can_translate(self) -> bool:
        """Return True if the translate action should be enabled."""
        return not self.loading and bool(self.source_text) and self.selected_style is not None

    def request_translation(self) -> None:
        """Start a translation of the current notes in the selected style."""
        if self.loading:
            logger.debug("Translation already in flight, ignoring request")
            return

        self._set_loading(True)
        self.output_text = ""
        self.translation_started.emit()

        worker = TranslationWorker(
            handler=self.handler,
            source_text=self.source_text,
            style_label=self.selected_style,
            api_key=self.api_key,
        )
        worker.signals.translation_result.connect(self._on_translation_result)
        worker.signals.error.connect(self._on_translation_error)

        self.thread_pool.start(worker)

    @Slot(object)
    def _on_translation_result(self, result: TranslationResult) -> None:
        """Handle the handler's result (runs in main thread)."""
        self._set_loading(False)

        if result.is_error:
            self.output_text = describe_failure(result)
            self.translation_failed.emit(self.output_text)
            return

        self.output_text = format_markdown(result.text)
        self.translation_completed.emit(self.output_text)

    @Slot(str)
    def _on_translation_error(self, error: str) -> None:
        """Handle an unexpected worker failure."""
        self._on_translation_result(TranslationResult.failure(ErrorCategory.UNKNOWN, error))

    def _set_loading(self, loading: bool) -> None:
        self.loading = loading
        self.loading_changed.emit(loading)
        self.translate_enabled_changed.emit(self.can_translate())
