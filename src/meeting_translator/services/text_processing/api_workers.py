"""Async workers for non-blocking API calls using Qt threading."""

import logging

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from meeting_translator.services.translation_handler import TranslationRequestHandler

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    translation_result = Signal(object)  # TranslationResult


class TranslationWorker(QRunnable):
    """
    Worker that runs one translation in a background thread.

    Uses Qt's thread pool for efficient thread management.
    Emits signals when translation completes or fails.
    """

    def __init__(
        self,
        handler: TranslationRequestHandler,
        source_text: str,
        style_label: str,
        api_key: str,
    ):
        super().__init__()
        self.handler = handler
        self.source_text = source_text
        self.style_label = style_label
        self.api_key = api_key
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation in the background thread."""
        try:
            result = self.handler.translate(
                source_text=self.source_text,
                style_label=self.style_label,
                credential=self.api_key,
            )
            self.signals.translation_result.emit(result)
        except Exception as e:
            # Catch any unexpected exceptions not handled by the handler
            logger.exception("Unexpected translation error")
            self.signals.error.emit(f"Unexpected translation error: {str(e)}")
        finally:
            self.signals.finished.emit()
