"""Main entry point for the meeting notes translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from meeting_translator.coordinators import TranslatorCoordinator
from meeting_translator.services import (
    GeminiGenerationService,
    SettingsManager,
    TranslationRequestHandler,
)
from meeting_translator.ui import MainWindow


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings_manager = SettingsManager()
    logging.basicConfig(
        level=settings_manager.get_log_level(),
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Meeting Notes Translator")
    app.setOrganizationName("MeetingTranslator")

    # 3. Initialize Infrastructure
    generation_service = GeminiGenerationService(model_name=settings_manager.get_model_name())
    handler = TranslationRequestHandler(generation_service)

    # 4. Construct UI
    main_window = MainWindow(theme=settings_manager.get_initial_theme())

    # 5. Instantiate Coordinator (Dependency Injection)
    coordinator = TranslatorCoordinator(
        handler=handler,
        settings_manager=settings_manager,
    )

    # 6. Signal Wiring (Connect UI signals to Coordinator slots and back)
    main_window.text_changed.connect(coordinator.set_source_text)
    main_window.style_changed.connect(coordinator.select_style)
    main_window.translate_clicked.connect(coordinator.request_translation)
    coordinator.translate_enabled_changed.connect(main_window.set_translate_enabled)
    coordinator.loading_changed.connect(main_window.set_loading)
    coordinator.translation_completed.connect(main_window.show_output)
    coordinator.translation_failed.connect(main_window.show_error)

    # 7. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
