"""Settings Manager - Handles API key and application configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from meeting_translator.services.generation import GeminiGenerationService

THEMES = ("dark", "light")


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from the process environment, seeded from a .env file in
    the project root.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        load_dotenv(dotenv_path=project_root / ".env")

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        key = os.getenv("GEMINI_API_KEY")
        return key.strip() if key and key.strip() else None

    def get_model_name(self) -> str:
        """Get the Gemini model identifier, falling back to the default model."""
        model = os.getenv("GEMINI_MODEL", "").strip()
        return model or GeminiGenerationService.DEFAULT_MODEL

    def get_log_level(self) -> int:
        """Get the logging level named by LOG_LEVEL (INFO if unset or unknown)."""
        name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    def get_initial_theme(self) -> str:
        """Get the theme the window starts with."""
        theme = os.getenv("APP_THEME", "dark").strip().lower()
        return theme if theme in THEMES else "dark"
