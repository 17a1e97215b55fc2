"""
Meeting Notes Translator - Rewrite meeting notes in a playful style.

This package provides a desktop application that:
- Takes free-text meeting notes
- Rewrites them in one of a fixed set of styles via Google Gemini
- Renders the result with light formatting
"""

__version__ = "0.1.0"

# Make key components available at package level
from meeting_translator.core import STYLE_CATALOG, ErrorCategory, TranslationRequest, TranslationResult

__all__ = [
    "STYLE_CATALOG",
    "ErrorCategory",
    "TranslationRequest",
    "TranslationResult",
]
