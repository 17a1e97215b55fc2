"""Domain layer - Pure entities for style rewriting requests and results."""

from .styles import STYLE_CATALOG, is_valid_style, style_class_name
from .translation_request import TranslationRequest
from .translation_result import ErrorCategory, TranslationResult

__all__ = [
    "STYLE_CATALOG",
    "is_valid_style",
    "style_class_name",
    "TranslationRequest",
    "ErrorCategory",
    "TranslationResult",
]
