"""Translation Request Handler - validates input, calls the generator, classifies failures."""

import logging
from typing import Optional

from meeting_translator.core import (
    ErrorCategory,
    TranslationRequest,
    TranslationResult,
    is_valid_style,
)
from meeting_translator.services.generation import GenerationService, classify_error_message

logger = logging.getLogger(__name__)

FAILURE_MESSAGES = {
    ErrorCategory.VALIDATION: "text and style required",
    ErrorCategory.CONFIGURATION: "missing credential",
    ErrorCategory.AUTH: "invalid credential",
    ErrorCategory.QUOTA: "quota exceeded",
    ErrorCategory.CONTENT_POLICY: "response blocked by safety policy",
}


class TranslationRequestHandler:
    """
    Rewrites meeting notes in a chosen style.

    Stateless: every call builds its own request and result, so the handler
    may be shared between workers.
    """

    def __init__(self, generation_service: GenerationService):
        self.generation_service = generation_service

    def translate(
        self,
        source_text: Optional[str],
        style_label: Optional[str],
        credential: Optional[str],
    ) -> TranslationResult:
        """
        Rewrite ``source_text`` in the style named by ``style_label``.

        Input and credential problems are reported without calling the
        generation service. Upstream failures are logged, then mapped onto
        an ErrorCategory.

        Returns:
            TranslationResult with the raw generated text or a failure.
        """
        if not source_text or not source_text.strip() or not is_valid_style(style_label):
            return self._failure(ErrorCategory.VALIDATION)

        if not credential or not credential.strip():
            return self._failure(ErrorCategory.CONFIGURATION)

        request = TranslationRequest(source_text=source_text, style_label=style_label)

        try:
            result = self.generation_service.generate_text(
                prompt=request.build_prompt(),
                api_key=credential,
            )
        except Exception as e:
            logger.error("Generation failed: %s", e, exc_info=True)
            return self._failure(classify_error_message(str(e)), str(e))

        if result.is_error:
            logger.error("Generation failed (%s): %s", result.error.category.value, result.error.message)
            return self._failure(result.error.category, result.error.message)

        return TranslationResult.success(result.text)

    @staticmethod
    def _failure(category: ErrorCategory, raw_message: str = "") -> TranslationResult:
        """Build a failure, keeping the raw message only for uncategorised errors."""
        message = FAILURE_MESSAGES.get(category, raw_message)
        return TranslationResult.failure(category, message)
