"""Gemini Generation Service - Implements text generation via Google Gemini API."""

import logging
from typing import Callable, Dict, Optional

import google.genai as genai
from google.genai import errors

from meeting_translator.core import ErrorCategory
from meeting_translator.services.generation.generation_service import (
    ClassifiedError,
    GenerationResult,
    GenerationService,
    classify_error_message,
)

logger = logging.getLogger(__name__)

_SAFETY_FINISH_REASONS = {"SAFETY", "PROHIBITED_CONTENT", "BLOCKLIST", "SPII"}


class GeminiGenerationService(GenerationService):
    """
    Generation service using Google Gemini API.

    One ``genai.Client`` is built per API key and reused across calls.
    """

    DEFAULT_MODEL = "gemini-2.0-flash"

    def __init__(
        self,
        model_name: str = DEFAULT_MODEL,
        client_factory: Callable[..., genai.Client] = genai.Client,
    ):
        self.model_name = model_name
        self._client_factory = client_factory
        self._clients: Dict[str, genai.Client] = {}

    def generate_text(self, prompt: str, api_key: str) -> GenerationResult:
        """
        Send the prompt to Gemini and return the generated text.

        Args:
            prompt: Instruction to send to the model.
            api_key: Gemini API key for authentication.

        Returns:
            GenerationResult with generated text or a classified error.
        """
        try:
            client = self._client_for(api_key)
            logger.debug("Sending prompt to %s:\n%s", self.model_name, prompt)

            response = client.models.generate_content(
                model=self.model_name,
                contents=prompt,
            )
        except errors.APIError as e:
            logger.error("Gemini API error", exc_info=True)
            return self._failure(self._classify_api_error(e), str(e))
        except Exception as e:
            logger.error("Gemini request failed", exc_info=True)
            return self._failure(classify_error_message(str(e)), str(e))

        blocked = self._block_reason(response)
        if blocked:
            return self._failure(
                ErrorCategory.CONTENT_POLICY,
                f"Response blocked by safety filter: {blocked}",
            )

        if not response.text:
            return self._failure(ErrorCategory.UNKNOWN, "Empty response from API")

        if self._finish_reason(response) == "MAX_TOKENS":
            logger.warning("Response from %s hit the model output limit and may be incomplete", self.model_name)

        logger.info("Received %d chars from %s", len(response.text), self.model_name)
        return GenerationResult(text=response.text.strip(), model=self.model_name)

    def _client_for(self, api_key: str) -> genai.Client:
        client = self._clients.get(api_key)
        if client is None:
            client = self._client_factory(api_key=api_key)
            self._clients[api_key] = client
        return client

    def _failure(self, category: ErrorCategory, message: str) -> GenerationResult:
        return GenerationResult(
            text=None,
            model=self.model_name,
            error=ClassifiedError(category=category, message=message),
        )

    @staticmethod
    def _classify_api_error(error: errors.APIError) -> ErrorCategory:
        """Classify by auth status, key markers, then quota status, falling back to the message."""
        message = str(error)
        if error.code in (401, 403):
            return ErrorCategory.AUTH
        # Key markers outrank the status code, matching the message rule order
        if "API_KEY_INVALID" in message or "API key" in message:
            return ErrorCategory.AUTH
        if error.code == 429 or error.status == "RESOURCE_EXHAUSTED":
            return ErrorCategory.QUOTA
        return classify_error_message(message)

    @staticmethod
    def _block_reason(response) -> Optional[str]:
        """Return the name of the reason a response was blocked, if any."""
        feedback = getattr(response, "prompt_feedback", None)
        if feedback is not None and feedback.block_reason:
            return getattr(feedback.block_reason, "name", str(feedback.block_reason))

        name = GeminiGenerationService._finish_reason(response)
        if name in _SAFETY_FINISH_REASONS:
            return name
        return None

    @staticmethod
    def _finish_reason(response) -> Optional[str]:
        """Return the first candidate's finish reason name, if there is one."""
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            return None
        reason = candidates[0].finish_reason
        return getattr(reason, "name", reason)
