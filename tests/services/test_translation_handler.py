"""Unit tests for TranslationRequestHandler."""

import logging
from unittest.mock import MagicMock

import pytest

from meeting_translator.core import ErrorCategory, TranslationResult
from meeting_translator.services import (
    ClassifiedError,
    GenerationResult,
    TranslationRequestHandler,
    format_markdown,
)


@pytest.fixture
def generation_service():
    """Provide a mocked GenerationService."""
    service = MagicMock()
    service.generate_text = MagicMock(
        return_value=GenerationResult(text="Arr, the meeting be done.", model="test-model")
    )
    return service


@pytest.fixture
def handler(generation_service):
    return TranslationRequestHandler(generation_service)


class TestTranslationHandlerValidation:
    """Tests for input and credential checks."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
    def test_blank_text_is_validation_error(self, handler, generation_service, text):
        """Blank notes should fail without calling the generator."""
        result = handler.translate(text, "Pirate", "key")

        assert result == TranslationResult.failure(ErrorCategory.VALIDATION, "text and style required")
        generation_service.generate_text.assert_not_called()

    @pytest.mark.parametrize("style", ["", None, "Robot", "pirate"])
    def test_style_outside_catalog_is_validation_error(self, handler, generation_service, style):
        result = handler.translate("We shipped v2.", style, "key")

        assert result.error is ErrorCategory.VALIDATION
        generation_service.generate_text.assert_not_called()

    @pytest.mark.parametrize("credential", ["", "   ", None])
    def test_missing_credential_is_configuration_error(self, handler, generation_service, credential):
        result = handler.translate("We shipped v2.", "Pirate", credential)

        assert result == TranslationResult.failure(ErrorCategory.CONFIGURATION, "missing credential")
        generation_service.generate_text.assert_not_called()

    def test_validation_checked_before_credential(self, handler):
        """Missing text and missing key together report the input problem."""
        result = handler.translate("", "Pirate", "")
        assert result.error is ErrorCategory.VALIDATION


class TestTranslationHandlerSuccess:
    """Tests for the success path."""

    def test_calls_generator_once_with_prompt_and_key(self, handler, generation_service):
        handler.translate("Budget approved.", "Yoda", "secret")

        generation_service.generate_text.assert_called_once_with(
            prompt="Rewrite the following meeting notes in Yoda style:\n\nBudget approved.",
            api_key="secret",
        )

    def test_returns_raw_generated_text(self, handler):
        result = handler.translate("Budget approved.", "Pirate", "secret")
        assert result == TranslationResult.success("Arr, the meeting be done.")

    def test_success_text_formats_bold_and_bullets(self, handler, generation_service):
        """Formatting applies to success text: bold and bullet substitution."""
        generation_service.generate_text.return_value = GenerationResult(
            text="Hello **world**\n* item one", model="test-model"
        )

        result = handler.translate("notes", "Gen Z", "secret")

        assert result.text == "Hello **world**\n* item one"
        assert format_markdown(result.text) == "Hello <strong>world</strong>\n• item one"

    def test_identical_inputs_give_identical_results(self, handler):
        """No hidden state accumulates between calls."""
        first = handler.translate("Standup at 9.", "Corporate", "secret")
        second = handler.translate("Standup at 9.", "Corporate", "secret")

        assert first == second


class TestTranslationHandlerRaisedErrors:
    """Tests for classifying exceptions raised by the generator."""

    @pytest.mark.parametrize(
        "message, category, expected",
        [
            ("[400] API_KEY_INVALID", ErrorCategory.AUTH, "invalid credential"),
            ("API key not valid. Please pass a valid API key.", ErrorCategory.AUTH, "invalid credential"),
            ("You exceeded your current quota", ErrorCategory.QUOTA, "quota exceeded"),
            ("Rate limit reached", ErrorCategory.QUOTA, "quota exceeded"),
            ("Candidate was blocked due to SAFETY", ErrorCategory.CONTENT_POLICY, "response blocked by safety policy"),
            ("Response was blocked", ErrorCategory.CONTENT_POLICY, "response blocked by safety policy"),
            ("network down", ErrorCategory.UNKNOWN, "network down"),
        ],
    )
    def test_raised_errors_are_classified(self, handler, generation_service, message, category, expected):
        generation_service.generate_text.side_effect = RuntimeError(message)

        result = handler.translate("notes", "Rap", "secret")

        assert result == TranslationResult.failure(category, expected)

    def test_first_matching_rule_wins(self, handler, generation_service):
        """A message mentioning both a bad key and quota is an auth error."""
        generation_service.generate_text.side_effect = RuntimeError("API key over quota")

        result = handler.translate("notes", "Rap", "secret")

        assert result.error is ErrorCategory.AUTH

    def test_raw_error_is_logged(self, handler, generation_service, caplog):
        generation_service.generate_text.side_effect = RuntimeError("network down")

        with caplog.at_level(logging.ERROR, logger="meeting_translator.services.translation_handler"):
            handler.translate("notes", "Rap", "secret")

        assert "network down" in caplog.text
        assert caplog.records[0].exc_info is not None


class TestTranslationHandlerClassifiedErrors:
    """Tests for failures already classified by the generator."""

    def test_classified_error_keeps_category(self, handler, generation_service):
        generation_service.generate_text.return_value = GenerationResult(
            text=None,
            model="test-model",
            error=ClassifiedError(ErrorCategory.QUOTA, "429 RESOURCE_EXHAUSTED"),
        )

        result = handler.translate("notes", "Pirate", "secret")

        assert result == TranslationResult.failure(ErrorCategory.QUOTA, "quota exceeded")

    def test_unknown_classified_error_keeps_message(self, handler, generation_service):
        generation_service.generate_text.return_value = GenerationResult(
            text=None,
            model="test-model",
            error=ClassifiedError(ErrorCategory.UNKNOWN, "Empty response from API"),
        )

        result = handler.translate("notes", "Pirate", "secret")

        assert result == TranslationResult.failure(ErrorCategory.UNKNOWN, "Empty response from API")

    def test_classified_error_is_logged(self, handler, generation_service, caplog):
        generation_service.generate_text.return_value = GenerationResult(
            text=None,
            model="test-model",
            error=ClassifiedError(ErrorCategory.CONTENT_POLICY, "blocked: SAFETY"),
        )

        with caplog.at_level(logging.ERROR):
            handler.translate("notes", "Pirate", "secret")

        assert "blocked: SAFETY" in caplog.text
