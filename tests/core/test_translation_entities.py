"""Unit tests for TranslationRequest and TranslationResult."""

from meeting_translator.core import ErrorCategory, TranslationRequest, TranslationResult


class TestTranslationRequest:
    """Tests for prompt construction."""

    def test_build_prompt_embeds_style_and_text(self):
        request = TranslationRequest(source_text="Ship it Friday.", style_label="Pirate")

        assert request.build_prompt() == (
            "Rewrite the following meeting notes in Pirate style:\n\nShip it Friday."
        )

    def test_build_prompt_keeps_source_text_verbatim(self):
        """Braces, markup and whitespace are passed through untouched."""
        text = "  <b>{budget}</b>\n\n* item  "
        request = TranslationRequest(source_text=text, style_label="Yoda")

        assert request.build_prompt().endswith("\n\n" + text)

    def test_build_prompt_is_deterministic(self):
        request = TranslationRequest(source_text="notes", style_label="Rap")
        assert request.build_prompt() == request.build_prompt()


class TestTranslationResult:
    """Tests for the success/failure variants."""

    def test_success_is_not_error(self):
        result = TranslationResult.success("Ahoy")

        assert not result.is_error
        assert result.text == "Ahoy"
        assert result.error is None

    def test_failure_carries_category_and_message(self):
        result = TranslationResult.failure(ErrorCategory.QUOTA, "quota exceeded")

        assert result.is_error
        assert result.error is ErrorCategory.QUOTA
        assert result.message == "quota exceeded"
        assert result.text is None

    def test_results_compare_by_value(self):
        assert TranslationResult.success("x") == TranslationResult.success("x")
        assert TranslationResult.failure(ErrorCategory.UNKNOWN, "a") != TranslationResult.failure(
            ErrorCategory.UNKNOWN, "b"
        )

    def test_category_values_use_taxonomy_names(self):
        assert [c.value for c in ErrorCategory] == [
            "ValidationError",
            "ConfigurationError",
            "AuthError",
            "QuotaError",
            "ContentPolicyError",
            "UnknownError",
        ]
