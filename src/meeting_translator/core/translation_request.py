"""Translation Request entity - one rewrite of meeting notes into a style."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TranslationRequest:
    """Source text paired with the style label it should be rewritten in."""

    source_text: str
    style_label: str

    PROMPT_TEMPLATE = "Rewrite the following meeting notes in {style} style:\n\n{text}"

    def build_prompt(self) -> str:
        """Format the instruction sent to the generation model.

        The source text is embedded verbatim.
        """
        return self.PROMPT_TEMPLATE.format(style=self.style_label, text=self.source_text)
