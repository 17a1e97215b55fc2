"""Markup formatting - minimal rich-text rendering of generated text."""

import html
import re

_BOLD = re.compile(r"\*\*(.*?)\*\*")
_BULLET = re.compile(r"^\* (.+)$", re.MULTILINE)


def format_markdown(text: str) -> str:
    """
    Convert the small markdown subset models tend to emit into inline markup.

    Rules:
    - HTML special characters are escaped first, the text is untrusted
    - ``**bold**`` becomes ``<strong>bold</strong>``
    - Lines starting with ``* `` become ``• `` bullets
    - Everything else, including newlines, is left as-is

    Args:
        text: Generated text from a successful translation.

    Returns:
        Text safe to render as rich text.
    """
    text = html.escape(text, quote=False)
    text = _BOLD.sub(r"<strong>\1</strong>", text)
    text = _BULLET.sub(r"• \1", text)
    return text
