"""Style catalog - the fixed set of personas meeting notes can be rewritten in."""

import re
from typing import Optional, Tuple

# Display order only
STYLE_CATALOG: Tuple[str, ...] = (
    "Gen Z",
    "Shakespeare",
    "Corporate",
    "Yoda",
    "Pirate",
    "Rap",
    "Victorian Era",
)


def is_valid_style(label: Optional[str]) -> bool:
    """Return True if the label is a member of the style catalog."""
    return label in STYLE_CATALOG


def style_class_name(label: str) -> str:
    """
    Convert a style label into a stable identifier for theming.

    Lowercases the label and replaces whitespace runs with a hyphen,
    e.g. "Victorian Era" -> "victorian-era".
    """
    return re.sub(r"\s+", "-", label.lower())
