"""Themes - Qt stylesheets for the dark and light palettes."""

from typing import Dict

PALETTES: Dict[str, Dict[str, str]] = {
    "dark": {
        "background": "#1e1f26",
        "card": "#2a2c36",
        "text": "#f2f2f2",
        "muted": "#a0a3b1",
        "border": "#3c3f4d",
        "accent": "#8b5cf6",
    },
    "light": {
        "background": "#f5f6fa",
        "card": "#ffffff",
        "text": "#1f2430",
        "muted": "#5c6270",
        "border": "#d9dce5",
        "accent": "#6d28d9",
    },
}

# Keyed by style_class_name()
STYLE_ACCENTS: Dict[str, str] = {
    "gen-z": "#ec4899",
    "shakespeare": "#b45309",
    "corporate": "#2563eb",
    "yoda": "#16a34a",
    "pirate": "#dc2626",
    "rap": "#f59e0b",
    "victorian-era": "#7c3aed",
}

_STYLESHEET = """
QMainWindow, QWidget#central {{ background: {background}; }}
QLabel {{ color: {text}; }}
QLabel#subtitle {{ color: {muted}; }}
QLabel#appTitle {{ font-size: 24px; font-weight: bold; }}
QLabel#sectionLabel {{ font-weight: bold; }}
QFrame#card {{ background: {card}; border: 1px solid {border}; border-radius: 12px; }}
QPlainTextEdit, QTextBrowser {{
    background: {background}; color: {text};
    border: 1px solid {border}; border-radius: 8px; padding: 6px;
}}
QRadioButton {{ color: {text}; padding: 4px; }}
QPushButton {{
    color: {text}; background: {card};
    border: 1px solid {border}; border-radius: 8px; padding: 6px 12px;
}}
QPushButton#translateButton {{ background: {accent}; color: white; font-weight: bold; }}
QPushButton#translateButton:disabled {{ background: {border}; color: {muted}; }}
"""


def stylesheet_for(theme: str) -> str:
    """Return the application stylesheet for a theme name."""
    return _STYLESHEET.format(**PALETTES[theme])


def accent_for_style(style_class: str) -> str:
    """Return the accent colour used to tint output in a given style."""
    return STYLE_ACCENTS.get(style_class, "")
