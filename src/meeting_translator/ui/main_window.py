"""Main Window - Application shell with notes input, style choice and output card."""

from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)
from PySide6.QtCore import Signal

from meeting_translator.core import style_class_name
from meeting_translator.ui.style_selector import StyleSelector
from meeting_translator.ui.themes import accent_for_style, stylesheet_for


class MainWindow(QMainWindow):
    """Provides the single-page translator layout and owns the theme state."""

    # Emitted when the user edits the notes
    text_changed = Signal(str)
    # Emitted when the user picks a style
    style_changed = Signal(str)
    translate_clicked = Signal()

    TRANSLATE_LABEL = "✨ Translate Notes"
    LOADING_LABEL = "Translating..."

    def __init__(self, theme: str = "dark"):
        super().__init__()
        self.setWindowTitle("Meeting Notes Translator")
        self.setGeometry(100, 100, 900, 800)

        self.theme = theme

        self._setup_ui()
        self.apply_theme()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        central_widget.setObjectName("central")
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(24, 24, 24, 24)
        self.main_layout.setSpacing(16)

        # Header
        header = QHBoxLayout()
        titles = QVBoxLayout()
        title = QLabel("📝 Meeting Notes Translator")
        title.setObjectName("appTitle")
        subtitle = QLabel("Transform your boring meeting notes into any style you want!")
        subtitle.setObjectName("subtitle")
        titles.addWidget(title)
        titles.addWidget(subtitle)
        header.addLayout(titles)
        header.addStretch()

        self.theme_button = QPushButton()
        self.theme_button.clicked.connect(self.toggle_theme)
        header.addWidget(self.theme_button)
        self.main_layout.addLayout(header)

        # Main card: notes, style choice, translate button
        card = QFrame()
        card.setObjectName("card")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 16, 16, 16)

        notes_label = QLabel("Your Meeting Notes")
        notes_label.setObjectName("sectionLabel")
        card_layout.addWidget(notes_label)

        self.notes_input = QPlainTextEdit()
        self.notes_input.setPlaceholderText("Paste your meeting notes here...")
        self.notes_input.setMinimumHeight(160)
        self.notes_input.textChanged.connect(
            lambda: self.text_changed.emit(self.notes_input.toPlainText())
        )
        card_layout.addWidget(self.notes_input)

        style_label = QLabel("Choose Your Style")
        style_label.setObjectName("sectionLabel")
        card_layout.addWidget(style_label)

        self.style_selector = StyleSelector()
        self.style_selector.style_changed.connect(self.style_changed.emit)
        card_layout.addWidget(self.style_selector)

        self.translate_button = QPushButton(self.TRANSLATE_LABEL)
        self.translate_button.setObjectName("translateButton")
        self.translate_button.setEnabled(False)
        self.translate_button.clicked.connect(self.translate_clicked.emit)
        card_layout.addWidget(self.translate_button)

        self.main_layout.addWidget(card)

        # Output card, hidden until there is something to show
        self.output_card = QFrame()
        self.output_card.setObjectName("card")
        output_layout = QVBoxLayout(self.output_card)
        output_layout.setContentsMargins(16, 16, 16, 16)

        output_title = QLabel("🎭 Your Translated Meeting Notes")
        output_title.setObjectName("sectionLabel")
        output_layout.addWidget(output_title)

        self.output_view = QTextBrowser()
        self.output_view.setOpenExternalLinks(False)
        output_layout.addWidget(self.output_view)

        self.output_card.hide()
        self.main_layout.addWidget(self.output_card, 1)

    def toggle_theme(self) -> None:
        """Switch between the dark and light themes."""
        self.theme = "light" if self.theme == "dark" else "dark"
        self.apply_theme()

    def apply_theme(self) -> None:
        self.setStyleSheet(stylesheet_for(self.theme))
        # The button offers the theme you'd switch to
        if self.theme == "dark":
            self.theme_button.setText("🌞 Light")
        else:
            self.theme_button.setText("🌙 Dark")

    def set_translate_enabled(self, enabled: bool) -> None:
        self.translate_button.setEnabled(enabled)

    def set_loading(self, loading: bool) -> None:
        """Reflect the in-flight state on the translate button."""
        self.translate_button.setText(self.LOADING_LABEL if loading else self.TRANSLATE_LABEL)
        if loading:
            self.translate_button.setEnabled(False)
            self.output_view.clear()
            self.output_card.hide()

    def show_output(self, html: str) -> None:
        """Show formatted translation output, tinted by the selected style."""
        self.output_view.setHtml(f'<div style="white-space: pre-wrap;">{html}</div>')
        self._tint_output()
        self.output_card.show()

    def show_error(self, message: str) -> None:
        """Show an error message in the output card as plain text."""
        self.output_view.setPlainText(message)
        self._tint_output()
        self.output_card.show()

    def _tint_output(self) -> None:
        style = self.style_selector.current_style()
        accent = accent_for_style(style_class_name(style)) if style else ""
        if accent:
            self.output_view.setStyleSheet(f"border: 2px solid {accent};")
        else:
            self.output_view.setStyleSheet("")
