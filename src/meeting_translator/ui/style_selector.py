"""Style Selector - exclusive radio buttons for the style catalog."""

from typing import Dict, Optional, Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QButtonGroup, QGridLayout, QRadioButton, QWidget

from meeting_translator.core import STYLE_CATALOG


class StyleSelector(QWidget):
    """Grid of radio buttons, one per style label."""

    style_changed = Signal(str)

    COLUMNS = 4

    def __init__(self, styles: Sequence[str] = STYLE_CATALOG):
        super().__init__()

        layout = QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.button_group = QButtonGroup(self)
        self.button_group.setExclusive(True)
        self.buttons: Dict[str, QRadioButton] = {}

        for index, style in enumerate(styles):
            button = QRadioButton(style)
            button.setObjectName(f"style-{style}")
            button.toggled.connect(lambda checked, label=style: self._on_toggled(label, checked))
            self.button_group.addButton(button)
            self.buttons[style] = button
            layout.addWidget(button, index // self.COLUMNS, index % self.COLUMNS)

    def current_style(self) -> Optional[str]:
        """Return the selected label, or None if nothing is selected."""
        for label, button in self.buttons.items():
            if button.isChecked():
                return label
        return None

    def set_current_style(self, label: str) -> None:
        button = self.buttons.get(label)
        if button is not None:
            button.setChecked(True)

    def _on_toggled(self, label: str, checked: bool) -> None:
        # Exclusive groups also emit toggled(False) for the button losing the check
        if checked:
            self.style_changed.emit(label)
