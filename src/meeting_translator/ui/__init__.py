"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow
from .style_selector import StyleSelector

__all__ = ["MainWindow", "StyleSelector"]
