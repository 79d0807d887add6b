"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow
from .translation_panel import TranslationPanel

__all__ = ["MainWindow", "TranslationPanel"]
