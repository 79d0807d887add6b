"""Main Window - Application shell with header, translation card and footer."""

from datetime import date
from typing import override

from PySide6.QtCore import Slot
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QFrame, QLabel, QMainWindow, QVBoxLayout, QWidget

from tradutor.core import SessionState

from .translation_panel import TranslationPanel


class MainWindow(QMainWindow):
    """Provides the application shell around the translation panel."""

    TITLE = "Tradutor-Riofer"

    def __init__(self):
        super().__init__()
        self.setWindowTitle(self.TITLE)
        self.setGeometry(100, 100, 1000, 520)

        self._coordinator = None
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        central_widget.setStyleSheet("background: #f3f4f6;")
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(0)

        self.header_label = QLabel(self.TITLE)
        self.header_label.setStyleSheet(
            "background: white; font-size: 24px; font-weight: bold; padding: 12px 16px;"
        )
        self.main_layout.addWidget(self.header_label)

        card = QFrame()
        card.setStyleSheet("QFrame#card { background: white; border-radius: 8px; }")
        card.setObjectName("card")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(0, 0, 0, 0)

        self.panel = TranslationPanel()
        card_layout.addWidget(self.panel)

        content = QVBoxLayout()
        content.setContentsMargins(16, 32, 16, 32)
        content.addWidget(card)
        self.main_layout.addLayout(content, 1)

        self.footer_label = QLabel(f"© {date.today().year} Tradutor Riofer")
        self.footer_label.setStyleSheet(
            "background: white; border-top: 1px solid #e5e7eb; font-size: 13px; "
            "font-weight: 600; padding: 12px 16px;"
        )
        self.main_layout.addWidget(self.footer_label)

    def set_coordinator(self, coordinator):
        """Inject the coordinator and wire panel signals to its slots.

        The coordinator is expected to expose:
        - on_source_text_changed(str)
        - on_source_lang_selected(str)
        - on_target_lang_selected(str)
        - swap_languages()
        - shutdown()
        - state_changed signal carrying a SessionState
        """
        self._coordinator = coordinator
        self.panel.source_text_changed.connect(coordinator.on_source_text_changed)
        self.panel.source_lang_changed.connect(coordinator.on_source_lang_selected)
        self.panel.target_lang_changed.connect(coordinator.on_target_lang_selected)
        self.panel.swap_clicked.connect(coordinator.swap_languages)
        coordinator.state_changed.connect(self.render_state)
        self.render_state(coordinator.state)

    @Slot(object)
    def render_state(self, state: SessionState) -> None:
        self.panel.render(state)

    @override
    def closeEvent(self, event: QCloseEvent):
        """Release the debounce timer and drop in-flight results on close."""
        if self._coordinator is not None:
            self._coordinator.shutdown()
        super().closeEvent(event)
