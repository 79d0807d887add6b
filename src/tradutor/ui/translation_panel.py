"""Translation Panel - language selectors, input text and translation output."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QProgressBar,
    QPushButton,
    QSizePolicy,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from tradutor.core import LANGUAGES, SessionState


class TranslationPanel(QWidget):
    """Card with the language bar on top and input/output panes side by side."""

    source_text_changed = Signal(str)
    source_lang_changed = Signal(str)
    target_lang_changed = Signal(str)
    swap_clicked = Signal()

    # Pages of the output stack
    PAGE_RESULT = 0
    PAGE_LOADING = 1
    PAGE_ERROR = 2

    def __init__(self):
        super().__init__()

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # Language bar
        language_bar = QHBoxLayout()
        language_bar.setContentsMargins(16, 12, 16, 12)

        self.source_combo = self._create_language_combo()
        self.source_combo.currentIndexChanged.connect(
            lambda _: self.source_lang_changed.emit(self.source_combo.currentData())
        )
        language_bar.addWidget(self.source_combo)
        language_bar.addStretch()

        self.swap_button = QPushButton("⇄")
        self.swap_button.setToolTip("Inverter idiomas")
        self.swap_button.setFlat(True)
        self.swap_button.setFixedSize(36, 36)
        self.swap_button.clicked.connect(self.swap_clicked.emit)
        language_bar.addWidget(self.swap_button)
        language_bar.addStretch()

        self.target_combo = self._create_language_combo()
        self.target_combo.currentIndexChanged.connect(
            lambda _: self.target_lang_changed.emit(self.target_combo.currentData())
        )
        language_bar.addWidget(self.target_combo)
        main_layout.addLayout(language_bar)

        separator = QFrame()
        separator.setFrameShape(QFrame.Shape.HLine)
        separator.setStyleSheet("color: #e5e7eb;")
        main_layout.addWidget(separator)

        # Input and output panes
        panes = QHBoxLayout()
        panes.setSpacing(0)

        self.input_text = QPlainTextEdit()
        self.input_text.setPlaceholderText("Digite seu texto...")
        self.input_text.setMinimumHeight(160)
        self.input_text.setStyleSheet("font-size: 18px; font-weight: 600; border: none; padding: 12px;")
        self.input_text.textChanged.connect(
            lambda: self.source_text_changed.emit(self.input_text.toPlainText())
        )
        panes.addWidget(self.input_text, 1)

        self.output_stack = QStackedWidget()
        self.output_stack.setStyleSheet("background: #f8f9fa; border-left: 1px solid #e5e7eb;")

        self.translation_label = QLabel("")
        self.translation_label.setTextFormat(Qt.TextFormat.PlainText)
        self.translation_label.setWordWrap(True)
        self.translation_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.translation_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.translation_label.setStyleSheet("font-size: 18px;")
        self.output_stack.addWidget(self.translation_label)

        loading_page = QWidget()
        loading_layout = QVBoxLayout(loading_page)
        loading_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.busy_indicator = QProgressBar()
        self.busy_indicator.setRange(0, 0)  # indeterminate
        self.busy_indicator.setTextVisible(False)
        self.busy_indicator.setFixedWidth(120)
        loading_layout.addWidget(self.busy_indicator)
        self.output_stack.addWidget(loading_page)

        self.output_error_label = QLabel("")
        self.output_error_label.setTextFormat(Qt.TextFormat.PlainText)
        self.output_error_label.setWordWrap(True)
        self.output_error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.output_error_label.setStyleSheet("font-size: 18px; color: #ef4444;")
        self.output_stack.addWidget(self.output_error_label)

        self.output_stack.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        panes.addWidget(self.output_stack, 1)
        main_layout.addLayout(panes, 1)

        # Error banner below the panes, visible only while an error is set
        self.error_banner = QLabel("")
        self.error_banner.setTextFormat(Qt.TextFormat.PlainText)
        self.error_banner.setWordWrap(True)
        self.error_banner.setStyleSheet(
            "background: #fee2e2; color: #b91c1c; border: 1px solid #f87171; padding: 12px;"
        )
        self.error_banner.hide()
        main_layout.addWidget(self.error_banner)

    def render(self, state: SessionState) -> None:
        """Bring every widget in line with the given session state."""
        self._select_code(self.source_combo, state.source_lang)
        self._select_code(self.target_combo, state.target_lang)

        # Only touch the editor when the text really differs, to keep the cursor
        if self.input_text.toPlainText() != state.source_text:
            self.input_text.blockSignals(True)
            self.input_text.setPlainText(state.source_text)
            self.input_text.blockSignals(False)

        if state.is_loading:
            self.output_stack.setCurrentIndex(self.PAGE_LOADING)
        elif state.error:
            self.output_error_label.setText(state.error)
            self.output_stack.setCurrentIndex(self.PAGE_ERROR)
        else:
            self.translation_label.setText(state.translated_text)
            self.output_stack.setCurrentIndex(self.PAGE_RESULT)

        if state.error:
            self.error_banner.setText(state.error)
            self.error_banner.show()
        else:
            self.error_banner.clear()
            self.error_banner.hide()

    def _create_language_combo(self) -> QComboBox:
        combo = QComboBox()
        for option in LANGUAGES:
            combo.addItem(option.name, option.code)
        combo.setStyleSheet("font-weight: 600;")
        return combo

    @staticmethod
    def _select_code(combo: QComboBox, code: str) -> None:
        index = combo.findData(code)
        if index != combo.currentIndex():
            combo.blockSignals(True)
            combo.setCurrentIndex(index)
            combo.blockSignals(False)
