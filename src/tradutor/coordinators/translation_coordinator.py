"""Translation Coordinator - Debounced translate-on-input workflow and session state."""

import logging
from dataclasses import replace
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal, Slot

from tradutor.core import SessionState, is_valid_language
from tradutor.services import TranslationResult, TranslationService, TranslationWorker

logger = logging.getLogger(__name__)


class _TranslationRequest(QObject):
    """Helper class to hold translation request context and handle results safely."""

    def __init__(self, worker_id: int, parent: "TranslationCoordinator"):
        super().__init__()
        self.worker_id = worker_id
        self.parent_ref = parent

    @Slot(object)
    def on_translation_result(self, result):
        self.parent_ref._handle_translation_result(result, self.worker_id)

    @Slot(str)
    def on_translation_error(self, error: str):
        self.parent_ref._handle_translation_error(error, self.worker_id)

    @Slot()
    def on_finished(self):
        self.parent_ref._handle_translation_finished(self.worker_id)


class TranslationCoordinator(QObject):
    """
    Orchestrates the translate-on-input workflow.

    Responsibilities:
    - Own the SessionState (languages, input, output, loading flag, error).
    - Debounce text and language changes into a single translation request.
    - Run requests on a thread pool and apply only the newest request's outcome.
    - Notify the UI through state_changed after every mutation.
    """

    DEBOUNCE_MS = 500

    state_changed = Signal(object)  # SessionState snapshot
    translation_started = Signal()
    translation_completed = Signal(str)
    translation_failed = Signal(str)

    def __init__(
        self,
        translation_service: TranslationService,
        thread_pool: Optional[QThreadPool] = None,
        debounce_ms: int = DEBOUNCE_MS,
    ):
        super().__init__()

        self.translation_service = translation_service
        self.thread_pool = thread_pool or QThreadPool.globalInstance()
        self.state = SessionState()

        self._debounce_timer = QTimer(self)
        self._debounce_timer.setSingleShot(True)
        self._debounce_timer.setInterval(debounce_ms)
        self._debounce_timer.timeout.connect(self.translate)

        # Only the newest request may touch state; older ones are dropped on arrival
        self._active_worker_id: Optional[int] = None
        self._worker_counter = 0

        # Keep helpers alive while their workers run in background threads
        self._request_helpers: dict[int, _TranslationRequest] = {}

    @property
    def debounce_ms(self) -> int:
        return self._debounce_timer.interval()

    def is_translation_pending(self) -> bool:
        """True while a debounce countdown is running."""
        return self._debounce_timer.isActive()

    def on_source_text_changed(self, text: str) -> None:
        """Called on every edit of the input text."""
        if text == self.state.source_text:
            return
        self.state.source_text = text
        self._emit_state()
        self._schedule_translation()

    def on_source_lang_selected(self, code: str) -> None:
        """Called when the user picks a source language."""
        self._validate_language(code)
        if code == self.state.source_lang:
            return
        self.state.source_lang = code
        self._emit_state()
        self._schedule_translation()

    def on_target_lang_selected(self, code: str) -> None:
        """Called when the user picks a target language."""
        self._validate_language(code)
        if code == self.state.target_lang:
            return
        self.state.target_lang = code
        self._emit_state()
        self._schedule_translation()

    def swap_languages(self) -> None:
        """
        Exchange source and target languages.

        Both codes change and the previous translation is cleared before
        observers are notified, so no intermediate state is ever rendered.
        Input text and error are left as they are.
        """
        self.state.swap_languages()
        self._emit_state()
        self._schedule_translation()

    def translate(self) -> None:
        """Start a translation of the current text and language pair."""
        if not self.state.source_text:
            return

        self._worker_counter += 1
        worker_id = self._worker_counter
        self._active_worker_id = worker_id

        self.state.is_loading = True
        self.state.error = None
        self._emit_state()
        self.translation_started.emit()

        logger.debug("Starting translation request %d (%s)", worker_id, self.state.language_pair)

        worker = TranslationWorker(
            translation_service=self.translation_service,
            text=self.state.source_text,
            source_lang=self.state.source_lang,
            target_lang=self.state.target_lang,
        )

        request_helper = _TranslationRequest(worker_id, self)
        self._request_helpers[worker_id] = request_helper

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)
        worker.signals.finished.connect(request_helper.on_finished)

        self.thread_pool.start(worker)

    def shutdown(self) -> None:
        """Stop the debounce timer and ignore any request still in flight."""
        self._debounce_timer.stop()
        self._active_worker_id = None

    def _schedule_translation(self) -> None:
        # Restarting a running single-shot timer cancels the previous countdown
        self._debounce_timer.stop()
        if not self.state.source_text:
            return
        self._debounce_timer.start()

    def _handle_translation_result(self, result: TranslationResult, worker_id: int) -> None:
        """Apply a service result (runs in main thread)."""
        if worker_id != self._active_worker_id:
            logger.debug(
                "Ignoring stale translation result (worker %d, current %s)",
                worker_id,
                self._active_worker_id,
            )
            return

        if result.is_error:
            self._apply_failure(result.error)
            return

        self.state.translated_text = result.text
        self.state.error = None
        self.translation_completed.emit(result.text)

    def _handle_translation_error(self, error: str, worker_id: int) -> None:
        """Apply an unexpected worker error (runs in main thread)."""
        if worker_id != self._active_worker_id:
            logger.debug(
                "Ignoring stale translation error (worker %d, current %s)",
                worker_id,
                self._active_worker_id,
            )
            return

        self._apply_failure(error)

    def _handle_translation_finished(self, worker_id: int) -> None:
        self._request_helpers.pop(worker_id, None)
        if worker_id != self._active_worker_id:
            return

        self.state.is_loading = False
        self._emit_state()

    def _apply_failure(self, error: str) -> None:
        logger.warning("Translation failed (%s): %s", self.state.language_pair, error)
        self.state.error = error
        self.translation_failed.emit(error)

    def _emit_state(self) -> None:
        self.state_changed.emit(replace(self.state))

    @staticmethod
    def _validate_language(code: str) -> None:
        if not is_valid_language(code):
            raise ValueError(f"Unknown language code: {code!r}")
