"""Async workers for non-blocking API calls using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from tradutor.services.translation import TranslationService


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    translation_result = Signal(object)  # TranslationResult


class TranslationWorker(QRunnable):
    """
    Worker that runs one translation API call in a background thread.

    Emits translation_result or error, then always emits finished.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        text: str,
        source_lang: str,
        target_lang: str,
    ):
        super().__init__()
        self.translation_service = translation_service
        self.text = text
        self.source_lang = source_lang
        self.target_lang = target_lang
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate(
                text=self.text,
                source_lang=self.source_lang,
                target_lang=self.target_lang,
            )
            self.signals.translation_result.emit(result)
        except Exception as e:
            # Anything the service did not turn into a TranslationResult
            self.signals.error.emit(str(e))
        finally:
            self.signals.finished.emit()
