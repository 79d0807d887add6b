"""Services layer - configuration, translation API and background workers."""

from tradutor.services.settings_manager import SettingsManager

# Translation services
from tradutor.services.translation import TranslationService, TranslationResult, MyMemoryTranslationService

from tradutor.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
    "SettingsManager",
    "TranslationService",
    "TranslationResult",
    "MyMemoryTranslationService",
    "TranslationWorker",
    "WorkerSignals",
]
