"""Translation services - abstract interface and MyMemory implementation."""

from tradutor.services.translation.translation_service import TranslationService, TranslationResult
from tradutor.services.translation.mymemory_translation_service import MyMemoryTranslationService

__all__ = [
    "TranslationService",
    "TranslationResult",
    "MyMemoryTranslationService",
]
