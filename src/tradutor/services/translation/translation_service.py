"""Translation Service - abstract interface for text translation backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class TranslationResult:
    """Result of a translation request."""

    text: str
    language_pair: str
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None


class TranslationService(ABC):
    """
    Abstract service for translating text between two languages.

    Implementations (e.g., MyMemoryTranslationService) handle API calls and
    report failures through TranslationResult.error instead of raising.
    """

    @abstractmethod
    def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        """
        Translate text from source_lang to target_lang.

        Args:
            text: Text to translate.
            source_lang: Language code of the text.
            target_lang: Language code to translate into.

        Returns:
            TranslationResult with translated text or error message.
        """
        pass
