"""Session state entity - the mutable state of one translation session."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SessionState:
    """State rendered by the window and driven by the translation coordinator.

    Attributes:
        source_lang: Code of the language being translated from.
        target_lang: Code of the language being translated to.
        source_text: Text typed by the user.
        translated_text: Last successful translation, empty before any success.
        is_loading: True only while a translation request is outstanding.
        error: Message of the last failure, None when there is no error.
    """

    source_lang: str = "pt"
    target_lang: str = "en"
    source_text: str = ""
    translated_text: str = ""
    is_loading: bool = False
    error: Optional[str] = None

    @property
    def language_pair(self) -> str:
        """Language pair in the API's "<source>|<target>" form."""
        return f"{self.source_lang}|{self.target_lang}"

    def swap_languages(self) -> None:
        """Exchange source and target languages and drop the stale translation."""
        self.source_lang, self.target_lang = self.target_lang, self.source_lang
        self.translated_text = ""
