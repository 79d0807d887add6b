"""Domain layer - language options and translation session state."""

from .languages import LANGUAGES, LanguageOption, is_valid_language, language_name
from .session_state import SessionState

__all__ = [
    "LANGUAGES",
    "LanguageOption",
    "SessionState",
    "is_valid_language",
    "language_name",
]
