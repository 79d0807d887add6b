"""Language options offered by the language selectors."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LanguageOption:
    """A selectable language.

    Attributes:
        code: ISO-639-1 code sent to the translation API.
        name: Label shown in the selectors.
    """

    code: str
    name: str


LANGUAGES: Tuple[LanguageOption, ...] = (
    LanguageOption(code="en", name="Inglês"),
    LanguageOption(code="es", name="Espanhol"),
    LanguageOption(code="fr", name="Francês"),
    LanguageOption(code="de", name="Alemão"),
    LanguageOption(code="it", name="Italiano"),
    LanguageOption(code="pt", name="Português"),
)


def is_valid_language(code: str) -> bool:
    """True if code belongs to one of the fixed options."""
    return any(option.code == code for option in LANGUAGES)


def language_name(code: str) -> str:
    """Return the display name for a language code.

    Raises:
        ValueError: If the code is not one of the fixed options.
    """
    for option in LANGUAGES:
        if option.code == code:
            return option.name
    raise ValueError(f"Unknown language code: {code!r}")
