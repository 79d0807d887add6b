"""MyMemory Translation Service - Implements translation via the MyMemory REST API."""

import logging
from typing import Optional

import requests

from tradutor.services.translation.translation_service import TranslationResult, TranslationService

logger = logging.getLogger(__name__)


class MyMemoryTranslationService(TranslationService):
    """
    Translation service backed by https://mymemory.translated.net.

    Issues a single GET per call. No retries: a failed request is reported
    once and the next edit in the UI schedules a fresh attempt.
    """

    API_URL = "https://api.mymemory.translated.net/get"
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        contact_email: Optional[str] = None,
    ):
        """
        Args:
            session: HTTP session to use. A new one is created if None.
            timeout: Request timeout in seconds.
            contact_email: Optional email sent as the ``de`` parameter,
                which raises MyMemory's anonymous daily quota.
        """
        self.session = session or requests.Session()
        self.timeout = timeout
        self.contact_email = contact_email

    def build_params(self, text: str, source_lang: str, target_lang: str) -> dict:
        """Build the query parameters for one request.

        requests percent-encodes the values, so reserved characters in the
        user's text (``&``, ``#``, ``?``) reach the API intact.
        """
        params = {"q": text, "langpair": f"{source_lang}|{target_lang}"}
        if self.contact_email:
            params["de"] = self.contact_email
        return params

    def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        """
        Translate text using the MyMemory API.

        Args:
            text: Text to translate.
            source_lang: Language code of the text.
            target_lang: Language code to translate into.

        Returns:
            TranslationResult with the translated text, or with ``error`` set to
            ``"HTTP ERROR: <status>"`` for non-2xx responses and to the
            exception message for network or decoding failures.
        """
        language_pair = f"{source_lang}|{target_lang}"
        params = self.build_params(text, source_lang, target_lang)
        logger.debug("Requesting translation %s (%d chars)", language_pair, len(text))

        try:
            response = self.session.get(self.API_URL, params=params, timeout=self.timeout)
            if not 200 <= response.status_code < 300:
                return TranslationResult(
                    text="",
                    language_pair=language_pair,
                    error=f"HTTP ERROR: {response.status_code}",
                )

            data = response.json()
            translated = self._extract_translated_text(data)
        except (requests.RequestException, ValueError) as e:
            # requests' JSONDecodeError subclasses ValueError
            return TranslationResult(text="", language_pair=language_pair, error=str(e))

        return TranslationResult(text=translated, language_pair=language_pair)

    @staticmethod
    def _extract_translated_text(data) -> str:
        """Pull responseData.translatedText out of a decoded response body."""
        response_data = data.get("responseData") if isinstance(data, dict) else None
        if not isinstance(response_data, dict) or "translatedText" not in response_data:
            raise ValueError("Unexpected response: missing responseData.translatedText")

        translated = response_data["translatedText"]
        if not isinstance(translated, str):
            raise ValueError("Unexpected response: responseData.translatedText is not a string")
        return translated
