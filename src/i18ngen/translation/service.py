"""Remote machine translation.

TranslationService is the protocol the auto-translator depends on.
GoogleTranslateService implements it against the Google Translate v2 REST
API using httpx.

Python 3.13+. Uses httpx for HTTP.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

import httpx

from i18ngen.constants import GOOGLE_TRANSLATE_URL, TRANSLATE_TIMEOUT
from i18ngen.diagnostics import TranslationServiceError
from i18ngen.locale_utils import language_code

if TYPE_CHECKING:
    from i18ngen.core.types import LocaleCode

__all__ = ["GoogleTranslateService", "TranslationService"]

logger = logging.getLogger(__name__)


class TranslationService(Protocol):
    """Protocol for machine translation backends.

    Implementations raise TranslationServiceError carrying a human-readable
    message when the backend fails.
    """

    def translate(self, text: str, target: LocaleCode) -> str:
        """Translate text from the source language into ``target``."""


class GoogleTranslateService:
    """Google Translate v2 client.

    Example:
        >>> service = GoogleTranslateService("api-key", source="en-US")
        >>> service.translate("Hello", "fr-FR")
        'Bonjour'
    """

    __slots__ = ("_api_key", "_client", "_source", "_url")

    def __init__(
        self,
        api_key: str | None,
        *,
        source: LocaleCode,
        client: httpx.Client | None = None,
        url: str = GOOGLE_TRANSLATE_URL,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Google Translate API key
            source: Source locale (only its language code is sent)
            client: HTTP client to reuse; a short-lived one is created per
                request when omitted
            url: Translate endpoint

        Raises:
            TranslationServiceError: If no API key is configured
        """
        if not api_key:
            msg = "googleTranslateApiKey is not set."
            raise TranslationServiceError(msg)
        self._api_key = api_key
        self._source = source
        self._client = client
        self._url = url

    def translate(self, text: str, target: LocaleCode) -> str:
        """Translate text into the target locale's language.

        Raises:
            TranslationServiceError: On transport failure, an error status or
                an unparsable response payload
        """
        params = {
            "key": self._api_key,
            "q": text,
            "source": language_code(self._source),
            "target": language_code(target),
            "format": "text",
        }
        try:
            if self._client is not None:
                response = self._client.post(self._url, params=params)
            else:
                with httpx.Client(timeout=TRANSLATE_TIMEOUT) as client:
                    response = client.post(self._url, params=params)
        except httpx.HTTPError as e:
            msg = f"Translation request failed: {e}"
            raise TranslationServiceError(msg, locale=target) from e

        payload = self._decode(response, target)
        if response.status_code >= 400:
            raise TranslationServiceError(self._error_message(payload, response), locale=target)

        try:
            translated = payload["data"]["translations"][0]["translatedText"]
        except (KeyError, IndexError, TypeError) as e:
            msg = f"Unexpected translation response: {payload!r}"
            raise TranslationServiceError(msg, locale=target) from e
        if not isinstance(translated, str):
            msg = f"Unexpected translation response: {payload!r}"
            raise TranslationServiceError(msg, locale=target)

        logger.debug("Translated %r -> %r (%s)", text, translated, target)
        return translated

    @staticmethod
    def _decode(response: httpx.Response, target: LocaleCode) -> Any:
        try:
            return response.json()
        except ValueError as e:
            status = response.status_code
            msg = f"Translation service returned an unparsable response (HTTP {status})"
            raise TranslationServiceError(msg, locale=target) from e

    @staticmethod
    def _error_message(payload: Any, response: httpx.Response) -> str:
        if isinstance(payload, dict):
            error = payload.get("error")
            if isinstance(error, dict) and isinstance(error.get("message"), str):
                return error["message"]
        return f"Translation service error (HTTP {response.status_code})"
