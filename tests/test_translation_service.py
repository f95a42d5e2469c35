"""Tests for the Google Translate client over a mocked HTTP transport."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from i18ngen.diagnostics import TranslationServiceError
from i18ngen.translation import GoogleTranslateService


def make_service(
    handler: Callable[[httpx.Request], httpx.Response], api_key: str | None = "k"
) -> GoogleTranslateService:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return GoogleTranslateService(api_key, source="en-US", client=client)


def ok(text: str) -> httpx.Response:
    return httpx.Response(200, json={"data": {"translations": [{"translatedText": text}]}})


class TestGoogleTranslateService:
    """Test GoogleTranslateService."""

    def test_missing_key(self) -> None:
        """A missing API key is reported before any request."""
        with pytest.raises(TranslationServiceError, match="googleTranslateApiKey is not set"):
            GoogleTranslateService(None, source="en-US")

    def test_request_parameters(self) -> None:
        """Language codes, key and text are sent as query parameters."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return ok("Bonjour")

        assert make_service(handler).translate("Hello", "fr-FR") == "Bonjour"
        params = seen[0].url.params
        assert seen[0].method == "POST"
        assert params["key"] == "k"
        assert params["q"] == "Hello"
        assert params["source"] == "en"
        assert params["target"] == "fr"
        assert params["format"] == "text"

    def test_error_message_surfaced(self) -> None:
        """The service's error message becomes the exception message."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, json={"error": {"code": 403, "message": "API key invalid"}})

        with pytest.raises(TranslationServiceError, match="API key invalid") as exc_info:
            make_service(handler).translate("Hello", "de")
        assert exc_info.value.locale == "de"

    def test_error_without_message(self) -> None:
        """Error responses without a message report the status."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={})

        with pytest.raises(TranslationServiceError, match="HTTP 500"):
            make_service(handler).translate("Hello", "de")

    def test_unparsable_body(self) -> None:
        """Non-JSON bodies are reported."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad gateway</html>")

        with pytest.raises(TranslationServiceError, match="unparsable"):
            make_service(handler).translate("Hello", "de")

    def test_unexpected_shape(self) -> None:
        """Responses without a translation are reported."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"data": {"translations": []}})

        with pytest.raises(TranslationServiceError, match="Unexpected"):
            make_service(handler).translate("Hello", "de")

    def test_transport_failure(self) -> None:
        """Connection errors are wrapped."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(TranslationServiceError, match="request failed"):
            make_service(handler).translate("Hello", "de")
