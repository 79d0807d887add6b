"""Unit tests for MyMemoryTranslationService."""

from unittest.mock import MagicMock

import pytest
import requests

from tradutor.services import MyMemoryTranslationService


def make_response(status_code=200, payload=None, json_error=None):
    """Build a mocked requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def service(session):
    return MyMemoryTranslationService(session=session, timeout=5.0)


class TestMyMemoryRequest:
    """Tests for the outbound request."""

    def test_sends_get_with_text_and_language_pair(self, service, session):
        session.get.return_value = make_response(
            payload={"responseData": {"translatedText": "Hello"}}
        )

        service.translate("Olá", "pt", "en")

        session.get.assert_called_once_with(
            MyMemoryTranslationService.API_URL,
            params={"q": "Olá", "langpair": "pt|en"},
            timeout=5.0,
        )

    def test_contact_email_is_sent_when_configured(self, session):
        service = MyMemoryTranslationService(session=session, contact_email="dev@example.com")
        params = service.build_params("Olá", "pt", "en")
        assert params["de"] == "dev@example.com"

    def test_contact_email_is_omitted_by_default(self, service):
        assert "de" not in service.build_params("Olá", "pt", "en")

    def test_reserved_characters_are_percent_encoded(self, service):
        """Text with & or # must not break the query string."""
        params = service.build_params("a&b #1", "pt", "en")
        url = requests.Request("GET", service.API_URL, params=params).prepare().url

        assert "q=a%26b+%231" in url
        assert "langpair=pt%7Cen" in url


class TestMyMemoryResponses:
    """Tests for response handling."""

    def test_success_returns_translated_text(self, service, session):
        session.get.return_value = make_response(
            payload={"responseData": {"translatedText": "Hello", "match": 1}, "responseStatus": 200}
        )

        result = service.translate("Olá", "pt", "en")

        assert not result.is_error
        assert result.text == "Hello"
        assert result.language_pair == "pt|en"

    @pytest.mark.parametrize("status", [304, 400, 403, 500, 503])
    def test_non_success_status_reports_http_error(self, service, session, status):
        session.get.return_value = make_response(status_code=status)

        result = service.translate("Olá", "pt", "en")

        assert result.error == f"HTTP ERROR: {status}"
        assert result.text == ""

    def test_http_error_does_not_parse_body(self, service, session):
        response = make_response(status_code=500)
        session.get.return_value = response

        service.translate("Olá", "pt", "en")

        response.json.assert_not_called()

    def test_malformed_json_reports_decoder_message(self, service, session):
        session.get.return_value = make_response(
            json_error=requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        )

        result = service.translate("Olá", "pt", "en")

        assert result.is_error
        assert result.error.startswith("Expecting value")

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"responseData": None},
            {"responseData": {}},
            {"responseData": {"translatedText": None}},
            ["not", "an", "object"],
        ],
    )
    def test_unexpected_shape_reports_error(self, service, session, payload):
        session.get.return_value = make_response(payload=payload)

        result = service.translate("Olá", "pt", "en")

        assert result.is_error
        assert "Unexpected response" in result.error

    def test_network_failure_reports_exception_message(self, service, session):
        session.get.side_effect = requests.ConnectionError("connection refused")

        result = service.translate("Olá", "pt", "en")

        assert result.error == "connection refused"

    def test_timeout_reports_exception_message(self, service, session):
        session.get.side_effect = requests.Timeout("read timed out")

        result = service.translate("Olá", "pt", "en")

        assert result.error == "read timed out"

    def test_unfollowed_redirect_status_is_an_http_error(self, service, session):
        """A 3xx reply with no body is a failure, not a decoding error."""
        response = requests.Response()
        response.status_code = 304
        response._content = b""
        session.get.return_value = response

        result = service.translate("Olá", "pt", "en")

        assert result.error == "HTTP ERROR: 304"
