"""Unit tests for error classifiers.

Tests cover:
- OpenAI SDK error classification
- Error code mapping
"""

import httpx
import openai
import pytest

from infrastructure.operations.classifiers import classify_openai_error
from infrastructure.operations.status import OperationStatus

REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def make_status_error(status_code, headers=None, message="request failed"):
    response = httpx.Response(status_code, headers=headers or {}, request=REQUEST)
    return openai.APIStatusError(message, response=response, body=None)


@pytest.mark.unit
class TestClassifyOpenAIError:
    """Tests for classify_openai_error() function."""

    def test_timeout_is_transient(self):
        result = classify_openai_error(openai.APITimeoutError(request=REQUEST))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "TIMEOUT"

    def test_connection_error_is_transient(self):
        exc = openai.APIConnectionError(message="Connection refused", request=REQUEST)

        result = classify_openai_error(exc)

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "CONNECTION_ERROR"
        assert "Connection refused" in result.message

    def test_rate_limit_is_transient(self):
        result = classify_openai_error(make_status_error(429))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "RATE_LIMITED"

    @pytest.mark.parametrize(
        "status_code, error_code", [(401, "UNAUTHORIZED"), (403, "FORBIDDEN")]
    )
    def test_credentials_rejected(self, status_code, error_code):
        result = classify_openai_error(make_status_error(status_code))

        assert result.status == OperationStatus.UNAUTHORIZED
        assert result.error_code == error_code

    def test_unknown_model(self):
        result = classify_openai_error(
            make_status_error(404, message="The model `gpt-x` does not exist")
        )

        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "NOT_FOUND"
        assert "gpt-x" in result.message

    @pytest.mark.parametrize("status_code", [500, 502, 503])
    def test_server_error_is_transient(self, status_code):
        result = classify_openai_error(make_status_error(status_code))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "SERVER_ERROR"

    def test_other_client_error_is_permanent(self):
        result = classify_openai_error(
            make_status_error(400, message="Invalid messages")
        )

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "HTTP_ERROR"
        assert "Invalid messages" in result.message

    def test_unknown_exception(self):
        result = classify_openai_error(openai.OpenAIError("no api key"))

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "UNKNOWN_ERROR"
        assert "OpenAIError" in result.message
