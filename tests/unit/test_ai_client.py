"""
Unit tests for the Gemini completion client.

The Gemini SDK is mocked; these tests cover model setup, reply extraction
and the mapping of provider failures onto AI exceptions.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.core.config import settings
from app.domains.ai.client import (
    FINISH_REASON_RECITATION,
    FINISH_REASON_SAFETY,
    GeminiCompletionClient,
    extract_retry_delay,
    get_completion_client,
)
from app.exceptions.ai import (
    AIConfigurationError,
    AIContentFilterError,
    AIQuotaExceededError,
    AIRateLimitError,
    AIServiceUnavailableError,
    AITimeoutError,
)


def make_response(text="Hello", finish_reason=1, candidates=True):
    response = MagicMock()
    response.text = text
    response.candidates = [MagicMock(finish_reason=finish_reason)] if candidates else []
    return response


@pytest.fixture
def gemini_client():
    """Client with a mocked model already in place."""
    client = GeminiCompletionClient(api_key="test_key", model_name="gemini-test")
    client.model = MagicMock()
    client.model.generate_content_async = AsyncMock(return_value=make_response())
    return client


class TestModelSetup:
    def test_missing_api_key(self):
        client = GeminiCompletionClient(api_key="")

        with pytest.raises(AIConfigurationError):
            client._get_model()

    def test_model_is_built_once(self):
        with patch("app.domains.ai.client.genai") as mock_genai:
            client = GeminiCompletionClient(api_key="test_key", model_name="gemini-test")

            first = client._get_model()
            second = client._get_model()

            assert first is second
            mock_genai.configure.assert_called_once_with(api_key="test_key")
            mock_genai.GenerativeModel.assert_called_once()
            assert mock_genai.GenerativeModel.call_args.kwargs["model_name"] == "gemini-test"

    def test_sdk_failure_is_configuration_error(self):
        with patch("app.domains.ai.client.genai") as mock_genai:
            mock_genai.GenerativeModel.side_effect = ValueError("bad model")

            with pytest.raises(AIConfigurationError) as exc_info:
                GeminiCompletionClient(api_key="test_key")._get_model()

            assert isinstance(exc_info.value.__cause__, ValueError)

    def test_dependency_is_shared(self):
        assert get_completion_client() is get_completion_client()


class TestGenerate:
    @pytest.mark.asyncio
    async def test_returns_reply_text(self, gemini_client):
        reply = await gemini_client.generate("Say hello")

        assert reply == "Hello"
        gemini_client.model.generate_content_async.assert_awaited_once_with("Say hello")

    @pytest.mark.asyncio
    async def test_timeout(self, gemini_client):
        gemini_client.model.generate_content_async.side_effect = TimeoutError()

        with pytest.raises(AITimeoutError):
            await gemini_client.generate("Say hello")

    @pytest.mark.asyncio
    async def test_provider_error_is_classified(self, gemini_client):
        error = Exception("429 Resource exhausted: quota exceeded. Please retry in 12.5s")
        gemini_client.model.generate_content_async.side_effect = error

        with pytest.raises(AIQuotaExceededError) as exc_info:
            await gemini_client.generate("Say hello")

        assert exc_info.value.__cause__ is error
        assert exc_info.value.details == {"retry_after": 13}

    @pytest.mark.asyncio
    async def test_no_candidates_is_content_filter(self, gemini_client):
        gemini_client.model.generate_content_async.return_value = make_response(candidates=False)

        with pytest.raises(AIContentFilterError):
            await gemini_client.generate("Say hello")

    @pytest.mark.asyncio
    async def test_safety_stop_is_content_filter(self, gemini_client):
        gemini_client.model.generate_content_async.return_value = make_response(finish_reason=FINISH_REASON_SAFETY)

        with pytest.raises(AIContentFilterError):
            await gemini_client.generate("Say hello")

    @pytest.mark.asyncio
    async def test_recitation_stop_is_unavailable(self, gemini_client):
        gemini_client.model.generate_content_async.return_value = make_response(
            finish_reason=FINISH_REASON_RECITATION
        )

        with pytest.raises(AIServiceUnavailableError):
            await gemini_client.generate("Say hello")

    @pytest.mark.asyncio
    async def test_blank_text_is_unavailable(self, gemini_client):
        gemini_client.model.generate_content_async.return_value = make_response(text="   ")

        with pytest.raises(AIServiceUnavailableError):
            await gemini_client.generate("Say hello")

    @pytest.mark.asyncio
    async def test_missing_response(self, gemini_client):
        gemini_client.model.generate_content_async.return_value = None

        with pytest.raises(AIServiceUnavailableError):
            await gemini_client.generate("Say hello")


class TestErrorClassification:
    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            ("Quota exceeded for requests per minute", AIQuotaExceededError),
            ("429 Too Many Requests", AIRateLimitError),
            ("Rate limit reached", AIRateLimitError),
            ("Response blocked by safety settings", AIContentFilterError),
            ("503 Service Unavailable", AIServiceUnavailableError),
            ("connection reset by peer", AIServiceUnavailableError),
        ],
    )
    def test_classification(self, message, expected):
        error = GeminiCompletionClient(api_key="test_key")._classify_error(Exception(message))

        assert type(error) is expected

    def test_rate_limit_carries_retry_after(self):
        error = GeminiCompletionClient(api_key="test_key")._classify_error(
            Exception("429 Too Many Requests. Please retry in 4s")
        )

        assert error.details == {"retry_after": 5}


class TestExtractRetryDelay:
    def test_parses_fractional_seconds(self):
        assert extract_retry_delay("Please retry in 32.984803332s.") == 33

    def test_falls_back_to_min_wait(self):
        assert extract_retry_delay("Something went wrong") == int(settings.ai_retry_min_wait)
