"""
Unit tests for the LLM module.
Tests LLMMessage, LLMResponse, the Groq provider and factory.
"""

import httpx
import pytest

from mindcare.core.errors import ConfigError, GatewayError
from mindcare.llm.base import LLMMessage, LLMResponse
from mindcare.llm.groq_provider import GroqProvider
from mindcare.llm.factory import create_llm_provider


class TestLLMMessage:
    """Tests for LLMMessage dataclass."""

    def test_system_message(self):
        msg = LLMMessage.system("You are a helpful assistant")
        assert msg.role == "system"
        assert msg.content == "You are a helpful assistant"

    def test_user_message(self):
        msg = LLMMessage.user("Hello")
        assert msg.role == "user"
        assert msg.content == "Hello"


class TestLLMResponse:
    """Tests for LLMResponse dataclass."""

    def test_basic_response(self):
        resp = LLMResponse(content="Hello!", model="mixtral-8x7b-32768")
        assert resp.content == "Hello!"
        assert resp.usage == {}
        assert resp.raw is None


class TestGroqProvider:
    """Tests for the Groq provider."""

    def test_init_defaults(self):
        provider = GroqProvider(api_key="test-key")
        assert provider.api_key == "test-key"
        assert provider.model == "mixtral-8x7b-32768"
        assert provider.base_url == "https://api.groq.com/openai/v1"

    def test_format_messages(self):
        provider = GroqProvider(api_key="test")
        formatted = provider._format_messages([
            LLMMessage.system("sys prompt"),
            LLMMessage.user("hello"),
        ])
        assert formatted == [
            {"role": "system", "content": "sys prompt"},
            {"role": "user", "content": "hello"},
        ]

    def test_headers(self):
        headers = GroqProvider(api_key="gsk-test123")._get_headers()
        assert headers["Authorization"] == "Bearer gsk-test123"
        assert headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_chat_completion_success(self, mock_http, http_response, upstream_payload):
        mock_client, mock_instance = mock_http
        mock_instance.post.return_value = http_response(200, upstream_payload("Test response"))

        provider = GroqProvider(api_key="test-key", timeout=12.0)
        result = await provider.chat_completion([LLMMessage.user("Hello")])

        assert result.content == "Test response"
        assert result.usage["total_tokens"] == 59
        mock_client.assert_called_once_with(timeout=12.0)
        args, kwargs = mock_instance.post.call_args
        assert args[0] == "https://api.groq.com/openai/v1/chat/completions"
        assert kwargs["json"] == {
            "model": "mixtral-8x7b-32768",
            "messages": [{"role": "user", "content": "Hello"}],
        }

    @pytest.mark.asyncio
    async def test_missing_choices_yields_empty_content(self, mock_http, http_response):
        _, mock_instance = mock_http
        mock_instance.post.return_value = http_response(200, {"choices": []})

        result = await GroqProvider(api_key="k").chat_completion([LLMMessage.user("hi")])
        assert result.content == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body,expected", [
        ({"choices": [{"message": {"content": 42}}]}, "42"),
        ({"choices": [{"message": {"content": {"response": "hi"}}}]}, '{"response": "hi"}'),
        ({"choices": [{"message": {"content": None}}]}, ""),
        ({"choices": [{"message": "just a string"}]}, ""),
        ({"choices": ["not an object"]}, ""),
        ({"choices": {"0": {}}}, ""),
        ({"choices": [{"message": {"content": "ok"}}], "usage": "n/a"}, "ok"),
    ])
    async def test_malformed_success_body_yields_text(self, mock_http, http_response, body, expected):
        _, mock_instance = mock_http
        mock_instance.post.return_value = http_response(200, body)

        result = await GroqProvider(api_key="k").chat_completion([LLMMessage.user("hi")])
        assert result.content == expected

    @pytest.mark.asyncio
    async def test_upstream_error_carries_status_and_message(self, mock_http, http_response):
        _, mock_instance = mock_http
        mock_instance.post.return_value = http_response(
            401, {"error": {"message": "Invalid API Key", "type": "invalid_request_error"}}
        )

        with pytest.raises(GatewayError) as exc_info:
            await GroqProvider(api_key="bad").chat_completion([LLMMessage.user("hi")])
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Groq API error: Invalid API Key"

    @pytest.mark.asyncio
    async def test_upstream_error_without_message(self, mock_http, http_response):
        _, mock_instance = mock_http
        mock_instance.post.return_value = http_response(503, text="<html>Service Unavailable</html>")

        with pytest.raises(GatewayError) as exc_info:
            await GroqProvider(api_key="k").chat_completion([LLMMessage.user("hi")])
        assert exc_info.value.status_code == 503
        assert exc_info.value.message == "Groq API error: Unknown error"

    @pytest.mark.asyncio
    async def test_transport_failure_hides_detail(self, mock_http):
        _, mock_instance = mock_http
        mock_instance.post.side_effect = httpx.ConnectError("connection refused to 10.0.0.1")

        with pytest.raises(GatewayError) as exc_info:
            await GroqProvider(api_key="k").chat_completion([LLMMessage.user("hi")])
        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Groq request failed"
        assert "10.0.0.1" not in exc_info.value.message


class TestLLMFactory:
    """Tests for LLM provider factory."""

    def test_create_groq_provider(self):
        provider = create_llm_provider(provider="groq", api_key="test-key", model="llama3-8b-8192")
        assert isinstance(provider, GroqProvider)
        assert provider.model == "llama3-8b-8192"

    def test_no_api_key_raises(self):
        with pytest.raises(ConfigError):
            create_llm_provider(provider="groq", api_key="")

    def test_unsupported_provider_raises(self):
        with pytest.raises(ValueError, match="Unsupported"):
            create_llm_provider(provider="unsupported", api_key="key")

    def test_custom_base_url(self):
        provider = create_llm_provider(api_key="key", base_url="https://custom.api.com/v1")
        assert provider.base_url == "https://custom.api.com/v1"
