"""
Groq LLM Provider.
Talks to Groq's OpenAI-compatible Chat Completions endpoint.
"""

import httpx
import json
import logging
import time
from typing import Optional, List, Dict, Any

from .base import LLMProvider, LLMMessage, LLMResponse
from ..core.errors import GatewayError

logger = logging.getLogger(__name__)


def _extract_error_message(data: Any) -> str:
    """Pull ``error.message`` out of an upstream error body."""
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return "Unknown error"


def _extract_content(data: Dict[str, Any]) -> str:
    """
    Return ``choices[0].message.content`` as text, or an empty string.

    Malformed shapes yield an empty string; non-string content is rendered
    as JSON text.
    """
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message")
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    return json.dumps(content, ensure_ascii=False)


class GroqProvider(LLMProvider):
    """
    Provider for the Groq chat-completion API.
    Any OpenAI-compatible endpoint works by overriding base_url.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "mixtral-8x7b-32768",
        base_url: str = "https://api.groq.com/openai/v1",
        timeout: float = 60.0,
    ):
        super().__init__(api_key, model, base_url, timeout)

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def chat_completion(self, messages: List[LLMMessage], **kwargs) -> LLMResponse:
        """Send request to the Chat Completions endpoint."""
        start_time = time.time()
        url = f"{self.base_url}/chat/completions"
        payload: Dict[str, Any] = {
            "model": kwargs.get("model", self.model),
            "messages": self._format_messages(messages),
        }

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"LLM API call starting: provider=groq, model={payload['model']}, "
                f"{len(messages)} messages"
            )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(url, json=payload, headers=self._get_headers())
        except httpx.HTTPError as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"LLM API call failed: {str(e)}",
                exc_info=True,
                extra={"extra_fields": {
                    "provider": "groq",
                    "model": payload["model"],
                    "duration_ms": round(duration_ms, 2),
                }}
            )
            raise GatewayError() from e

        try:
            data = resp.json()
        except ValueError:
            data = None

        if not resp.is_success:
            logger.error(
                f"Groq API error: status={resp.status_code}, body={resp.text[:500]}",
                extra={"extra_fields": {
                    "provider": "groq",
                    "model": payload["model"],
                    "status_code": resp.status_code,
                }}
            )
            raise GatewayError(
                f"Groq API error: {_extract_error_message(data)}",
                status_code=resp.status_code,
            )

        if not isinstance(data, dict):
            logger.error(f"Groq API returned an undecodable body: {resp.text[:500]}")
            raise GatewayError()

        usage = data.get("usage")
        if not isinstance(usage, dict):
            usage = {}
        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            "LLM API call completed",
            extra={"extra_fields": {
                "provider": "groq",
                "model": data.get("model", payload["model"]),
                "prompt_tokens": usage.get("prompt_tokens", 0),
                "completion_tokens": usage.get("completion_tokens", 0),
                "total_tokens": usage.get("total_tokens", 0),
                "duration_ms": round(duration_ms, 2),
            }}
        )

        return LLMResponse(
            content=_extract_content(data),
            model=data.get("model", payload["model"]),
            usage=usage,
            raw=data,
        )
