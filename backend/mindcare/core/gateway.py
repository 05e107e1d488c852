"""
Completion Gateway - the single outbound call to the upstream chat-completion API.
"""

import logging
from typing import Optional

from .errors import ConfigError
from .normalizer import (
    CompletionResult,
    ReplyResult,
    SummaryResult,
    normalize,
    normalize_reply,
    normalize_summary,
)
from .prompts import REPLY, SUMMARY, build_messages
from ..config import Settings
from ..llm.factory import create_llm_provider

logger = logging.getLogger(__name__)


class CompletionGateway:
    """
    Builds the prompt for a completion kind, calls the upstream provider once
    and hands back its raw text. No retries.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 60.0,
        provider_name: str = "groq",
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self.provider_name = provider_name

    @classmethod
    def from_settings(cls, config: Settings) -> "CompletionGateway":
        return cls(
            api_key=config.groq_api_key,
            model=config.groq_model,
            base_url=config.groq_base_url,
            timeout=config.llm_timeout,
        )

    async def invoke(self, kind: str, text: str) -> str:
        """
        Send ``text`` upstream as a ``kind`` request.

        Returns:
            Raw content of the upstream's first choice ("" if absent)

        Raises:
            ConfigError: No credential configured (raised before any network call)
            GatewayError: Upstream non-success status or transport failure
        """
        if not self.api_key:
            logger.error("GROQ_API_KEY is not set")
            raise ConfigError()

        messages = build_messages(kind, text)
        provider = create_llm_provider(
            provider=self.provider_name,
            api_key=self.api_key,
            model=self.model,
            base_url=self.base_url,
            timeout=self.timeout,
        )
        logger.debug(f"Invoking completion gateway: kind={kind}, text_length={len(text)}")
        result = await provider.chat_completion(messages)
        return result.content

    async def complete(self, kind: str, text: str) -> CompletionResult:
        """Invoke upstream and normalize the reply."""
        raw_text = await self.invoke(kind, text)
        return normalize(kind, raw_text)

    async def reply(self, text: str) -> ReplyResult:
        return normalize_reply(await self.invoke(REPLY, text))

    async def summarize(self, transcript: str) -> SummaryResult:
        return normalize_summary(await self.invoke(SUMMARY, transcript))
