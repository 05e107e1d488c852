"""LLM module - chat-completion API providers."""

from .base import LLMProvider, LLMMessage, LLMResponse
from .groq_provider import GroqProvider
from .factory import create_llm_provider

__all__ = [
    'LLMProvider',
    'LLMMessage',
    'LLMResponse',
    'GroqProvider',
    'create_llm_provider',
]
