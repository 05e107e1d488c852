"""
LLM Provider Factory - Creates the configured LLM provider instance.
"""

from typing import Optional
from .base import LLMProvider
from .groq_provider import GroqProvider
from ..core.errors import ConfigError


def create_llm_provider(
    provider: str = "groq",
    api_key: str = "",
    model: Optional[str] = None,
    base_url: Optional[str] = None,
    **kwargs
) -> LLMProvider:
    """
    Create an LLM provider instance based on configuration.

    Args:
        provider: Provider name (only "groq" is supported)
        api_key: API key for the provider
        model: Model name (uses provider default if not specified)
        base_url: Custom base URL (uses provider default if not specified)
        **kwargs: Additional provider-specific parameters

    Returns:
        LLMProvider instance

    Raises:
        ConfigError: api_key is not configured
        ValueError: Unknown provider name
    """
    if not api_key:
        raise ConfigError()

    if provider == "groq":
        params = {"api_key": api_key}
        if model:
            params["model"] = model
        if base_url:
            params["base_url"] = base_url
        params.update(kwargs)
        return GroqProvider(**params)

    raise ValueError(f"Unsupported LLM provider: {provider}")
