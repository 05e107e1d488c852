"""
Conversation Store Factory - builds the configured store for one request.
"""

from typing import Optional

from .conversation_store import ConversationStore
from .local_conversation_store import LocalConversationStore
from .local_storage import LocalStorage
from .supabase_store import SupabaseConversationStore
from ..config import Settings
from ..core.errors import ConfigError


def create_conversation_store(
    config: Settings,
    access_token: Optional[str] = None,
) -> ConversationStore:
    """
    Create a conversation store based on configuration.

    Args:
        config: Settings with ``store_backend`` ("supabase" or "local")
        access_token: Caller's JWT, forwarded to Supabase for row-level security

    Returns:
        ConversationStore instance
    """
    if config.store_backend == "supabase":
        if not config.supabase_url or not config.supabase_anon_key:
            raise ConfigError("Supabase is not configured")
        return SupabaseConversationStore(
            url=config.supabase_url,
            api_key=config.supabase_anon_key,
            access_token=access_token,
        )

    if config.store_backend == "local":
        return LocalConversationStore(LocalStorage(config.local_storage_path))

    raise ValueError(f"Unsupported store backend: {config.store_backend}")
