"""Storage module - conversation persistence and the blob storage it can sit on."""

from .interface import StorageInterface
from .local_storage import LocalStorage
from .conversation_store import ConversationStore
from .local_conversation_store import LocalConversationStore
from .supabase_store import SupabaseConversationStore
from .factory import create_conversation_store

__all__ = [
    'StorageInterface', 'LocalStorage', 'ConversationStore',
    'LocalConversationStore', 'SupabaseConversationStore', 'create_conversation_store',
]
