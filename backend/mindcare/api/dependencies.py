"""
Request-scoped dependencies. Settings are re-read from the environment on
every request and clients are built per call rather than held globally.
"""

from fastapi import Depends

from ..config import get_settings
from ..core.gateway import CompletionGateway
from ..services import ChatService
from ..storage import ConversationStore, create_conversation_store
from ..utils.auth import get_access_token, get_current_user_id


def get_completion_gateway() -> CompletionGateway:
    return CompletionGateway.from_settings(get_settings())


def get_conversation_store(token: str = Depends(get_access_token)) -> ConversationStore:
    return create_conversation_store(get_settings(), access_token=token)


def get_chat_service(
    user_id: str = Depends(get_current_user_id),
    store: ConversationStore = Depends(get_conversation_store),
    gateway: CompletionGateway = Depends(get_completion_gateway),
) -> ChatService:
    return ChatService(store, gateway, owner_id=user_id)
