"""
Conversation Store - the boundary between the application and wherever
sessions and messages are persisted.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import ChatMessage, ChatSession, Sender


class ConversationStore(ABC):
    """
    Session and message persistence.

    Every operation is a single-record read or write; ids and timestamps
    are assigned by the store. Messages are append-only.
    """

    @abstractmethod
    async def list_sessions(self, owner_id: str) -> List[ChatSession]:
        """Sessions owned by ``owner_id``, newest first."""
        pass

    @abstractmethod
    async def get_session(self, session_id: str) -> Optional[ChatSession]:
        pass

    @abstractmethod
    async def create_session(self, owner_id: str) -> ChatSession:
        pass

    @abstractmethod
    async def delete_session(self, session_id: str) -> None:
        """Delete a session together with its messages."""
        pass

    @abstractmethod
    async def list_messages(self, session_id: str) -> List[ChatMessage]:
        """Messages of a session, oldest first."""
        pass

    @abstractmethod
    async def append_message(
        self,
        session_id: str,
        sender: Sender,
        text: str,
        emotional_analysis: Optional[str] = None,
    ) -> ChatMessage:
        pass
