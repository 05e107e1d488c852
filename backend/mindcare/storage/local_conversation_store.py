"""
Local Conversation Store - sessions and messages as JSON documents on the
local filesystem. Used for development and tests in place of Supabase.

Layout under the storage root:
    sessions/<session_id>.json      session record
    messages/<session_id>.jsonl     one message per line, in append order
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from .conversation_store import ConversationStore
from .interface import StorageInterface
from ..core.errors import StoreError
from ..models import ChatMessage, ChatSession, Sender

logger = logging.getLogger(__name__)


class LocalConversationStore(ConversationStore):
    """ConversationStore backed by a StorageInterface."""

    def __init__(self, storage: StorageInterface):
        self.storage = storage
        self.sessions_dir = "sessions"
        self.messages_dir = "messages"

    def _session_path(self, session_id: str) -> str:
        return f"{self.sessions_dir}/{session_id}.json"

    def _messages_path(self, session_id: str) -> str:
        return f"{self.messages_dir}/{session_id}.jsonl"

    async def _load_session(self, path: str) -> Optional[ChatSession]:
        content = await self.storage.load(path)
        if content is None:
            return None
        try:
            return ChatSession.model_validate_json(content)
        except ValueError as e:
            logger.error(f"Corrupt session record {path}: {e}")
            raise StoreError() from e

    async def list_sessions(self, owner_id: str) -> List[ChatSession]:
        files = await self.storage.list(self.sessions_dir, pattern="*.json")
        sessions = []
        for file_path in files:
            session = await self._load_session(file_path)
            if session is not None and session.owner_id == owner_id:
                sessions.append(session)
        return sorted(sessions, key=lambda s: s.created_at, reverse=True)

    async def get_session(self, session_id: str) -> Optional[ChatSession]:
        return await self._load_session(self._session_path(session_id))

    async def create_session(self, owner_id: str) -> ChatSession:
        session = ChatSession(
            id=str(uuid.uuid4()),
            owner_id=owner_id,
            created_at=datetime.now(timezone.utc),
        )
        saved = await self.storage.save(self._session_path(session.id), session.model_dump_json())
        if not saved:
            raise StoreError()
        logger.info(f"Session created: {session.id}", extra={"extra_fields": {"owner_id": owner_id}})
        return session

    async def delete_session(self, session_id: str) -> None:
        await self.storage.delete(self._messages_path(session_id))
        await self.storage.delete(self._session_path(session_id))
        logger.info(f"Session deleted: {session_id}")

    async def list_messages(self, session_id: str) -> List[ChatMessage]:
        content = await self.storage.load(self._messages_path(session_id))
        if not content:
            return []
        try:
            messages = [
                ChatMessage.model_validate_json(line)
                for line in content.decode('utf-8').splitlines()
                if line.strip()
            ]
        except ValueError as e:
            logger.error(f"Corrupt message log for session {session_id}: {e}")
            raise StoreError() from e
        # sorted() is stable, so equal timestamps keep append order
        return sorted(messages, key=lambda m: m.created_at)

    async def append_message(
        self,
        session_id: str,
        sender: Sender,
        text: str,
        emotional_analysis: Optional[str] = None,
    ) -> ChatMessage:
        message = ChatMessage(
            id=str(uuid.uuid4()),
            session_id=session_id,
            sender=sender,
            text=text,
            emotional_analysis=emotional_analysis,
            created_at=datetime.now(timezone.utc),
        )
        appended = await self.storage.append(
            self._messages_path(session_id), message.model_dump_json() + "\n"
        )
        if not appended:
            raise StoreError()
        return message
