"""
Chat Service - the send-message and summarize flows for one user.

A user's message is persisted before the gateway is called so the text
survives an upstream failure. The gateway call and the store writes are
separate round-trips; if the assistant write fails after a successful
completion, the session keeps the user message without a reply.
"""

import logging
from typing import List, Sequence, Tuple

from ..core.errors import InvalidRequest, SessionNotFound
from ..core.gateway import CompletionGateway
from ..core.normalizer import SummaryResult
from ..models import ChatMessage, ChatSession, SessionSummary
from ..storage import ConversationStore
from ..utils.formatting import format_session_title

logger = logging.getLogger(__name__)

SENDER_LABELS = {"user": "User", "assistant": "AI"}


def build_transcript(messages: Sequence[ChatMessage]) -> str:
    """Render messages as ``User: ...`` / ``AI: ...`` lines."""
    return "\n".join(f"{SENDER_LABELS[m.sender]}: {m.text}" for m in messages)


class ChatService:
    """Session and message operations scoped to ``owner_id``."""

    def __init__(self, store: ConversationStore, gateway: CompletionGateway, owner_id: str):
        self.store = store
        self.gateway = gateway
        self.owner_id = owner_id

    async def get_session(self, session_id: str) -> ChatSession:
        """Return the session if it exists and belongs to the owner."""
        session = await self.store.get_session(session_id)
        if session is None or session.owner_id != self.owner_id:
            raise SessionNotFound()
        return session

    async def list_sessions(self) -> List[SessionSummary]:
        sessions = await self.store.list_sessions(self.owner_id)
        return [
            SessionSummary(**s.model_dump(), title=format_session_title(s.created_at))
            for s in sessions
        ]

    async def create_session(self) -> ChatSession:
        return await self.store.create_session(self.owner_id)

    async def delete_session(self, session_id: str) -> None:
        await self.get_session(session_id)
        await self.store.delete_session(session_id)

    async def list_messages(self, session_id: str) -> List[ChatMessage]:
        await self.get_session(session_id)
        return await self.store.list_messages(session_id)

    async def send_message(self, session_id: str, text: str) -> Tuple[ChatMessage, ChatMessage]:
        """
        Store the user's message, ask upstream for a reply and store it.

        Returns:
            (user_message, assistant_message)

        Raises:
            InvalidRequest: Blank message
            SessionNotFound: Unknown or foreign session
            ConfigError, GatewayError, InvalidUpstreamFormat: From the gateway,
                after the user message has been stored
        """
        if not text.strip():
            raise InvalidRequest("Message must not be empty")
        await self.get_session(session_id)

        user_message = await self.store.append_message(session_id, "user", text)
        logger.debug(f"User message stored: session={session_id}, message={user_message.id}")

        result = await self.gateway.reply(text)

        assistant_message = await self.store.append_message(
            session_id, "assistant", result.response, result.emotional_analysis
        )
        logger.info(
            "Message exchange stored",
            extra={"extra_fields": {
                "session_id": session_id,
                "user_message_id": user_message.id,
                "assistant_message_id": assistant_message.id,
            }}
        )
        return user_message, assistant_message

    async def summarize_session(self, session_id: str) -> SummaryResult:
        """Summarize the emotional state shown across a session's messages."""
        messages = await self.list_messages(session_id)
        return await self.gateway.summarize(build_transcript(messages))
