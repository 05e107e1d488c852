"""
Supabase Conversation Store - sessions and messages in the Supabase project's
Postgres tables, reached through the PostgREST API.

Tables:
    chat_sessions (session_id, user_id, created_at)
    chat_messages (message_id, session_id, sender, message, emotional_analysis, created_at)

Requests carry the caller's access token so row-level security applies.
"""

import httpx
import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .conversation_store import ConversationStore
from ..core.errors import StoreError
from ..models import ChatMessage, ChatSession, Sender

logger = logging.getLogger(__name__)

SESSIONS_TABLE = "chat_sessions"
MESSAGES_TABLE = "chat_messages"
SESSION_COLUMNS = "session_id,user_id,created_at"

T = TypeVar("T")


def _to_session(row: Dict[str, Any]) -> ChatSession:
    return ChatSession(
        id=str(row["session_id"]),
        owner_id=str(row["user_id"]),
        created_at=row["created_at"],
    )


def _to_message(row: Dict[str, Any]) -> ChatMessage:
    return ChatMessage(
        id=str(row["message_id"]),
        session_id=str(row["session_id"]),
        sender=row["sender"],
        text=row["message"],
        emotional_analysis=row.get("emotional_analysis"),
        created_at=row["created_at"],
    )


def _map_rows(rows: Any, mapper: Callable[[Dict[str, Any]], T]) -> List[T]:
    """Map PostgREST rows to models; malformed rows are a store failure."""
    if rows is None:
        return []
    if not isinstance(rows, list):
        logger.error(f"Supabase returned a non-list body: {str(rows)[:200]}")
        raise StoreError()
    try:
        return [mapper(row) for row in rows]
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Supabase returned a malformed row: {e}")
        raise StoreError() from e


class SupabaseConversationStore(ConversationStore):
    """ConversationStore over Supabase's REST interface."""

    def __init__(
        self,
        url: str,
        api_key: str,
        access_token: Optional[str] = None,
        timeout: float = 30.0,
    ):
        """
        Args:
            url: Project URL, e.g. https://<ref>.supabase.co
            api_key: Project anon key
            access_token: Caller's JWT; falls back to the anon key
            timeout: Per-request timeout in seconds
        """
        self.rest_url = f"{url.rstrip('/')}/rest/v1"
        self.api_key = api_key
        self.access_token = access_token
        self.timeout = timeout

    def _get_headers(self, prefer: Optional[str] = None) -> Dict[str, str]:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.access_token or self.api_key}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    async def _request(
        self,
        method: str,
        table: str,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Any] = None,
        prefer: Optional[str] = None,
    ) -> Any:
        url = f"{self.rest_url}/{table}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.request(
                    method, url, params=params, json=json, headers=self._get_headers(prefer)
                )
        except httpx.HTTPError as e:
            logger.error(f"Supabase request failed: {method} {table} - {str(e)}", exc_info=True)
            raise StoreError() from e

        if not resp.is_success:
            logger.error(
                f"Supabase error: {method} {table} - {resp.status_code}",
                extra={"extra_fields": {"status_code": resp.status_code, "body": resp.text[:500]}}
            )
            raise StoreError()

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"Supabase returned an undecodable body: {method} {table} - {resp.text[:200]}")
            raise StoreError() from e

    async def list_sessions(self, owner_id: str) -> List[ChatSession]:
        rows = await self._request("GET", SESSIONS_TABLE, params={
            "select": SESSION_COLUMNS,
            "user_id": f"eq.{owner_id}",
            "order": "created_at.desc",
        })
        return _map_rows(rows, _to_session)

    async def get_session(self, session_id: str) -> Optional[ChatSession]:
        rows = await self._request("GET", SESSIONS_TABLE, params={
            "select": SESSION_COLUMNS,
            "session_id": f"eq.{session_id}",
            "limit": "1",
        })
        sessions = _map_rows(rows, _to_session)
        return sessions[0] if sessions else None

    async def create_session(self, owner_id: str) -> ChatSession:
        rows = await self._request(
            "POST", SESSIONS_TABLE,
            json=[{"user_id": owner_id}],
            prefer="return=representation",
        )
        sessions = _map_rows(rows, _to_session)
        if not sessions:
            raise StoreError("Conversation store returned no session")
        return sessions[0]

    async def delete_session(self, session_id: str) -> None:
        await self._request("DELETE", MESSAGES_TABLE, params={"session_id": f"eq.{session_id}"})
        await self._request("DELETE", SESSIONS_TABLE, params={"session_id": f"eq.{session_id}"})

    async def list_messages(self, session_id: str) -> List[ChatMessage]:
        rows = await self._request("GET", MESSAGES_TABLE, params={
            "select": "*",
            "session_id": f"eq.{session_id}",
            "order": "created_at.asc",
        })
        return _map_rows(rows, _to_message)

    async def append_message(
        self,
        session_id: str,
        sender: Sender,
        text: str,
        emotional_analysis: Optional[str] = None,
    ) -> ChatMessage:
        record: Dict[str, Any] = {
            "session_id": session_id,
            "sender": sender,
            "message": text,
        }
        if emotional_analysis is not None:
            record["emotional_analysis"] = emotional_analysis

        rows = await self._request(
            "POST", MESSAGES_TABLE,
            json=[record],
            prefer="return=representation",
        )
        messages = _map_rows(rows, _to_message)
        if not messages:
            raise StoreError("Conversation store returned no message")
        return messages[0]
