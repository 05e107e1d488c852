"""
Chat Models - sessions, messages and completion request/response bodies.
"""

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, Field

Sender = Literal["user", "assistant"]
CompletionKind = Literal["reply", "summary"]


class ChatSession(BaseModel):
    """A conversation thread owned by one user."""
    id: str
    owner_id: str
    created_at: datetime


class ChatMessage(BaseModel):
    """An append-only message inside a session."""
    id: str
    session_id: str
    sender: Sender
    text: str
    emotional_analysis: Optional[str] = None
    created_at: datetime


class SessionSummary(ChatSession):
    """Session as listed in the sidebar, with a display title."""
    title: str


class CompletionRequest(BaseModel):
    """Inbound body of the completion endpoint."""
    message: str
    type: CompletionKind = "reply"


class SummaryResponse(BaseModel):
    summary: Optional[str] = None


class SendMessageRequest(BaseModel):
    message: str = Field(..., min_length=1)


class SendMessageResponse(BaseModel):
    user_message: ChatMessage
    assistant_message: ChatMessage


class ErrorResponse(BaseModel):
    error: str
