"""Models module."""

from .chat import (
    Sender,
    CompletionKind,
    ChatSession,
    ChatMessage,
    SessionSummary,
    CompletionRequest,
    SummaryResponse,
    SendMessageRequest,
    SendMessageResponse,
    ErrorResponse,
)

__all__ = [
    'Sender', 'CompletionKind', 'ChatSession', 'ChatMessage', 'SessionSummary',
    'CompletionRequest', 'SummaryResponse',
    'SendMessageRequest', 'SendMessageResponse', 'ErrorResponse',
]
