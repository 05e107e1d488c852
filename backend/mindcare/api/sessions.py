"""
Session API endpoints - chat sessions, their messages and summaries for the
authenticated user.
"""

from fastapi import APIRouter, Depends, Response, status
from typing import List

from ..models import (
    ChatMessage,
    ChatSession,
    ErrorResponse,
    SendMessageRequest,
    SendMessageResponse,
    SessionSummary,
    SummaryResponse,
)
from ..services import ChatService
from .dependencies import get_chat_service

router = APIRouter(
    prefix="/sessions",
    tags=["sessions"],
    responses={404: {"model": ErrorResponse}},
)


@router.get("", response_model=List[SessionSummary])
async def list_sessions(service: ChatService = Depends(get_chat_service)):
    """Sessions of the current user, newest first."""
    return await service.list_sessions()


@router.post("", response_model=ChatSession, status_code=status.HTTP_201_CREATED)
async def create_session(service: ChatService = Depends(get_chat_service)):
    """Start a new chat."""
    return await service.create_session()


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str, service: ChatService = Depends(get_chat_service)):
    await service.delete_session(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{session_id}/messages", response_model=List[ChatMessage])
async def list_messages(session_id: str, service: ChatService = Depends(get_chat_service)):
    """Messages of a session, oldest first."""
    return await service.list_messages(session_id)


@router.post("/{session_id}/messages", response_model=SendMessageResponse)
async def send_message(
    session_id: str,
    request: SendMessageRequest,
    service: ChatService = Depends(get_chat_service),
):
    """
    Send a message and get the assistant's reply.

    The user's message is stored first; if the upstream call then fails the
    error is returned and the message stays in the session.
    """
    user_message, assistant_message = await service.send_message(session_id, request.message)
    return SendMessageResponse(user_message=user_message, assistant_message=assistant_message)


@router.post("/{session_id}/summary", response_model=SummaryResponse)
async def summarize_session(session_id: str, service: ChatService = Depends(get_chat_service)):
    """Summarize the user's emotional state across the session."""
    result = await service.summarize_session(session_id)
    return SummaryResponse(summary=result.display_text)
