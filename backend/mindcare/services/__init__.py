"""Services module - application flows built on the core and storage layers."""

from .chat_service import ChatService, build_transcript

__all__ = ['ChatService', 'build_transcript']
