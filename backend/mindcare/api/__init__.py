"""API module."""

from .completion import router as completion_router
from .sessions import router as sessions_router

__all__ = ['completion_router', 'sessions_router']
