"""
Error taxonomy shared by the gateway, normalizer, stores and API layer.

Every error carries the HTTP status it maps to and a caller-safe message;
the API renders them as ``{"error": message}``.
"""

from typing import Optional


class MindCareError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ConfigError(MindCareError):
    """Required configuration (e.g. the upstream credential) is missing."""

    default_message = "API key not configured"


class GatewayError(MindCareError):
    """Upstream completion API returned non-success or could not be reached."""

    default_message = "Groq request failed"


class InvalidUpstreamFormat(MindCareError):
    """Upstream returned JSON that violates the reply contract."""

    default_message = "Invalid response format from Groq - missing response field"


class StoreError(MindCareError):
    """Conversation store request failed."""

    status_code = 502
    default_message = "Conversation store request failed"


class SessionNotFound(MindCareError):
    status_code = 404
    default_message = "Session not found"


class InvalidRequest(MindCareError):
    status_code = 400
    default_message = "Invalid request"
