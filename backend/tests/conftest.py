"""
Shared test fixtures and configuration.
"""

import json
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

# Set test environment variables before importing app modules
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-for-testing")
os.environ.setdefault("STORE_BACKEND", "local")
os.environ.setdefault("LOCAL_STORAGE_PATH", "/tmp/mindcare_test_data")
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("LOG_API_REQUESTS", "true")


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def http_response():
    """Factory for fake httpx responses."""
    def make(status_code=200, payload=None, text=None):
        resp = MagicMock()
        resp.status_code = status_code
        resp.is_success = 200 <= status_code < 300
        if payload is None:
            resp.json.side_effect = ValueError("No JSON object could be decoded")
            resp.text = text or ""
        else:
            resp.json.return_value = payload
            resp.text = text if text is not None else json.dumps(payload)
        resp.content = resp.text.encode("utf-8")
        return resp
    return make


@pytest.fixture
def mock_http():
    """Patch httpx.AsyncClient; yields (client class mock, client instance)."""
    with patch("httpx.AsyncClient") as mock_client:
        mock_instance = AsyncMock()
        mock_instance.__aenter__ = AsyncMock(return_value=mock_instance)
        mock_instance.__aexit__ = AsyncMock(return_value=False)
        mock_client.return_value = mock_instance
        yield mock_client, mock_instance


def completion_payload(content):
    """Upstream success body carrying ``content`` as the first choice."""
    return {
        "id": "chatcmpl-test",
        "model": "mixtral-8x7b-32768",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
        "usage": {"prompt_tokens": 42, "completion_tokens": 17, "total_tokens": 59},
    }


@pytest.fixture
def upstream_payload():
    return completion_payload
