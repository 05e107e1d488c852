"""
Configuration Settings.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    # App info
    app_name: str = "MindCare Companion"
    app_version: str = "1.0.0"
    debug: bool = False

    # Upstream chat-completion API (OpenAI-compatible)
    groq_api_key: Optional[str] = None
    groq_model: str = "mixtral-8x7b-32768"
    groq_base_url: str = "https://api.groq.com/openai/v1"
    llm_timeout: float = 60.0

    # Conversation store
    store_backend: str = "supabase"  # supabase, local
    local_storage_path: str = "./data"

    # Supabase project (persistence + auth)
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    supabase_jwt_secret: str = "change-this-jwt-secret"
    jwt_algorithm: str = "HS256"
    jwt_audience: str = "authenticated"
    access_token_expire_minutes: int = 60

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Logging configuration
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file_path: str = "./logs/mindcare.log"
    log_file_enabled: bool = True
    log_console_enabled: bool = True
    log_json_format: bool = True
    log_api_requests: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = False


def get_settings() -> Settings:
    """Build settings from the current process environment."""
    return Settings()


settings = Settings()
