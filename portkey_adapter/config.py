"""
Configuration Management Module

Reads adapter parameters from environment variables or a .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Adapter Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    DEBUG: bool = False

    # Portkey Gateway Config
    PORTKEY_API_KEY: str | None = None
    # Defaults to https://api.portkey.ai/v1 when unset
    PORTKEY_BASE_URL: str | None = None
    PORTKEY_VERTEX_ACCESS_TOKEN: str | None = None
    PORTKEY_VERTEX_PROJECT_ID: str | None = None
    PORTKEY_VERTEX_REGION: str | None = None

    # Gemini Native Config
    GEMINI_API_KEY: str | None = None
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com"
    GEMINI_MODEL: str = "gemini-2.5-pro"

    # Vertex AI Config (only checked by auth validation)
    GOOGLE_API_KEY: str | None = None
    GOOGLE_CLOUD_PROJECT: str | None = None
    GOOGLE_CLOUD_LOCATION: str | None = None
    GOOGLE_GENAI_USE_VERTEXAI: bool = False

    # Embedding models used when a request does not name one (gateway, native Gemini)
    DEFAULT_EMBEDDING_MODEL: str = "text-embedding-ada-002"
    GEMINI_EMBEDDING_MODEL: str = "text-embedding-004"

    # HTTP Client Config
    # Request timeout (seconds), None disables the internal timeout
    HTTP_TIMEOUT: float | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get adapter configuration (Singleton)

    Returns:
        Settings: Adapter configuration instance
    """
    return Settings()
