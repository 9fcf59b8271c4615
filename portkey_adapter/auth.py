"""
Auth Method Selection

Checks that the environment carries the credentials a selected auth method
needs, before any content generator is constructed.
"""

from enum import Enum
from typing import Optional

from portkey_adapter.config import Settings


class AuthType(str, Enum):
    """Supported auth methods."""
    LOGIN_WITH_GOOGLE_PERSONAL = "oauth-personal"
    USE_GEMINI = "gemini-api-key"
    USE_VERTEX_AI = "vertex-ai"
    USE_PORTKEY = "portkey"


def validate_auth_method(
    auth_method: str,
    settings: Optional[Settings] = None,
) -> Optional[str]:
    """
    Validate the environment for an auth method

    Reads the environment and .env afresh on every call unless settings are
    given, so fixing a .env takes effect without a restart.

    Args:
        auth_method: AuthType value
        settings: Pre-loaded settings

    Returns:
        Optional[str]: Remediation message, or None when valid
    """
    if settings is None:
        settings = Settings()

    if auth_method == AuthType.LOGIN_WITH_GOOGLE_PERSONAL:
        return None

    if auth_method == AuthType.USE_GEMINI:
        if not settings.GEMINI_API_KEY:
            return (
                "GEMINI_API_KEY environment variable not found. "
                "Add that to your .env and try again, no reload needed!"
            )
        return None

    if auth_method == AuthType.USE_VERTEX_AI:
        has_vertex_project_location = bool(
            settings.GOOGLE_CLOUD_PROJECT and settings.GOOGLE_CLOUD_LOCATION
        )
        if not has_vertex_project_location and not settings.GOOGLE_API_KEY:
            return (
                "Must specify GOOGLE_GENAI_USE_VERTEXAI=true and either:\n"
                "• GOOGLE_CLOUD_PROJECT and GOOGLE_CLOUD_LOCATION environment variables.\n"
                "• GOOGLE_API_KEY environment variable (if using express mode).\n"
                "Update your .env and try again, no reload needed!"
            )
        return None

    if auth_method == AuthType.USE_PORTKEY:
        if not settings.PORTKEY_API_KEY:
            return (
                "PORTKEY_API_KEY environment variable not found.\n"
                "Also need GEMINI_API_KEY (or PORTKEY_VERTEX_ACCESS_TOKEN) for Vertex AI access.\n"
                "Optional: PORTKEY_VERTEX_PROJECT_ID, PORTKEY_VERTEX_REGION, PORTKEY_BASE_URL.\n"
                "Add these to your .env and try again, no reload needed!"
            )
        if not settings.GEMINI_API_KEY and not settings.PORTKEY_VERTEX_ACCESS_TOKEN:
            return (
                "GEMINI_API_KEY or PORTKEY_VERTEX_ACCESS_TOKEN environment variable not found.\n"
                "Portkey needs a Gemini API key to access Vertex AI.\n"
                "Add this to your .env and try again, no reload needed!"
            )
        return None

    return "Invalid auth method selected."
