"""
Data Sanitization Module

Masks credentials in request headers so debug logs never carry them in plain text.
"""

from typing import Any

# Header names whose values are credentials (lowercase)
SENSITIVE_HEADERS = frozenset(
    {"authorization", "x-api-key", "api-key", "x-portkey-api-key", "x-goog-api-key"}
)


def sanitize_authorization(value: str) -> str:
    """
    Sanitize a credential value

    Keeps a short prefix and suffix for identification and masks the middle.

    Args:
        value: Original value, e.g., "Bearer sk-xxxxxxxxxxxx"

    Returns:
        str: Sanitized value

    Examples:
        >>> sanitize_authorization("Bearer sk-1234567890abcdef")
        'Bearer sk-1***...***ef'
        >>> sanitize_authorization("pk-abcdefghijklmnop")
        'pk-a***...***op'
    """
    if not value:
        return value

    prefix = ""
    token = value
    if value.lower().startswith("bearer "):
        prefix = "Bearer "
        token = value[7:]

    if len(token) <= 8:
        return f"{prefix}***"

    return f"{prefix}{token[:4]}***...***{token[-2:]}"


def sanitize_headers(headers: dict[str, Any]) -> dict[str, Any]:
    """
    Sanitize request headers

    Args:
        headers: Original headers dictionary

    Returns:
        dict: Sanitized headers dictionary (new dictionary, original data not modified)
    """
    if not headers:
        return {}

    sanitized = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS and isinstance(value, str):
            sanitized[key] = sanitize_authorization(value)
        else:
            sanitized[key] = value

    return sanitized
