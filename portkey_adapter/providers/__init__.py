"""
Content Generator Module Initialization
"""

from portkey_adapter.providers.base import (
    ContentGenerator,
    ContentGeneratorConfig,
    PortkeyConfig,
)
from portkey_adapter.providers.factory import create_content_generator
from portkey_adapter.providers.gemini_generator import GeminiContentGenerator
from portkey_adapter.providers.portkey_generator import PortkeyContentGenerator

__all__ = [
    "ContentGenerator",
    "ContentGeneratorConfig",
    "PortkeyConfig",
    "GeminiContentGenerator",
    "PortkeyContentGenerator",
    "create_content_generator",
]
