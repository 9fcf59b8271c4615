"""
Domain Model Module Initialization
"""

from portkey_adapter.domain.content import (
    Content,
    ContentListUnion,
    CountTokensRequest,
    EmbedContentRequest,
    GenerateContentRequest,
    GenerationConfig,
    NormalizedMessage,
    Part,
    Role,
    TextContent,
)
from portkey_adapter.domain.response import (
    Candidate,
    ContentEmbedding,
    CountTokensResponse,
    EmbedContentResponse,
    GenerateContentResponse,
    UsageMetadata,
)
from portkey_adapter.domain.wire import (
    ChatCompletionRequest,
    ChatMessage,
    EmbeddingRequest,
    WireResponseChunk,
    WireUsage,
)

__all__ = [
    "Content",
    "ContentListUnion",
    "CountTokensRequest",
    "EmbedContentRequest",
    "GenerateContentRequest",
    "GenerationConfig",
    "NormalizedMessage",
    "Part",
    "Role",
    "TextContent",
    "Candidate",
    "ContentEmbedding",
    "CountTokensResponse",
    "EmbedContentResponse",
    "GenerateContentResponse",
    "UsageMetadata",
    "ChatCompletionRequest",
    "ChatMessage",
    "EmbeddingRequest",
    "WireResponseChunk",
    "WireUsage",
]
