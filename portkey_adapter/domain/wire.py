"""
Gateway Wire Schema

Request models for the OpenAI-compatible chat completions and embeddings
endpoints, and the decoded unit read back from a response body or a stream
frame.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """Chat message as sent to the gateway"""

    model_config = ConfigDict(frozen=True)

    role: str = Field(..., description="user or assistant")
    content: str = Field(..., description="Message text")


class ChatCompletionRequest(BaseModel):
    """
    Chat completions request body

    Optional generation fields stay None when the caller did not set them and
    are dropped by ``to_payload()``.
    """

    model_config = ConfigDict(frozen=True)

    model: str
    messages: list[ChatMessage] = Field(default_factory=list)
    stream: bool = False
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)


class EmbeddingRequest(BaseModel):
    """Embeddings request body"""

    model_config = ConfigDict(frozen=True)

    model: str
    input: str

    def to_payload(self) -> dict:
        return self.model_dump()


@dataclass(frozen=True)
class WireUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True)
class WireResponseChunk:
    """
    One decoded unit of a gateway response

    Comes either from a whole non-streaming body or from one stream frame.
    """
    text: str = ""
    finish_reason: Optional[str] = None
    usage: Optional[WireUsage] = None
