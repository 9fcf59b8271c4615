"""
Response Domain Model

Defines the internal response shapes returned by content generators. Every
response carries exactly one candidate; derived views such as ``text`` are
read-only properties, so they are not dataclass fields and never show up in
``to_dict()``.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from portkey_adapter.domain.content import Content, Part, Role

# Finish reason reported when the backend did not send one
DEFAULT_FINISH_REASON = "STOP"


@dataclass(frozen=True)
class UsageMetadata:
    """Aggregate token counters of one response or stream fragment."""
    prompt_token_count: int = 0
    candidates_token_count: int = 0
    total_token_count: int = 0


@dataclass(frozen=True)
class Candidate:
    """One proposed response."""
    content: Content
    finish_reason: str = DEFAULT_FINISH_REASON
    index: int = 0

    @property
    def text(self) -> str:
        return self.content.text


@dataclass(frozen=True)
class GenerateContentResponse:
    """
    Internal response

    Built fresh for every non-streaming call and for every decoded stream
    fragment, never mutated afterwards.
    """
    candidates: tuple[Candidate, ...] = ()
    usage_metadata: UsageMetadata = field(default_factory=UsageMetadata)

    @classmethod
    def from_text(
        cls,
        text: str,
        finish_reason: Optional[str] = None,
        usage: Optional[UsageMetadata] = None,
    ) -> "GenerateContentResponse":
        """
        Build the single-candidate response for a piece of assistant text

        Args:
            text: Candidate text
            finish_reason: Backend finish reason, defaults to "STOP"
            usage: Token counters, default to zeros

        Returns:
            GenerateContentResponse: Response with one candidate at index 0
        """
        candidate = Candidate(
            content=Content(role=Role.ASSISTANT.value, parts=(Part(text=text),)),
            finish_reason=finish_reason or DEFAULT_FINISH_REASON,
            index=0,
        )
        return cls(candidates=(candidate,), usage_metadata=usage or UsageMetadata())

    @property
    def text(self) -> str:
        """Text of the first candidate, empty when there is none."""
        if not self.candidates:
            return ""
        return self.candidates[0].text

    @property
    def finish_reason(self) -> Optional[str]:
        if not self.candidates:
            return None
        return self.candidates[0].finish_reason

    # The views below exist for callers written against the native response
    # shape. The gateway path never produces these modalities.

    @property
    def data(self) -> Optional[str]:
        return None

    @property
    def function_calls(self) -> Optional[list[Any]]:
        return None

    @property
    def executable_code(self) -> Optional[str]:
        return None

    @property
    def code_execution_result(self) -> Optional[str]:
        return None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CountTokensResponse:
    """Token count result. May be an estimate; nothing marks it as one."""
    total_tokens: int = 0


@dataclass(frozen=True)
class ContentEmbedding:
    values: tuple[float, ...] = ()


@dataclass(frozen=True)
class EmbedContentResponse:
    """Embedding result, always holding a single vector."""
    embeddings: tuple[ContentEmbedding, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
