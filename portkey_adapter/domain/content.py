"""
Content Domain Model

Defines the request-side shapes accepted by content generators: the content
variants callers may pass, the normalized message list produced from them,
and the generation parameters.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from pydantic import TypeAdapter


class Role(str, Enum):
    """Role of a normalized message."""
    USER = "user"
    ASSISTANT = "assistant"


# Role name used by the Gemini-style content shape for model turns
MODEL_ROLE = "model"


@dataclass(frozen=True)
class Part:
    """One part of a structured content. Only text parts carry anything we can send."""
    text: Optional[str] = None


@dataclass(frozen=True)
class Content:
    """Structured content carrying a parts collection."""
    role: Optional[str] = None
    parts: tuple[Part, ...] = ()

    @property
    def text(self) -> str:
        """Concatenated text of all parts."""
        return "".join(part.text for part in self.parts if part.text)


@dataclass(frozen=True)
class TextContent:
    """Structured content carrying a direct text field and no parts."""
    text: str = ""


# A bare string is the third variant
ContentVariant = Union[Content, TextContent, str]

# What callers may pass as "contents": one item or a sequence of them,
# where an item is a variant or its plain-dict rendition
ContentUnion = Union[ContentVariant, Mapping[str, Any]]
ContentListUnion = Union[ContentUnion, Sequence[ContentUnion]]


@dataclass(frozen=True)
class NormalizedMessage:
    """
    Role-tagged text message

    Produced by the normalizer; role is always user or assistant and text is never empty.
    """
    role: Role
    text: str


@dataclass(frozen=True)
class GenerationConfig:
    """
    Generation parameters

    Absent (None) fields are left out of the outgoing request entirely.
    """
    max_output_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None

    # Accepted spellings for each field when built from a mapping
    _ALIASES = {
        "max_output_tokens": ("max_output_tokens", "maxOutputTokens", "max_tokens"),
        "temperature": ("temperature",),
        "top_p": ("top_p", "topP"),
    }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GenerationConfig":
        """
        Build from a snake_case or camelCase mapping

        Args:
            data: e.g. {"maxOutputTokens": 256, "topP": 0.9}

        Returns:
            GenerationConfig: Unknown keys are ignored

        Raises:
            pydantic.ValidationError: A value has the wrong type, e.g. {"temperature": "hot"}
        """
        values: dict[str, Any] = {}
        for name, aliases in cls._ALIASES.items():
            for alias in aliases:
                if data.get(alias) is not None:
                    values[name] = data[alias]
                    break
        return _GENERATION_CONFIG_ADAPTER.validate_python(values)

    @classmethod
    def coerce(
        cls, value: Union["GenerationConfig", Mapping[str, Any], None]
    ) -> Optional["GenerationConfig"]:
        if value is None or isinstance(value, GenerationConfig):
            return value
        return cls.from_mapping(value)


_GENERATION_CONFIG_ADAPTER = TypeAdapter(GenerationConfig)


@dataclass(frozen=True)
class GenerateContentRequest:
    """Parameters of generate_content / generate_content_stream."""
    contents: ContentListUnion = ()
    config: Optional[GenerationConfig] = None
    # Overrides the generator's configured model when set
    model: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "config", GenerationConfig.coerce(self.config))


@dataclass(frozen=True)
class CountTokensRequest:
    """Parameters of count_tokens."""
    contents: ContentListUnion = ()
    model: Optional[str] = None


@dataclass(frozen=True)
class EmbedContentRequest:
    """Parameters of embed_content."""
    contents: ContentListUnion = ()
    # Embedding model; the configured default embedding model is used when unset
    model: Optional[str] = None
