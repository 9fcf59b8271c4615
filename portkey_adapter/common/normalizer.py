"""
Content Normalization

Flattens the accepted "contents" shapes (a bare string, one structured
content, or a sequence of them) into an ordered list of role-tagged text
messages. Shapes that carry no usable text are skipped, never rejected.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from portkey_adapter.domain.content import (
    MODEL_ROLE,
    Content,
    ContentListUnion,
    ContentVariant,
    NormalizedMessage,
    Part,
    Role,
    TextContent,
)


def to_content_variant(item: Any) -> Optional[ContentVariant]:
    """
    Coerce one contents element into a content variant

    Plain dicts in the Gemini shape are converted; variants pass through.

    Args:
        item: One element of the caller's contents

    Returns:
        Content | TextContent | str, or None when the shape is not supported
    """
    if isinstance(item, (str, Content, TextContent)):
        return item
    if not isinstance(item, Mapping):
        return None

    parts = item.get("parts")
    if parts is not None:
        if isinstance(parts, (str, Mapping)) or not hasattr(parts, "__iter__"):
            return None
        role = item.get("role")
        return Content(
            role=role if isinstance(role, str) else None,
            parts=tuple(_to_part(p) for p in parts),
        )

    text = item.get("text")
    if isinstance(text, str):
        return TextContent(text=text)
    return None


def _to_part(part: Any) -> Part:
    if isinstance(part, Part):
        return part
    if isinstance(part, str):
        return Part(text=part)
    if isinstance(part, Mapping):
        text = part.get("text")
        if isinstance(text, str):
            return Part(text=text)
    # inline data, function calls and other non-text parts
    return Part()


def _content_parts(content: Content) -> list[Part]:
    # Content built directly may still hold raw dicts, strings or None as parts
    parts = content.parts
    if isinstance(parts, (str, Mapping)) or not isinstance(parts, Sequence):
        return []
    return [_to_part(p) for p in parts]


def _as_sequence(contents: ContentListUnion) -> list[Any]:
    if contents is None:
        return []
    if isinstance(contents, (str, Mapping, Content, TextContent)):
        return [contents]
    if isinstance(contents, Sequence):
        return list(contents)
    return [contents]


def _role_for(content_role: Optional[str]) -> Role:
    return Role.ASSISTANT if content_role == MODEL_ROLE else Role.USER


def normalize_contents(contents: ContentListUnion) -> list[NormalizedMessage]:
    """
    Normalize contents into messages

    - bare string: one user message
    - content with parts: one message per non-empty text part, role
      "model" becomes assistant and anything else becomes user
    - content with a direct text field: one user message
    Empty texts and unsupported elements are dropped, input order is kept.

    Args:
        contents: A single element or a sequence of elements

    Returns:
        list[NormalizedMessage]: Normalized messages, possibly empty
    """
    messages: list[NormalizedMessage] = []

    for item in _as_sequence(contents):
        variant = to_content_variant(item)

        if isinstance(variant, Content):
            role = _role_for(variant.role)
            for part in _content_parts(variant):
                if isinstance(part.text, str) and part.text:
                    messages.append(NormalizedMessage(role=role, text=part.text))
        elif isinstance(variant, TextContent):
            if variant.text:
                messages.append(NormalizedMessage(role=Role.USER, text=variant.text))
        elif isinstance(variant, str):
            if variant:
                messages.append(NormalizedMessage(role=Role.USER, text=variant))

    return messages


def join_text(messages: list[NormalizedMessage], separator: str = "") -> str:
    """Concatenate message texts with the given separator."""
    return separator.join(message.text for message in messages)
