"""
Content Normalization Unit Tests
"""

from portkey_adapter.common.normalizer import (
    join_text,
    normalize_contents,
    to_content_variant,
)
from portkey_adapter.domain.content import (
    Content,
    NormalizedMessage,
    Part,
    Role,
    TextContent,
)


def test_bare_string_becomes_user_message():
    assert normalize_contents("hello") == [NormalizedMessage(role=Role.USER, text="hello")]


def test_mixed_sequence_preserves_order_and_maps_model_role():
    messages = normalize_contents(["hi", {"role": "model", "parts": [{"text": "yo"}]}])
    assert messages == [
        NormalizedMessage(role=Role.USER, text="hi"),
        NormalizedMessage(role=Role.ASSISTANT, text="yo"),
    ]


def test_one_message_per_text_part():
    content = {"role": "user", "parts": [{"text": "a"}, {"text": "b"}, {"text": "c"}]}
    assert [m.text for m in normalize_contents(content)] == ["a", "b", "c"]


def test_parts_without_text_are_skipped():
    content = {
        "role": "model",
        "parts": [
            {"text": ""},
            {"inline_data": {"mime_type": "image/png", "data": "AAAA"}},
            {"function_call": {"name": "f"}},
            {"text": "kept"},
        ],
    }
    assert normalize_contents(content) == [NormalizedMessage(role=Role.ASSISTANT, text="kept")]


def test_unknown_roles_are_rewritten_to_user():
    contents = [
        {"role": "system", "parts": [{"text": "s"}]},
        {"role": "assistant", "parts": [{"text": "a"}]},
        {"parts": [{"text": "n"}]},
    ]
    assert {m.role for m in normalize_contents(contents)} == {Role.USER}


def test_direct_text_object_becomes_user_message():
    assert normalize_contents({"text": "plain"}) == [NormalizedMessage(role=Role.USER, text="plain")]
    assert normalize_contents(TextContent(text="typed")) == [NormalizedMessage(role=Role.USER, text="typed")]


def test_dataclass_variants_are_accepted():
    contents = [
        Content(role="model", parts=(Part(text="one"), Part(), Part(text="two"))),
        "three",
    ]
    assert normalize_contents(contents) == [
        NormalizedMessage(role=Role.ASSISTANT, text="one"),
        NormalizedMessage(role=Role.ASSISTANT, text="two"),
        NormalizedMessage(role=Role.USER, text="three"),
    ]


def test_empty_and_malformed_elements_are_dropped_without_error():
    contents = [
        "",
        None,
        42,
        {"role": "user"},
        {"parts": "not-a-list"},
        {"text": None},
        {"text": ""},
        {"role": "user", "parts": []},
        "ok",
    ]
    assert normalize_contents(contents) == [NormalizedMessage(role=Role.USER, text="ok")]


def test_none_and_empty_contents():
    assert normalize_contents(None) == []
    assert normalize_contents([]) == []


def test_to_content_variant_prefers_parts_over_text():
    variant = to_content_variant({"role": "model", "text": "ignored", "parts": [{"text": "x"}]})
    assert variant == Content(role="model", parts=(Part(text="x"),))


def test_to_content_variant_string_parts():
    variant = to_content_variant({"role": "user", "parts": ["a", {"text": "b"}]})
    assert variant == Content(role="user", parts=(Part(text="a"), Part(text="b")))


def test_join_text():
    messages = normalize_contents(["ab", "cd"])
    assert join_text(messages) == "abcd"
    assert join_text(messages, " ") == "ab cd"


def test_content_with_raw_parts_is_normalized_without_error():
    content = Content(role="model", parts=({"text": "yo"}, "hi", None, Part(text=""), {"inlineData": {}}))
    assert normalize_contents([content, "next"]) == [
        NormalizedMessage(role=Role.ASSISTANT, text="yo"),
        NormalizedMessage(role=Role.ASSISTANT, text="hi"),
        NormalizedMessage(role=Role.USER, text="next"),
    ]


def test_content_with_non_sequence_parts_is_skipped():
    assert normalize_contents([Content(role="user", parts=None), Content(parts="loose")]) == []
