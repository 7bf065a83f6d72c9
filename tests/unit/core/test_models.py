"""Unit tests for core/models.py"""

import json

import pytest
from pydantic import TypeAdapter, ValidationError

from mdnotion.core.models import (
    Heading,
    Link,
    NumberedList,
    Paragraph,
    PlainText,
    Token,
    TokenizedDoc,
)


TOKENS = TypeAdapter(list[Token])


def test_tokens_are_frozen():
    """Tokens cannot be mutated once built."""
    token = Heading(level=1, text=(PlainText(text="T"),))
    with pytest.raises(ValidationError):
        token.level = 2


def test_discriminated_union_from_dicts():
    """Raw dicts are routed to the right model by their type field."""
    tokens = TOKENS.validate_python([
        {"type": "heading", "level": 2, "text": [{"type": "text", "text": "x"}]},
        {"type": "paragraph", "text": [{"type": "link", "text": "a", "url": "b"}]},
    ])
    assert tokens == [
        Heading(level=2, text=(PlainText(text="x"),)),
        Paragraph(text=(Link(text="a", url="b"),)),
    ]


@pytest.mark.parametrize("payload", [
    {"type": "heading", "level": 4, "text": []},
    {"type": "numbered_list", "ordinal": 1, "nesting": -1, "text": []},
    {"type": "unknown", "text": []},
])
def test_invalid_token_rejected(payload):
    with pytest.raises(ValidationError):
        TOKENS.validate_python([payload])


def test_numbered_list_defaults_nesting():
    assert NumberedList(text=(), ordinal=5).nesting == 0


def test_tokenized_doc_json_round_trip():
    """TokenizedDoc serializes with type tags and parses back to equal tokens."""
    doc = TokenizedDoc(
        slug="s",
        path="s.md",
        tokens=[Heading(level=1, text=(PlainText(text="T"),))],
    )
    data = json.loads(doc.model_dump_json())
    assert data["tokens"][0]["type"] == "heading"
    assert data["tokens"][0]["text"] == [{"type": "text", "text": "T"}]
    assert TokenizedDoc.model_validate_json(doc.model_dump_json()) == doc
