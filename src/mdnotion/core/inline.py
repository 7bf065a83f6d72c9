"""Inline rich-text tokenizer: split a block's text into formatted spans"""

import re
from typing import Callable, Optional

from mdnotion.core.models import Bold, Code, Italic, Link, PlainText, RichText, Strikethrough


# Tried in order at each delimiter position. Bold must precede italic since
# both open with `*`; every span needs non-empty content between delimiters.
# Link text and url never contain `[`, so a failed link attempt stops at the
# next `[` and long bracket runs are scanned in linear time.
SPAN_PATTERNS: tuple[tuple[re.Pattern, Callable[[re.Match], RichText]], ...] = (
    (re.compile(r"`([^`]+)`"),                  lambda m: Code(text=m.group(1))),
    (re.compile(r"\*\*([^*]+)\*\*"),            lambda m: Bold(text=m.group(1))),
    (re.compile(r"~~([^~]+)~~"),                lambda m: Strikethrough(text=m.group(1))),
    (re.compile(r"\[([^\[\]]+)\]\(([^)\[]+)\)"), lambda m: Link(text=m.group(1), url=m.group(2))),
    (re.compile(r"\*([^*]+)\*"),                lambda m: Italic(text=m.group(1))),
)

DELIMITER_START = re.compile(r"[`*~\[]")


def _match_span(text: str, pos: int) -> tuple[Optional[RichText], int]:
    """Return (span, end) for the first pattern matching at pos, else (None, pos)."""
    for pattern, build in SPAN_PATTERNS:
        m = pattern.match(text, pos)
        if m:
            return build(m), m.end()
    return None, pos


def tokenize_rich_text(text: str) -> tuple[RichText, ...]:
    """Split text into an ordered tuple of spans; unbalanced delimiters stay plain.

    Plain characters between spans are merged into a single PlainText, so no
    two PlainText spans are ever adjacent.
    """
    spans: list[RichText] = []
    plain_start = pos = 0

    while (found := DELIMITER_START.search(text, pos)) is not None:
        pos = found.start()
        span, end = _match_span(text, pos)
        if span is None:
            pos += 1
            continue
        if plain_start < pos:
            spans.append(PlainText(text=text[plain_start:pos]))
        spans.append(span)
        pos = plain_start = end

    if plain_start < len(text):
        spans.append(PlainText(text=text[plain_start:]))
    return tuple(spans)
