"""Block matchers: one function per construct, each returning Matched or InvalidSyntax.

Line-based matchers receive the current line from the scan cursor up to (not
including) the next newline. The code block matcher receives the whole
remainder of the source since fences span lines. `Matched.end` is the offset
just past the consumed text, relative to the same origin.
"""

import re
from dataclasses import dataclass
from typing import Sequence, Union

from mdnotion.core.errors import InvalidSyntax
from mdnotion.core.inline import tokenize_rich_text
from mdnotion.core.models import (
    BulletList,
    CodeBlock,
    EmbeddedFile,
    Heading,
    Image,
    NumberedList,
    Paragraph,
    Quote,
    Token,
)


HEADING_PATTERNS = (
    (1, re.compile(r"# (.+)")),
    (2, re.compile(r"## (.+)")),
    (3, re.compile(r"### (.+)")),
)
CODE_BLOCK = re.compile(r"```([^\n]*)\n(.*?)\n```$", re.DOTALL | re.MULTILINE)
BULLET_LIST = re.compile(r"- (.+)")
NUMBERED_LIST = re.compile(r"([0-9]+)\. (.+)")
IMAGE = re.compile(r"!\[([^\[\]]+)\]\(([^)\[]+)\)")
QUOTE = re.compile(r"> (.+)")
BARE_MARKER = re.compile(r"(?:[->]|[0-9]+\.) +")
FENCE = "```"


@dataclass(frozen=True)
class Matched:
    """A successful match: the token plus the span of source it consumed.

    `start` is non-zero only for images found mid-line; the text before it is
    left for the lexer to dispatch on its own.
    """
    token: Token
    end: int
    start: int = 0


MatchResult = Union[Matched, InvalidSyntax]


def match_heading(line: str) -> MatchResult:
    """Levels are tried 1 -> 3; `# ` cannot match a `##` line since its second char is `#`."""
    for level, pattern in HEADING_PATTERNS:
        m = pattern.match(line)
        if m:
            return Matched(Heading(level=level, text=tokenize_rich_text(m.group(1))), m.end())
    return InvalidSyntax("heading", line)


def match_code_block(rest: str) -> MatchResult:
    """Match the first fenced block at the start of rest; the nearest closing fence wins."""
    m = CODE_BLOCK.match(rest)
    if not m:
        return InvalidSyntax("code block", rest.split("\n", 1)[0])
    return Matched(CodeBlock(text=m.group(2), lang=m.group(1)), m.end())


def match_bullet_list(line: str, nesting: int) -> MatchResult:
    m = BULLET_LIST.match(line)
    if not m:
        return InvalidSyntax("bullet list", line)
    return Matched(BulletList(text=tokenize_rich_text(m.group(1)), nesting=nesting), m.end())


def match_numbered_list(line: str, nesting: int) -> MatchResult:
    m = NUMBERED_LIST.match(line)
    if not m:
        return InvalidSyntax("numbered list", line)
    try:
        ordinal = int(m.group(1))
    except ValueError:
        # digit run longer than the interpreter allows for int conversion
        return InvalidSyntax("numbered list", line)
    token = NumberedList(
        text=tokenize_rich_text(m.group(2)),
        ordinal=ordinal,
        nesting=nesting,
    )
    return Matched(token, m.end())


def match_image(line: str) -> MatchResult:
    """Match the first `![alt](url)` anywhere on the line; alt is dropped."""
    m = IMAGE.search(line)
    if not m:
        return InvalidSyntax("image", line)
    return Matched(Image(url=m.group(2)), m.end(), start=m.start())


def match_embedded_file(line: str, patterns: Sequence[re.Pattern]) -> MatchResult:
    """Try each embed pattern at the start of the line, in configured order."""
    for pattern in patterns:
        m = pattern.match(line)
        if m and m.end():
            return Matched(EmbeddedFile(url=m.group(0)), m.end())
    return InvalidSyntax("embedded file", line)


def match_quote(line: str) -> MatchResult:
    m = QUOTE.match(line)
    if not m:
        return InvalidSyntax("quote", line)
    return Matched(Quote(text=tokenize_rich_text(m.group(1))), m.end())


def match_paragraph(line: str) -> Matched:
    """Consume the whole line verbatim; never fails."""
    return Matched(Paragraph(text=tokenize_rich_text(line)), len(line))
