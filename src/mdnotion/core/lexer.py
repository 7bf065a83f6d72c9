"""Block scanner: walk markdown source and dispatch each position to a block matcher"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from mdnotion.config import Settings
from mdnotion.core import blocks
from mdnotion.core.blocks import Matched, MatchResult
from mdnotion.core.errors import InvalidSyntax
from mdnotion.core.models import Token


logger = logging.getLogger(__name__)


@dataclass
class ScanState:
    """Cursor and pending indent for one run.

    pending_indent counts spaces seen since the scanner last advanced past a
    token or a newline; list matchers read it as their nesting.
    """
    cursor: int = 0
    pending_indent: int = 0


def _current_line(source: str, cursor: int) -> str:
    end = source.find("\n", cursor)
    return source[cursor:] if end == -1 else source[cursor:end]


def _splits_fence(line: str, image: Matched) -> bool:
    """True if the text on either side of the image would start a code fence once split off."""
    return (
        line[:image.start].startswith(blocks.FENCE)
        or line[image.end:].lstrip(" ").startswith(blocks.FENCE)
    )


class Lexer:
    """Markdown -> block tokens. Holds only read-only configuration, so one
    instance may serve many documents (and threads)."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.embed_prefixes = self.settings.embed_prefixes
        self.embed_patterns = tuple(re.compile(p) for p in self.settings.embed_patterns)

    def tokenize(self, markdown: str) -> list[Token]:
        """Return the ordered token sequence for markdown. Never fails."""
        tokens: list[Token] = []
        self._scan(markdown, ScanState(), tokens)
        logger.debug("Tokenized %d chars into %d tokens", len(markdown), len(tokens))
        return tokens

    def _scan(self, source: str, state: ScanState, tokens: list[Token]) -> None:
        while state.cursor < len(source):
            if source[state.cursor] == " ":
                state.pending_indent += 1
                state.cursor += 1
                continue

            line = _current_line(source, state.cursor)
            result = self._dispatch(source, line, state)
            if result is None:
                state.cursor += 1
                state.pending_indent = 0
                continue
            if isinstance(result, InvalidSyntax):
                logger.debug("%s at offset %d; reading line as paragraph", result, state.cursor)
                result = blocks.match_paragraph(line)

            if result.start and not blocks.BARE_MARKER.fullmatch(line[:result.start]):
                # Text before a mid-line image is scanned as a line of its own;
                # a lone list or quote marker there carries nothing and is dropped.
                self._scan(line[:result.start], ScanState(pending_indent=state.pending_indent), tokens)
            tokens.append(result.token)
            state.cursor += result.end
            state.pending_indent = 0

    def _dispatch(self, source: str, line: str, state: ScanState) -> Optional[MatchResult]:
        """Pick the matcher for the construct at the cursor; None for a bare newline."""
        char = source[state.cursor]
        if char == "#":
            return blocks.match_heading(line)
        if blocks.IMAGE.search(line):
            image = blocks.match_image(line)
            if _splits_fence(line, image):
                return blocks.match_paragraph(line)
            return image
        if self._at_embed_prefix(source, state.cursor):
            return blocks.match_embedded_file(line, self.embed_patterns)
        if char == ">":
            return blocks.match_quote(line)
        if char == "-":
            return blocks.match_bullet_list(line, state.pending_indent)
        if char.isdigit():
            return blocks.match_numbered_list(line, state.pending_indent)
        if source.startswith(blocks.FENCE, state.cursor):
            return blocks.match_code_block(source[state.cursor:])
        if char == "\n":
            return None
        return blocks.match_paragraph(line)

    def _at_embed_prefix(self, source: str, cursor: int) -> bool:
        return any(source.startswith(prefix, cursor) for prefix in self.embed_prefixes)


def tokenize(markdown: str, settings: Optional[Settings] = None) -> list[Token]:
    """Tokenize markdown with a throwaway Lexer."""
    return Lexer(settings).tokenize(markdown)
