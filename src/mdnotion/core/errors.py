"""Typed failure values returned by block matchers"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InvalidSyntax:
    """A block matcher's refusal: the text at the cursor does not fit its construct.

    Returned rather than raised; the lexer recovers by re-reading the
    current line as a paragraph, so this never reaches the caller.
    """
    construct: str
    source: str

    def __str__(self) -> str:
        return f"Invalid {self.construct} syntax: {self.source!r}"
