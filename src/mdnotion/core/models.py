"""Token models: block tokens and inline rich-text spans produced by the lexer"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- rich-text spans ---

class Code(_Frozen):
    type: Literal["code"] = "code"
    text: str


class Bold(_Frozen):
    type: Literal["bold"] = "bold"
    text: str


class Italic(_Frozen):
    type: Literal["italic"] = "italic"
    text: str


class Strikethrough(_Frozen):
    type: Literal["strikethrough"] = "strikethrough"
    text: str


class Link(_Frozen):
    type: Literal["link"] = "link"
    text: str
    url: str


class PlainText(_Frozen):
    type: Literal["text"] = "text"
    text: str


RichText = Annotated[
    Union[Code, Bold, Italic, Strikethrough, Link, PlainText],
    Field(discriminator="type"),
]


# --- block tokens ---

class Heading(_Frozen):
    """A `#`, `##` or `###` heading line."""
    type: Literal["heading"] = "heading"
    level: Literal[1, 2, 3]
    text: tuple[RichText, ...]


class CodeBlock(_Frozen):
    """A fenced code block; lang is empty when the opening fence has no tag."""
    type: Literal["code_block"] = "code_block"
    text: str
    lang: str = ""


class BulletList(_Frozen):
    type: Literal["bullet_list"] = "bullet_list"
    text: tuple[RichText, ...]
    nesting: int = Field(default=0, ge=0, description="Spaces preceding the marker")


class NumberedList(_Frozen):
    type: Literal["numbered_list"] = "numbered_list"
    text: tuple[RichText, ...]
    ordinal: int = Field(..., ge=0, description="Literal number written before the dot")
    nesting: int = Field(default=0, ge=0, description="Spaces preceding the marker")


class Image(_Frozen):
    type: Literal["image"] = "image"
    url: str


class Quote(_Frozen):
    type: Literal["quote"] = "quote"
    text: tuple[RichText, ...]


class EmbeddedFile(_Frozen):
    """An allow-listed media URL standing alone at the scan position."""
    type: Literal["embedded_file"] = "embedded_file"
    url: str


class Paragraph(_Frozen):
    type: Literal["paragraph"] = "paragraph"
    text: tuple[RichText, ...]


Token = Annotated[
    Union[Heading, CodeBlock, BulletList, NumberedList, Image, Quote, EmbeddedFile, Paragraph],
    Field(discriminator="type"),
]


class TokenizedDoc(BaseModel):
    """Pipeline output for one source file: written as JSON, never mutated by the core."""
    slug: str
    path: str
    frontmatter: dict[str, Any] = {}
    tokens: list[Token]
