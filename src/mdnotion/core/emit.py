"""Reconstruct markdown source from tokens and rich-text spans"""

from typing import Iterable

from mdnotion.core.models import RichText, Token


SPAN_TEMPLATES: dict[str, str] = {
    "code":          "`{text}`",
    "bold":          "**{text}**",
    "italic":        "*{text}*",
    "strikethrough": "~~{text}~~",
    "text":          "{text}",
}


def emit_rich_text(spans: Iterable[RichText]) -> str:
    """Re-apply stripped delimiters; inverse of tokenize_rich_text."""
    parts = []
    for span in spans:
        if span.type == "link":
            parts.append(f"[{span.text}]({span.url})")
        else:
            parts.append(SPAN_TEMPLATES[span.type].format(text=span.text))
    return "".join(parts)


def emit_token(token: Token) -> str:
    """Return the source text for a single token (one line, or one fenced block)."""
    kind = token.type
    if kind == "heading":
        return f"{'#' * token.level} {emit_rich_text(token.text)}"
    if kind == "code_block":
        return f"```{token.lang}\n{token.text}\n```"
    if kind == "bullet_list":
        return f"{' ' * token.nesting}- {emit_rich_text(token.text)}"
    if kind == "numbered_list":
        return f"{' ' * token.nesting}{token.ordinal}. {emit_rich_text(token.text)}"
    if kind == "image":
        return f"![image]({token.url})"
    if kind == "quote":
        return f"> {emit_rich_text(token.text)}"
    if kind == "embedded_file":
        return token.url
    if kind == "paragraph":
        return emit_rich_text(token.text)
    raise ValueError(f"Unknown token type: {kind!r}")


def emit_markdown(tokens: Iterable[Token]) -> str:
    """Join emitted tokens with newlines; no trailing newline."""
    return "\n".join(emit_token(t) for t in tokens)
