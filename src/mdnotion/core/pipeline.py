"""File discovery, frontmatter stripping, and per-file tokenization to JSON"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from mdnotion.config import Settings
from mdnotion.core.lexer import Lexer
from mdnotion.core.models import TokenizedDoc


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    if not path.is_dir():
        return []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def tokenize_file(path: Path, lexer: Lexer) -> TokenizedDoc:
    """Read one markdown file and tokenize its body (frontmatter excluded)."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = _strip_frontmatter(raw)
    slug = str(frontmatter.get('slug') or slugify(path.stem) or 'doc')
    return TokenizedDoc(
        slug=slug,
        path=str(path),
        frontmatter=frontmatter,
        tokens=lexer.tokenize(body),
    )


def run_tokenize(path: str, settings: Settings, output_dir: Path) -> list[tuple[Path, Path]]:
    """Tokenize path and write TokenizedDoc JSON to output_dir. Returns (source_path, json_file) pairs."""
    output_dir.mkdir(parents=True, exist_ok=True)
    lexer = Lexer(settings)
    indent = settings.json_indent or None
    results = []
    for p in discover_files(Path(path)):
        try:
            doc = tokenize_file(p, lexer)
            out_file = output_dir / f"{doc.slug}.json"
            out_file.write_text(doc.model_dump_json(indent=indent), encoding='utf-8')
        except Exception as e:
            raise RuntimeError(f"Failed to tokenize {p}: {e}") from e
        logger.info("Tokenized %s -> %s (%d tokens)", p, out_file, len(doc.tokens))
        results.append((p, out_file))
    return results
