"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdnotion.config import Settings, load_config
from mdnotion.core.emit import emit_markdown
from mdnotion.core.lexer import Lexer
from mdnotion.core.pipeline import discover_files, run_tokenize, tokenize_file


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def tokenize_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to tokenize")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    prefixes: Annotated[Optional[list[str]], typer.Option("--embed-prefix", help="Allow-listed embed URL prefix (repeatable)")] = None,
    stdout: Annotated[bool, typer.Option("--stdout", help="Print token JSON instead of writing files")] = False,
    ):
    """Tokenize markdown files into block token JSON."""
    settings = _settings(overrides={"output_dir": out, "embed_prefixes": prefixes or None})

    if stdout:
        lexer = Lexer(settings)
        files = discover_files(Path(path))
        if not files:
            _fail(f"No markdown files found at {path}")
        for p in files:
            try:
                doc = tokenize_file(p, lexer)
            except (OSError, ValueError) as e:
                _fail(f"Failed to tokenize {p}", e)
            typer.echo(doc.model_dump_json(indent=settings.json_indent or None))
        return

    output_dir = Path(settings.output_dir)
    try:
        results = run_tokenize(path, settings, output_dir)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        _fail(f"No markdown files found at {path}")
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Tokenized {len(results)} document(s) to {output_dir}/")


def emit_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to normalize")],
    ):
    """Print the markdown reconstructed from a file's tokens."""
    settings = _settings()
    p = Path(path)
    if not p.is_file():
        _fail(f"Not a file: {path}")
    try:
        doc = tokenize_file(p, Lexer(settings))
    except (OSError, ValueError) as e:
        _fail(f"Failed to tokenize {p}", e)
    typer.echo(emit_markdown(doc.tokens))
