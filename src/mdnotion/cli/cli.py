"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from mdnotion.cli.commands import emit_cmd, tokenize_cmd


app = typer.Typer(name="mdnotion", no_args_is_help=True, help="Markdown to block token converter")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ):
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="tokenize")(tokenize_cmd)
app.command(name="emit")(emit_cmd)
