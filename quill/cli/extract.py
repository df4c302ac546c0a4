"""Extract command implementation."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.markup import escape

from quill.core.scope import QuillError, extract_scope
from quill.ui.console import err_console
from quill.utils.files import atomic_write_text, read_source

logger = logging.getLogger(__name__)


def run_extract(
    *,
    source: str,
    scope: str,
    output: str | None,
    encoding: str,
    verbose: bool,
) -> None:
    """Extract one scope from a tagged file and write it out."""
    try:
        text = read_source(source, encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Error: cannot read {source}: {exc}", err=True)
        sys.exit(1)

    try:
        extracted = extract_scope(text, scope)
    except QuillError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output is None:
        click.echo(extracted, nl=False)
        return

    output_path = Path(output)
    atomic_write_text(output_path, extracted, encoding=encoding)
    logger.debug("Wrote scope %s from %s to %s", scope, source, output_path)
    if verbose:
        err_console.print(
            f"[success]Extracted scope[/success] [scope]{scope}[/scope] to: {escape(str(output_path))}"
        )
