"""Scope listing command implementation."""

from __future__ import annotations

import json
import sys
from typing import Any

import click
import yaml
from rich.console import Console
from rich.markup import escape

from quill.core.scope import QuillError, list_scopes
from quill.models.scope import ScopeDeclaration
from quill.ui.console import QUILL_THEME, err_console
from quill.ui.tables import group_declarations, scope_table
from quill.utils.files import read_source


def run_scopes(
    *,
    source: str,
    output_format: str,
    encoding: str,
    verbose: bool,
) -> None:
    """List the scopes declared in a tagged file; fail on invalid declarations."""
    try:
        text = read_source(source, encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Error: cannot read {source}: {exc}", err=True)
        sys.exit(1)

    try:
        declarations = list_scopes(text)
    except QuillError as exc:
        if output_format == "json":
            click.echo(json.dumps(exc.as_dict(), indent=2, sort_keys=True))
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(_payload(source, declarations), indent=2, sort_keys=True))
        return
    if output_format == "yaml":
        click.echo(yaml.safe_dump(_payload(source, declarations), sort_keys=False), nl=False)
        return

    if not declarations:
        click.echo(f"No scopes declared in {source}; all content is global.")
        return

    console = Console(theme=QUILL_THEME)
    console.print(scope_table(declarations, title=f"Scopes in {escape(source)}"))
    if verbose:
        err_console.print(f"[muted]Scanned {escape(source)}: {len(declarations)} declarations[/muted]")


def _payload(source: str, declarations: list[ScopeDeclaration]) -> dict[str, Any]:
    return {
        "source": source,
        "scopes": group_declarations(declarations),
        "declarations": [declaration.model_dump() for declaration in declarations],
    }
