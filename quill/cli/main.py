"""Main CLI entry point for Quill."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from quill import __version__
from quill.branding import CLI_PRIMARY_COMMAND
from quill.utils.config import QuillConfig, load_config


@click.group()
@click.version_option(version=__version__, prog_name=CLI_PRIMARY_COMMAND)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="QUILL_CONFIG",
    help="YAML file with CLI defaults (defaults to ./quill.yaml when present)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Extract tagged scopes from configuration files, keeping line numbers."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config


def _config(ctx: click.Context) -> QuillConfig:
    if ctx.obj and isinstance(ctx.obj.get("config"), QuillConfig):
        return ctx.obj["config"]
    return QuillConfig()


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option(
    "--scope",
    "-s",
    envvar="QUILL_SCOPE",
    help="Scope to extract (default: config scope, then 'global')",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write the extracted text here instead of stdout",
)
@click.pass_context
def extract(ctx: click.Context, source: str, scope: str | None, output: str | None) -> None:
    """Extract one scope from SOURCE, blanking lines of other scopes.

    Line numbers are preserved, so parser errors on the output point at
    the same lines in SOURCE. Use '-' to read from stdin.

    \b
    Examples:
      quill extract app.toml --scope dev
      quill extract app.toml -s prod -o build/prod.toml
      cat app.toml | quill extract - -s test
    """
    from quill.cli.extract import run_extract

    config = _config(ctx)
    run_extract(
        source=source,
        scope=scope if scope is not None else config.scope,
        output=output,
        encoding=config.encoding,
        verbose=ctx.obj.get("verbose", False),
    )


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    default="text",
    show_default=True,
    help="Output format",
)
@click.pass_context
def scopes(ctx: click.Context, source: str, output_format: str) -> None:
    """List the scopes declared in SOURCE.

    Exits non-zero when a declaration names an invalid scope, so this also
    works as a check before extraction.
    """
    from quill.cli.scopes import run_scopes

    run_scopes(
        source=source,
        output_format=output_format,
        encoding=_config(ctx).encoding,
        verbose=ctx.obj.get("verbose", False),
    )


if __name__ == "__main__":
    cli()
