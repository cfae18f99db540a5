"""
tnfgen — CLI entrypoint.

Usage:
    python -m tnfgen.main --help
    python -m tnfgen.main generate page about
    python -m tnfgen.main generate tailwindcss
"""

from __future__ import annotations

from pathlib import Path

import click

from tnfgen import __version__
from tnfgen.core.observability.logging_config import resolve_level, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="tnfgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--cwd",
    "cwd",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    cwd: Path | None,
) -> None:
    """tnfgen — scaffold pages, entry points and styling for tnf apps."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["cwd"] = (cwd or Path.cwd()).resolve()

    setup_logging(level=resolve_level(debug=debug, verbose=verbose, quiet=quiet))


# ── Register sub-commands from tnfgen/ui/cli/ ───────────────────

from tnfgen.ui.cli.generate import generate
from tnfgen.ui.cli.sync import sync

cli.add_command(generate)
cli.add_command(generate, name="g")
cli.add_command(sync)


if __name__ == "__main__":
    cli()
