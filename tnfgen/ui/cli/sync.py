"""
CLI command for materializing the framework temp directory.
"""

from __future__ import annotations

import sys

import click


@click.command()
@click.option(
    "--mode",
    type=click.Choice(["development", "production"]),
    default="development",
    show_default=True,
    help="Build mode the temp files are generated for.",
)
@click.pass_context
def sync(ctx: click.Context, mode: str) -> None:
    """Write src/.tnf (client entry and route tree)."""
    from tnfgen.core.config.loader import ConfigError, load_config
    from tnfgen.core.services.sync import sync as run_sync
    from tnfgen.core.services.sync import tmp_dir

    cwd = ctx.obj["cwd"]
    try:
        config = load_config(cwd)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    written = run_sync(config=config, cwd=cwd, tmp_path=tmp_dir(cwd), mode=mode)

    if not ctx.obj.get("quiet"):
        click.secho(f"🔄 Synced ({mode})", fg="cyan", bold=True)
        for path in written:
            click.echo(f"   {path.relative_to(cwd)}")
