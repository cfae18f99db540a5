"""
CLI command for scaffolding.

Thin wrapper over ``tnfgen.core.use_cases.generate``.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence

import click

from tnfgen.core.models.template import FileOperationResult


def _select(message: str, choices: Sequence[str]) -> str:
    return click.prompt(message, type=click.Choice(list(choices)))


def _confirm(message: str) -> bool:
    return click.confirm(message, default=False)


def _always_yes(message: str) -> bool:
    return True


def _echo_result(result: FileOperationResult) -> None:
    if result.success:
        click.secho(f"✅ {result.message}", fg="green")
    elif result.skipped:
        click.secho(f"⊘ {result.message}", fg="yellow")
    else:
        click.secho(f"❌ {result.message}", fg="red")


@click.command()
@click.argument("command_type", metavar="[TYPE]", required=False)
@click.argument("name", required=False)
@click.option("--yes", "-y", is_flag=True, help="Overwrite existing files without asking.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    command_type: str | None,
    name: str | None,
    yes: bool,
    as_json: bool,
) -> None:
    """Generate files: page NAME, tailwindcss, or entry.

    Examples:

        tnfgen generate page about

        tnfgen generate tailwindcss --yes

        tnfgen g entry
    """
    from tnfgen.core.config.loader import ConfigError
    from tnfgen.core.services.generators import GenerateError, GeneratorTools
    from tnfgen.core.use_cases.generate import run_generate

    # --json output must stay parseable: no prompts, existing files are
    # only replaced under --yes.
    if as_json:
        tools = GeneratorTools(confirm=_always_yes) if yes else GeneratorTools()
        select = None
    else:
        tools = GeneratorTools(confirm=_always_yes if yes else _confirm)
        select = _select

    try:
        outcome = run_generate(
            ctx.obj["cwd"],
            command_type,
            name,
            select=select,
            tools=tools,
        )
    except (GenerateError, ConfigError) as e:
        if as_json:
            click.echo(json.dumps({"ok": False, "error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(outcome.to_dict(), indent=2))
    else:
        for r in outcome.results:
            if r.success and ctx.obj.get("quiet"):
                continue
            _echo_result(r)

    if not outcome.ok:
        sys.exit(1)
