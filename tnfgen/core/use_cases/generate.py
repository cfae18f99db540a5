"""
Generate use case — resolve the generator type and dispatch to its handler.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path

from tnfgen.constants import DEFAULT_CLIENT_ENTRY
from tnfgen.core.config.loader import load_config
from tnfgen.core.models.template import FileOperationResult
from tnfgen.core.services.generators import (
    HANDLERS,
    GenerateError,
    GenerateRequest,
    GeneratorTools,
    UnknownCommandError,
)

logger = logging.getLogger(__name__)

# Offered when no type is given; ``page`` needs a name so it is not listed.
PROMPT_COMMANDS = ("entry", "tailwindcss")

SelectFn = Callable[[str, Sequence[str]], str]


@dataclass
class GenerateResult:
    """Outcome of one generate command."""

    command: str
    results: list[FileOperationResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not any(r.failed for r in self.results)

    def to_dict(self) -> dict:
        return {
            "command": self.command,
            "ok": self.ok,
            "results": [r.model_dump() for r in self.results],
        }


def resolve_command(command: str | None, select: SelectFn | None = None) -> str:
    """Return a known generator name, prompting with *select* when *command* is None.

    Raises:
        GenerateError: If no command is given and there is no prompt.
        UnknownCommandError: If the name is not a known generator.
    """
    if not command:
        if select is None:
            raise GenerateError("No generator type given")
        command = select("Select the command to initialize:", PROMPT_COMMANDS)

    if command not in HANDLERS:
        raise UnknownCommandError(f"Unknown command: {command}")
    return command


def generate(
    request: GenerateRequest,
    *,
    select: SelectFn | None = None,
    tools: GeneratorTools | None = None,
) -> GenerateResult:
    """Run the generator named by ``request.type``.

    Args:
        request: The invocation; ``type`` may be None.
        select: Single-choice prompt ``(message, choices) -> choice``, used
            only when ``request.type`` is None.
        tools: Collaborators handed to the handler.

    Returns:
        GenerateResult with every file operation the handler performed.

    Raises:
        GenerateError: If no type can be resolved or a handler precondition fails.
        UnknownCommandError: If the type is not a known generator.
    """
    command = resolve_command(request.type, select)
    handler = HANDLERS[command]

    config = request.config.model_copy(deep=True)
    config.set_client_entry(DEFAULT_CLIENT_ENTRY)

    logger.debug("Dispatching generate %s in %s", command, request.cwd)
    results = handler(replace(request, type=command, config=config), tools or GeneratorTools())
    return GenerateResult(command=command, results=results)


def run_generate(
    cwd: Path,
    command: str | None = None,
    name: str | None = None,
    *,
    select: SelectFn | None = None,
    tools: GeneratorTools | None = None,
) -> GenerateResult:
    """Resolve the command, then load the project config from *cwd* and run :func:`generate`.

    The command is checked first so a bad type is reported even when the
    config file is broken.
    """
    command = resolve_command(command, select)
    request = GenerateRequest(cwd=cwd, config=load_config(cwd), type=command, name=name)
    return generate(request, select=select, tools=tools)
