"""
Generator base — the request, collaborators and errors shared by handlers.

A handler is a plain function ``(request, tools) -> list[FileOperationResult]``.
Precondition failures raise ``GenerateError``; I/O failures never do, they
come back as failed results.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from tnfgen.core.models.config import Config
from tnfgen.core.models.template import FileOperationResult
from tnfgen.core.services.colors import ColorGenerator, RandomColor
from tnfgen.core.services.file_writer import ConfirmFn
from tnfgen.core.services.sync import sync as _default_sync

SyncFn = Callable[..., object]
Handler = Callable[["GenerateRequest", "GeneratorTools"], list[FileOperationResult]]


class GenerateError(Exception):
    """A generate command cannot proceed (bad input or missing precondition)."""


class UnknownCommandError(GenerateError):
    """The requested generator type does not exist."""


class PageExistsError(GenerateError):
    """A page file to be generated is already on disk."""


class TemplateNotFoundError(GenerateError):
    """A framework template is missing even after sync."""


def _never_overwrite(message: str) -> bool:
    return False


@dataclass(frozen=True)
class GenerateRequest:
    """Input to one generate invocation.

    Attributes:
        cwd:    Project root the files are generated into.
        config: Configuration loaded at request start.
        type:   Generator name; prompted for when None.
        name:   Target name (the page name for ``page``).
    """

    cwd: Path
    config: Config
    type: str | None = None
    name: str | None = None


@dataclass
class GeneratorTools:
    """Side-effecting collaborators, injected so tests stay deterministic.

    The default ``confirm`` declines every overwrite; the CLI passes an
    interactive prompt instead.
    """

    confirm: ConfirmFn = _never_overwrite
    colors: ColorGenerator = field(default_factory=RandomColor)
    sync: SyncFn = _default_sync
