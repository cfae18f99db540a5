"""
Generators — produce a feature's files and patch the project config.

Each generator module exposes one handler taking a ``GenerateRequest``
and ``GeneratorTools`` and returning a list of ``FileOperationResult``.
``HANDLERS`` is the dispatch table keyed by command name.
"""

from tnfgen.core.services.generators.base import (
    GenerateError,
    GenerateRequest,
    GeneratorTools,
    Handler,
    PageExistsError,
    TemplateNotFoundError,
    UnknownCommandError,
)
from tnfgen.core.services.generators.entry import generate_entry
from tnfgen.core.services.generators.page import generate_page
from tnfgen.core.services.generators.tailwindcss import generate_tailwindcss

HANDLERS: dict[str, Handler] = {
    "page": generate_page,
    "tailwindcss": generate_tailwindcss,
    "entry": generate_entry,
}

__all__ = [
    "HANDLERS",
    "GenerateError",
    "GenerateRequest",
    "GeneratorTools",
    "Handler",
    "PageExistsError",
    "TemplateNotFoundError",
    "UnknownCommandError",
    "generate_entry",
    "generate_page",
    "generate_tailwindcss",
]
