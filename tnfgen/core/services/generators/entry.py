"""
Entry generator — copy the framework's ``client.tsx`` into ``src``.

The template lives in the temp directory produced by sync; if that
directory is missing it is synced once in development mode first.
"""

from __future__ import annotations

import logging

from tnfgen.constants import DEFAULT_CLIENT_ENTRY
from tnfgen.core.config.loader import load_config
from tnfgen.core.models.template import FileOperationResult
from tnfgen.core.services.file_writer import (
    update_config_file,
    write_file_with_confirmation,
)
from tnfgen.core.services.generators.base import (
    GenerateRequest,
    GeneratorTools,
    TemplateNotFoundError,
)
from tnfgen.core.services.import_paths import process_import_paths
from tnfgen.core.services.sync import tmp_dir

logger = logging.getLogger(__name__)


def generate_entry(request: GenerateRequest, tools: GeneratorTools) -> list[FileOperationResult]:
    """Write ``src/client.tsx`` and point ``entry.client`` at it.

    Raises:
        TemplateNotFoundError: If the template is absent after syncing.
    """
    cwd = request.cwd
    tmp_path = tmp_dir(cwd)
    client_src = tmp_path / "client.tsx"
    client_dest = cwd / DEFAULT_CLIENT_ENTRY

    if not tmp_path.exists():
        logger.info("%s missing — syncing", tmp_path)
        tools.sync(
            config=load_config(cwd),
            cwd=cwd,
            tmp_path=tmp_path,
            mode="development",
        )

    if not client_src.exists():
        raise TemplateNotFoundError(f"client.tsx template not found in {tmp_path.name} directory")

    content = client_src.read_text(encoding="utf-8")
    processed = process_import_paths(content, client_src, client_dest)

    client_dest.parent.mkdir(parents=True, exist_ok=True)
    write_result = write_file_with_confirmation(
        client_dest,
        processed,
        "client.tsx already exists. Do you want to overwrite it?",
        tools.confirm,
    )
    if not write_result.success:
        log = logger.warning if write_result.failed else logger.info
        log("%s", write_result.message)
        return [write_result]

    request.config.set_client_entry(DEFAULT_CLIENT_ENTRY)
    config_result = update_config_file(cwd, request.config)
    return [write_result, config_result]
