"""
File writing for generators — gated writes and the config updater.

Both functions return a ``FileOperationResult`` and never raise on I/O
errors. The two differ on purpose in overwrite policy: generated files
ask before replacing an existing file, the config file is always
rewritten.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path

from tnfgen.constants import CONFIG_FILE_NAME
from tnfgen.core.config.loader import config_path, serialize_config
from tnfgen.core.models.config import Config
from tnfgen.core.models.template import FileOperationResult

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[str], bool]

# Parallel writers share one terminal; one question at a time.
_PROMPT_LOCK = threading.Lock()


def write_file_with_confirmation(
    path: Path,
    content: str,
    confirm_message: str,
    confirm: ConfirmFn,
) -> FileOperationResult:
    """Write *content* to *path*, asking first if the file already exists.

    Args:
        path: Target file.
        content: Full file content.
        confirm_message: Question shown when *path* exists.
        confirm: Yes/no prompt; returning False skips the write.

    Returns:
        ok when written, skipped when the user declined, failed on OSError.
    """
    if path.exists():
        with _PROMPT_LOCK:
            should_overwrite = confirm(confirm_message)
        if not should_overwrite:
            logger.info("Overwrite declined: %s", path)
            return FileOperationResult.skip(path, f"Skipped writing to {path}")

    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.warning("Cannot write %s: %s", path, e)
        return FileOperationResult.failure(path, f"Failed to write file: {e}")

    logger.info("Wrote generated file: %s", path)
    return FileOperationResult.written(path, f"Generated file at: {path}")


def update_config_file(cwd: Path, config: Config) -> FileOperationResult:
    """Serialize *config* into ``.tnfrc.ts``, replacing whatever is there."""
    path = config_path(cwd)
    content = serialize_config(config)

    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.warning("Cannot update %s: %s", path, e)
        return FileOperationResult.failure(path, f"Failed to update config file: {e}")

    logger.info("Updated config file: %s", path)
    return FileOperationResult.written(path, f"Updated config file at: {CONFIG_FILE_NAME}")
