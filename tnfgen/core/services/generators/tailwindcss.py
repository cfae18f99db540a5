"""
Tailwind CSS generator — ``tailwind.config.js`` and ``src/tailwind.css``.

The two files are written in parallel, each behind its own overwrite
prompt. The config flag is set once both attempts have finished,
whatever their outcome.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from tnfgen.core.models.template import FileOperationResult
from tnfgen.core.services.file_writer import (
    update_config_file,
    write_file_with_confirmation,
)
from tnfgen.core.services.generators.base import GenerateRequest, GeneratorTools

logger = logging.getLogger(__name__)

TAILWIND_CONFIG = """\
/** @type {import('tailwindcss').Config} */
export default {
  content: [
    "./src/pages/**/*.{js,ts,jsx,tsx}",
    "./src/components/**/*.{js,ts,jsx,tsx}"
  ],
  theme: {
    extend: {},
  },
  plugins: [],
}"""

TAILWIND_CSS = """\
@tailwind base;
@tailwind components;
@tailwind utilities;"""


def generate_tailwindcss(request: GenerateRequest, tools: GeneratorTools) -> list[FileOperationResult]:
    """Write the Tailwind files and turn on ``tailwindcss`` in the config.

    Returns:
        The two write results followed by the config update result.
    """
    cwd = request.cwd
    (cwd / "src").mkdir(parents=True, exist_ok=True)

    jobs = [
        (
            cwd / "tailwind.config.js",
            TAILWIND_CONFIG,
            "Tailwind config file already exists, do you want to overwrite?",
        ),
        (
            cwd / "src" / "tailwind.css",
            TAILWIND_CSS,
            "Tailwind CSS file already exists, do you want to overwrite?",
        ),
    ]

    with ThreadPoolExecutor(max_workers=len(jobs)) as pool:
        futures = [
            pool.submit(write_file_with_confirmation, path, content, message, tools.confirm)
            for path, content, message in jobs
        ]
        results = [f.result() for f in futures]

    request.config.tailwindcss = True
    results.append(update_config_file(cwd, request.config))

    for r in results:
        if r.failed:
            logger.warning("%s", r.message)
        elif r.skipped:
            logger.info("%s", r.message)
    return results
