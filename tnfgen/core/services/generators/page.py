"""
Page generator — a route component plus its co-located style module.

Unlike the other generators this one never prompts: if either target
file exists the command stops before anything is written.
"""

from __future__ import annotations

import logging

from tnfgen.constants import FRAMEWORK_NAME
from tnfgen.core.models.template import FileOperationResult
from tnfgen.core.services.generators.base import (
    GenerateError,
    GenerateRequest,
    GeneratorTools,
    PageExistsError,
)

logger = logging.getLogger(__name__)

PAGES_DIR = "src/pages"

_PAGE_TEMPLATE = """\
import React from 'react';
import {{ createFileRoute }} from '@umijs/{framework}/router';
import styles from './{name}.module.less';

export const Route = createFileRoute('/{name}')({{
  component: {component},
}});

function {component}() {{
  return (
    <div className={{styles.container}}>
      <h3>Welcome to {component} Page!</h3>
    </div>
  );
}}
"""

_STYLE_TEMPLATE = """\
.container {{
  color: {color};
}}
"""


def component_name(page_name: str) -> str:
    """Component identifier: the page name with its first letter upper-cased."""
    return page_name[:1].upper() + page_name[1:]


def generate_page(request: GenerateRequest, tools: GeneratorTools) -> list[FileOperationResult]:
    """Create ``src/pages/<name>.tsx`` and ``src/pages/<name>.module.less``.

    Raises:
        GenerateError: If no name was given.
        PageExistsError: If either file already exists.
    """
    if not request.name:
        raise GenerateError("Name is required")

    page_name = request.name
    pages_dir = request.cwd / PAGES_DIR
    page_path = pages_dir / f"{page_name}.tsx"
    style_path = pages_dir / f"{page_name}.module.less"

    if page_path.exists() or style_path.exists():
        raise PageExistsError(f"Page {page_name} already exists.")

    pages_dir.mkdir(parents=True, exist_ok=True)

    component = component_name(page_name)
    page_content = _PAGE_TEMPLATE.format(
        framework=FRAMEWORK_NAME, name=page_name, component=component,
    )
    style_content = _STYLE_TEMPLATE.format(color=tools.colors.hex_string())

    page_path.write_text(page_content, encoding="utf-8")
    style_path.write_text(style_content, encoding="utf-8")

    logger.info("Generated page at: %s", page_path)
    logger.info("Generated styles at: %s", style_path)
    return [
        FileOperationResult.written(page_path, f"Generated page at: {page_path}"),
        FileOperationResult.written(style_path, f"Generated styles at: {style_path}"),
    ]
