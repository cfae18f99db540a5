"""
Sync — materialize the framework's temp directory (``src/.tnf``).

Produces the files the app boots from: a client entry and a route tree
built from ``src/pages``. The entry generator copies ``client.tsx`` out of
here into the user's ``src``.
"""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path

from tnfgen.constants import FRAMEWORK_NAME
from tnfgen.core.models.config import Config

logger = logging.getLogger(__name__)

MODES = ("development", "production")

_ROUTER_MODULE = f"@umijs/{FRAMEWORK_NAME}/router"


def tmp_dir(cwd: Path) -> Path:
    """The framework temp directory for a project root."""
    return cwd / "src" / f".{FRAMEWORK_NAME}"


def _page_names(cwd: Path) -> list[str]:
    pages_dir = cwd / "src" / "pages"
    if not pages_dir.is_dir():
        return []
    return sorted(p.stem for p in pages_dir.glob("*.tsx"))


def _route_identifier(page: str) -> str:
    parts = [p for p in page.replace("-", "_").split("_") if p]
    return "".join(p[:1].upper() + p[1:] for p in parts) + "Route"


def render_route_tree(pages: list[str]) -> str:
    """Route tree module: one import per page, all under the root route."""
    lines = [f"import {{ createRootRoute }} from '{_ROUTER_MODULE}';"]
    for page in pages:
        lines.append(f"import {{ Route as {_route_identifier(page)} }} from '../pages/{page}';")
    lines.append("")
    lines.append("const rootRoute = createRootRoute();")
    lines.append("")
    lines.append("export const routeTree = rootRoute.addChildren([")
    for page in pages:
        lines.append(f"  {_route_identifier(page)},")
    lines.append("]);")
    return "\n".join(lines) + "\n"


def render_client(config: Config, cwd: Path, mode: str) -> str:
    """Client entry: creates the router and mounts it on ``#root``."""
    imports = [
        "import React from 'react';",
        "import ReactDOM from 'react-dom/client';",
        f"import {{ RouterProvider, createRouter }} from '{_ROUTER_MODULE}';",
        "import { routeTree } from './routeTree.gen';",
    ]
    if (cwd / "src" / "global.less").is_file():
        imports.append("import '../global.less';")
    if config.tailwindcss:
        imports.append("import '../tailwind.css';")

    app = "<RouterProvider router={router} />"
    if mode == "development":
        app = f"<React.StrictMode>\n    {app}\n  </React.StrictMode>"

    body = textwrap.dedent("""\
        const router = createRouter({ routeTree });

        ReactDOM.createRoot(document.getElementById('root')!).render(
          {app},
        );
    """).replace("{app}", app)
    return "\n".join(imports) + "\n\n" + body


def sync(*, config: Config, cwd: Path, tmp_path: Path, mode: str) -> list[Path]:
    """Write the temp directory for *mode*.

    Args:
        config: Loaded project configuration.
        cwd: Project root.
        tmp_path: Directory to materialize (normally ``src/.tnf``).
        mode: ``development`` or ``production``.

    Returns:
        Paths written, in order.

    Raises:
        ValueError: If *mode* is not known.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown mode '{mode}'. Valid: {', '.join(MODES)}")

    tmp_path.mkdir(parents=True, exist_ok=True)

    route_tree = tmp_path / "routeTree.gen.ts"
    route_tree.write_text(render_route_tree(_page_names(cwd)), encoding="utf-8")

    client = tmp_path / "client.tsx"
    client.write_text(render_client(config, cwd, mode), encoding="utf-8")

    logger.info("Synced %s (%s mode)", tmp_path, mode)
    return [route_tree, client]
