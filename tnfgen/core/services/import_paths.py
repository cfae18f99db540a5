"""
Import-path rewriting for templates copied to a new location.

A relative specifier is resolved against the template's directory and
re-expressed relative to the destination's directory, so the copied file
keeps pointing at the same modules. Package specifiers are untouched.
"""

from __future__ import annotations

import posixpath
import re
from pathlib import Path

# from './x' | from "../y" | import './z.css'
_IMPORT_SPEC_RE = re.compile(
    r"""(?P<prefix>\bfrom\s*|\bimport\s+)(?P<quote>['"])(?P<spec>[^'"]+)(?P=quote)"""
)


def _posix(path: Path | str) -> str:
    return Path(path).as_posix()


def rewrite_specifier(spec: str, source_dir: str, dest_dir: str) -> str:
    """Re-target one relative specifier from *source_dir* to *dest_dir*.

    Non-relative specifiers are returned unchanged.
    """
    if not spec.startswith("."):
        return spec

    target = posixpath.normpath(posixpath.join(source_dir, spec))
    relative = posixpath.relpath(target, dest_dir)
    if relative in (".", "..") or relative.startswith(("./", "../")):
        return relative
    return f"./{relative}"


def process_import_paths(content: str, source_path: Path, dest_path: Path) -> str:
    """Rewrite relative imports in *content* for a move from source to dest.

    Args:
        content: Module source text.
        source_path: Where the text was read from.
        dest_path: Where it will be written.

    Returns:
        The text with every relative specifier re-targeted.
    """
    source_dir = posixpath.dirname(_posix(source_path))
    dest_dir = posixpath.dirname(_posix(dest_path))

    def _replace(match: re.Match[str]) -> str:
        spec = match.group("spec")
        rewritten = rewrite_specifier(spec, source_dir, dest_dir)
        if rewritten == spec:
            return match.group(0)
        quote = match.group("quote")
        return f"{match.group('prefix')}{quote}{rewritten}{quote}"

    return _IMPORT_SPEC_RE.sub(_replace, content)
