"""
Configuration loader — reads ``.tnfrc.ts`` into the Config model.

The config file is a TypeScript module whose default export is an object
literal. We never execute it: the literal is cut out of the source and
parsed as a YAML flow mapping (unquoted keys, single or double quoted
strings and trailing commas are all valid flow YAML), then validated
against the Pydantic schema.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

import yaml

from tnfgen.constants import CONFIG_FILE_NAME
from tnfgen.core.models.config import Config

logger = logging.getLogger(__name__)

# String literals are matched first so comment markers inside them
# ("https://...", "./src/**/*.tsx") are left alone.
_COMMENT_OR_STRING_RE = re.compile(
    r"""(?P<string>"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*'|`(?:\\.|[^`\\])*`)"""
    r"|(?P<comment>//[^\n]*|/\*.*?\*/)",
    re.DOTALL,
)
_IMPORT_RE = re.compile(r"^\s*import\s[^\n]*$", re.MULTILINE)
_EXPORT_RE = re.compile(r"\bexport\s+default\s+")
_DEFINE_CONFIG_RE = re.compile(r"^defineConfig\s*\((?P<body>.*)\)$", re.DOTALL)
_QUOTED_KEY_RE = re.compile(r'"([A-Za-z_$][\w$]*)":')


class ConfigError(Exception):
    """Raised when the project configuration cannot be read or parsed."""


def config_path(cwd: Path) -> Path:
    """Path of the config source file for a project root."""
    return cwd / CONFIG_FILE_NAME


def strip_comments(source: str) -> str:
    """Remove ``//`` and ``/* */`` comments, wherever they sit on a line."""

    def _replace(match: re.Match[str]) -> str:
        return match.group("string") or ""

    return _COMMENT_OR_STRING_RE.sub(_replace, source)


def parse_config_source(raw: str, source: str = CONFIG_FILE_NAME) -> dict:
    """Extract the default-exported object literal from config source text.

    Args:
        raw: Source text of the config module.
        source: Label used in error messages.

    Returns:
        The literal as a plain dict.

    Raises:
        ConfigError: If there is no default export or it is not a mapping.
    """
    text = strip_comments(raw)
    text = _IMPORT_RE.sub("", text)

    match = _EXPORT_RE.search(text)
    if match is None:
        raise ConfigError(f"No default export in {source}")

    body = text[match.end():].strip().rstrip(";").strip()
    wrapped = _DEFINE_CONFIG_RE.match(body)
    if wrapped:
        body = wrapped.group("body").strip()

    try:
        data = yaml.safe_load(body)
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse default export in {source}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Expected an object literal in {source}, got {type(data).__name__}"
        )
    return data


def load_config(cwd: Path) -> Config:
    """Load and validate the project configuration.

    Args:
        cwd: Project root directory.

    Returns:
        Validated Config. A missing file yields an empty Config.

    Raises:
        ConfigError: If the file exists but cannot be read or is invalid.
    """
    path = config_path(cwd)
    if not path.is_file():
        logger.debug("No %s in %s — using empty config", CONFIG_FILE_NAME, cwd)
        return Config()

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    data = parse_config_source(raw, source=str(path))

    try:
        config = Config.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded config from %s", path)
    return config


def serialize_config(config: Config) -> str:
    """Render a Config as a default-exported object literal.

    JSON with two-space indentation, object keys unquoted for readability.
    """
    literal = json.dumps(config.to_data(), indent=2, ensure_ascii=False)
    literal = _QUOTED_KEY_RE.sub(r"\1:", literal)
    return f"export default {literal}\n"
