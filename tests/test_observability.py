"""
Tests for logging setup.
"""

import logging
from pathlib import Path

import pytest

from tnfgen.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    ENV_LEVEL,
    parse_level,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (ENV_LEVEL, ENV_FILE, ENV_FILE_LEVEL):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLevel:
    @pytest.mark.parametrize(
        "name, expected",
        [("debug", logging.DEBUG), ("INFO", logging.INFO), ("Error", logging.ERROR)],
    )
    def test_known(self, name, expected):
        assert parse_level(name) == expected

    @pytest.mark.parametrize("name", [None, "", "loud"])
    def test_unknown_falls_back(self, name):
        assert parse_level(name) == logging.WARNING


class TestResolveLevel:
    def test_default(self):
        assert resolve_level() == "WARNING"

    def test_flag_precedence(self):
        assert resolve_level(debug=True, verbose=True, quiet=True) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True) == "INFO"
        assert resolve_level(quiet=True) == "ERROR"

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv(ENV_LEVEL, "ERROR")
        assert resolve_level() == "ERROR"
        assert resolve_level(verbose=True) == "INFO"


class TestSetupLogging:
    def test_console_only(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler_lowers_root_level(self, tmp_path: Path):
        log_file = tmp_path / "tnfgen.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("tnfgen.test").debug("to file only")
        for h in root.handlers:
            h.flush()
        assert "to file only" in log_file.read_text()

    def test_log_file_from_env(self, tmp_path: Path, monkeypatch):
        log_file = tmp_path / "env.log"
        monkeypatch.setenv(ENV_FILE, str(log_file))
        monkeypatch.setenv(ENV_FILE_LEVEL, "INFO")
        setup_logging("ERROR")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 2

        logging.getLogger("tnfgen.test").info("from env")
        for h in root.handlers:
            h.flush()
        assert "from env" in log_file.read_text()

    @pytest.mark.parametrize(
        "level, fragment",
        [("DEBUG", ":%(lineno)d"), ("INFO", "[%(name)s]"), ("WARNING", "%(levelname)s: ")],
    )
    def test_console_format_follows_level(self, level, fragment):
        setup_logging(level)
        console = logging.getLogger().handlers[0]
        assert fragment in console.formatter._fmt
