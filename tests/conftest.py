"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from tnfgen.core.services.colors import RandomColor
from tnfgen.core.services.generators import GeneratorTools


class RecordingConfirm:
    """Scripted yes/no prompt that remembers what it was asked.

    Answers are looked up by substring of the prompt message; anything
    unmatched gets ``default``.
    """

    def __init__(self, answers: dict[str, bool] | None = None, default: bool = False):
        self.answers = answers or {}
        self.default = default
        self.asked: list[str] = []
        self._lock = threading.Lock()

    def __call__(self, message: str) -> bool:
        with self._lock:
            self.asked.append(message)
        for needle, answer in self.answers.items():
            if needle in message:
                return answer
        return self.default


class RecordingSync:
    """Stand-in for sync that counts calls and optionally writes a template."""

    def __init__(self, template: str | None = None):
        self.template = template
        self.calls: list[dict] = []

    def __call__(self, *, config, cwd: Path, tmp_path: Path, mode: str):
        self.calls.append({"config": config, "cwd": cwd, "tmp_path": tmp_path, "mode": mode})
        tmp_path.mkdir(parents=True, exist_ok=True)
        if self.template is not None:
            (tmp_path / "client.tsx").write_text(self.template)
        return []


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty project root."""
    root = tmp_path / "app"
    root.mkdir()
    return root


@pytest.fixture
def confirm() -> RecordingConfirm:
    """A prompt that declines every overwrite."""
    return RecordingConfirm()


@pytest.fixture
def tools(confirm: RecordingConfirm) -> GeneratorTools:
    """Deterministic collaborators: scripted prompt, seeded colors."""
    return GeneratorTools(confirm=confirm, colors=RandomColor(seed=7))
