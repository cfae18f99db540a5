"""
File operation result — the outcome of writing one generated file.

Writers return these instead of raising: an I/O error becomes a
``failed`` result, a declined overwrite becomes a ``skipped`` one.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel


class FileOperationResult(BaseModel):
    """Result of a single file write.

    Attributes:
        path:    Absolute path of the target file.
        status:  ``ok``, ``skipped`` or ``failed``.
        message: Human-readable outcome for end-of-run reporting.
    """

    path: str
    status: Literal["ok", "skipped", "failed"] = "ok"
    message: str = ""

    @property
    def success(self) -> bool:
        """Whether the file was written."""
        return self.status == "ok"

    @property
    def skipped(self) -> bool:
        return self.status == "skipped"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def written(cls, path: Any, message: str) -> FileOperationResult:
        """Create a success result."""
        return cls(path=str(path), status="ok", message=message)

    @classmethod
    def skip(cls, path: Any, message: str) -> FileOperationResult:
        """Create a skip result (user declined the overwrite)."""
        return cls(path=str(path), status="skipped", message=message)

    @classmethod
    def failure(cls, path: Any, message: str) -> FileOperationResult:
        """Create a failure result."""
        return cls(path=str(path), status="failed", message=message)
