"""
Domain models — Pydantic types for the generators.

    from tnfgen.core.models import Config, EntryConfig, FileOperationResult
"""

from tnfgen.core.models.config import Config, EntryConfig
from tnfgen.core.models.template import FileOperationResult

__all__ = [
    # config.py
    "Config",
    "EntryConfig",
    # template.py
    "FileOperationResult",
]
