"""
Config model — the contents of ``.tnfrc.ts``.

Only the fields the generators touch are typed; everything else the user
keeps in the file is carried through untouched as extra keys.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class EntryConfig(BaseModel):
    """Entry points of the application."""

    model_config = ConfigDict(extra="allow")

    client: str | None = None


class Config(BaseModel):
    """Framework configuration loaded from the project root.

    Read once per command, mutated in memory by a generator and written
    back wholesale. There is no merge: last writer wins.
    """

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    entry: EntryConfig | None = None
    tailwindcss: bool | None = None

    def set_client_entry(self, client: str) -> None:
        """Point ``entry.client`` at *client*, creating ``entry`` if needed."""
        if self.entry is None:
            self.entry = EntryConfig(client=client)
        else:
            self.entry.client = client

    def to_data(self) -> dict[str, Any]:
        """Plain-data view used for serialization (unset fields omitted)."""
        return self.model_dump(mode="json", exclude_none=True)
