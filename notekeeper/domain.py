"""Domain objects for notes."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Note:
    """A stored note."""

    id: int
    name: str
    link: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        """Return the note as a plain mapping."""
        return asdict(self)


@dataclass(frozen=True)
class CreateNoteDto:
    """Data needed to create a note."""

    name: str = ""
    link: str = ""
    description: str = ""