"""Conversions between HTTP payloads and domain objects."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, TypeVar

from .domain import CreateNoteDto, Note

T = TypeVar("T")


def string_or_default(value: T | None, default: T) -> T:
    """Return value unless it is None, else default."""
    return default if value is None else value


def present_note(note: Note, path: str) -> dict[str, Any]:
    """Build the JSON body returned for a single note."""
    return {
        "payload": {
            "description": note.description,
            "id": note.id,
            "link": note.link,
            "name": note.name,
        },
        "meta": {
            "path": path,
            "timestamp": datetime.now().astimezone().isoformat(sep=" "),
        },
    }


def to_create_dto(request: Mapping[str, Any]) -> CreateNoteDto:
    """Turn a create-note request body into a CreateNoteDto."""
    return CreateNoteDto(
        description=string_or_default(request.get("description"), ""),
        link=string_or_default(request.get("link"), ""),
        name=string_or_default(request.get("name"), ""),
    )