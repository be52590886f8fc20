"""HTTP-facing controller for notes, independent of any web framework."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, TypeVar

from .domain import Note
from .errors import MarshallError, error_response, error_status
from .presenters import present_note, to_create_dto
from .services import NoteDelegate, NoteRepository

log = logging.getLogger(__name__)

T = TypeVar("T")

_REQUEST_FIELDS = ("name", "link", "description")


@dataclass
class Response:
    """Status, JSON body and headers of an HTTP response."""

    status: int
    body: Any
    headers: dict[str, str] = field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )

    def json(self) -> str:
        return json.dumps(self.body, ensure_ascii=False)


def parse_json_body(body: bytes | str) -> dict[str, Any]:
    """Decode a create-note request body, raising MarshallError if it is malformed."""
    try:
        data = json.loads(body)
    except (ValueError, TypeError) as err:
        raise MarshallError() from err
    if not isinstance(data, dict):
        raise MarshallError()
    for name in _REQUEST_FIELDS:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise MarshallError()
    return data


def _error(err: BaseException, path: str) -> Response:
    log.warning("%s", err)
    status, message = error_status(err)
    return Response(status, error_response(message, status, path))


def handle_response(
    path: str,
    logic: Callable[[], T],
    present: Callable[[T, str], Any],
) -> Response:
    """Run logic and present its result, or turn its error into a response."""
    try:
        result = logic()
    except Exception as err:
        return _error(err, path)
    return Response(HTTPStatus.OK, present(result, path))


class NoteController:
    """Handles the note endpoints."""

    def __init__(self, repository: NoteRepository) -> None:
        self._delegate = NoteDelegate(repository)

    def save_note(self, body: bytes | str, path: str) -> Response:
        try:
            request = parse_json_body(body)
        except MarshallError as err:
            return _error(err, path)
        return handle_response(
            path,
            lambda: self._delegate.create_and_save(to_create_dto(request)),
            present_note,
        )

    def get_note_by_id(self, note_id: int, path: str) -> Response:
        return handle_response(
            path, lambda: self._delegate.get_by_id(note_id), present_note
        )


__all__ = [
    "Note",
    "NoteController",
    "Response",
    "handle_response",
    "parse_json_body",
]