"""Application errors and their mapping onto HTTP responses."""

from __future__ import annotations

from datetime import datetime
from http import HTTPStatus
from typing import Any

ROW_NOT_FOUND_MESSAGE = "запись не найдена"
VALIDATION_MESSAGE = "ошибка валидации"
MARSHALL_MESSAGE = "ошибка маршалинга"
INTERNAL_ERROR_MESSAGE = "Oops... что-то пошло не так"


class NoteError(Exception):
    """Base class for errors raised by the application."""

    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class RowNotFoundError(NoteError, LookupError):
    """The requested record does not exist."""

    default_message = ROW_NOT_FOUND_MESSAGE


class ValidationError(NoteError):
    """The request failed validation."""

    default_message = VALIDATION_MESSAGE


class MarshallError(NoteError):
    """The request body could not be decoded."""

    default_message = MARSHALL_MESSAGE


class RepositoryError(NoteError):
    """A storage operation failed; carries the action and its cause."""

    def __init__(self, action: str, err: BaseException | None = None) -> None:
        self.action = action
        self.err = err
        super().__init__(action if err is None else f"{action}: {err}")
        self.__cause__ = err


def wrap_error(action: str, err: BaseException | None) -> NoteError:
    """Prefix an error's message with the action, keeping its kind."""
    if err is None:
        return NoteError(action)
    message = f"{action}: {err}"
    wrapped = type(err)(message) if isinstance(err, NoteError) and not isinstance(
        err, RepositoryError
    ) else NoteError(message)
    wrapped.__cause__ = err
    return wrapped


def _is(err: BaseException | None, kinds: tuple[type[BaseException], ...]) -> bool:
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, kinds):
            return True
        seen.add(id(err))
        err = err.__cause__
    return False


def error_status(err: BaseException) -> tuple[int, str]:
    """Return the HTTP status and public message for an error."""
    if _is(err, (RowNotFoundError,)):
        return HTTPStatus.NOT_FOUND, str(err)
    if _is(err, (MarshallError, ValidationError)):
        return HTTPStatus.BAD_REQUEST, str(err)
    return HTTPStatus.INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE


def error_response(message: str, status: int, path: str) -> dict[str, Any]:
    """Build the JSON body describing an error."""
    return {
        "description": message,
        "errorCode": int(status),
        "meta": {
            "path": path,
            "timestamp": datetime.now().astimezone().isoformat(sep=" "),
        },
    }