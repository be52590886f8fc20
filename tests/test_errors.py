from http import HTTPStatus

import pytest

from notekeeper.errors import (
    INTERNAL_ERROR_MESSAGE,
    MARSHALL_MESSAGE,
    ROW_NOT_FOUND_MESSAGE,
    MarshallError,
    NoteError,
    RepositoryError,
    RowNotFoundError,
    ValidationError,
    error_response,
    error_status,
    wrap_error,
)


def test_default_messages():
    assert str(RowNotFoundError()) == "запись не найдена"
    assert str(MarshallError()) == MARSHALL_MESSAGE


def test_wrap_error_keeps_kind_and_prefixes_message():
    cause = RowNotFoundError()
    wrapped = wrap_error("get note", cause)
    assert isinstance(wrapped, RowNotFoundError)
    assert str(wrapped) == f"get note: {ROW_NOT_FOUND_MESSAGE}"
    assert wrapped.__cause__ is cause


def test_wrap_error_generic_exception_is_internal():
    wrapped = wrap_error("save", ValueError("boom"))
    assert str(wrapped) == "save: boom"
    assert error_status(wrapped) == (HTTPStatus.INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def test_wrap_error_without_cause():
    wrapped = wrap_error("get note", None)
    assert isinstance(wrapped, NoteError)
    assert error_status(wrapped)[0] == HTTPStatus.INTERNAL_SERVER_ERROR


def test_row_not_found_status():
    assert error_status(RowNotFoundError()) == (HTTPStatus.NOT_FOUND, ROW_NOT_FOUND_MESSAGE)


@pytest.mark.parametrize("kind", [MarshallError, ValidationError])
def test_bad_request_status(kind):
    err = kind()
    assert error_status(err) == (HTTPStatus.BAD_REQUEST, str(err))


def test_cause_chain_is_followed():
    err = RuntimeError("outer")
    err.__cause__ = RowNotFoundError()
    assert error_status(err)[0] == HTTPStatus.NOT_FOUND


def test_repository_error_attributes():
    cause = RuntimeError("db down")
    err = RepositoryError("insert note", cause)
    assert err.action == "insert note"
    assert err.err is cause
    assert str(err) == "insert note: db down"


def test_error_response_shape():
    body = error_response("msg", HTTPStatus.NOT_FOUND, "/notes/1")
    assert body["description"] == "msg"
    assert body["errorCode"] == HTTPStatus.NOT_FOUND
    assert body["meta"]["path"] == "/notes/1"
    assert isinstance(body["meta"]["timestamp"], str) and body["meta"]["timestamp"]