"""Use cases for creating and reading notes."""

from __future__ import annotations

from typing import Protocol

from .domain import CreateNoteDto, Note
from .errors import RepositoryError, RowNotFoundError, wrap_error


class NoteRepository(Protocol):
    """Storage for notes; failures are raised as RepositoryError."""

    def save(self, dto: CreateNoteDto) -> Note:
        """Persist a new note and return it with its identifier."""

    def get_note_by_id(self, note_id: int) -> Note:
        """Return the note with the given identifier.

        A missing row is reported as RepositoryError whose err is a LookupError.
        """


class CreateNoteService:
    """Creates and stores notes."""

    def __init__(self, repository: NoteRepository) -> None:
        self._repository = repository

    def create_and_save(self, dto: CreateNoteDto) -> Note:
        try:
            return self._repository.save(dto)
        except RepositoryError as err:
            raise wrap_error(err.action, err.err) from err


class GetNoteService:
    """Looks up notes by identifier."""

    def __init__(self, repository: NoteRepository) -> None:
        self._repository = repository

    def get_by_id(self, note_id: int) -> Note:
        try:
            return self._repository.get_note_by_id(note_id)
        except RepositoryError as err:
            cause = RowNotFoundError() if isinstance(err.err, LookupError) else None
            raise wrap_error(err.action, cause) from err


class NoteDelegate:
    """Single entry point to the note use cases."""

    def __init__(self, repository: NoteRepository) -> None:
        self._create = CreateNoteService(repository)
        self._get = GetNoteService(repository)

    def create_and_save(self, dto: CreateNoteDto) -> Note:
        return self._create.create_and_save(dto)

    def get_by_id(self, note_id: int) -> Note:
        return self._get.get_by_id(note_id)