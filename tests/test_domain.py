import dataclasses

import pytest

from notekeeper.domain import CreateNoteDto, Note


def test_to_dict_contains_all_fields():
    note = Note(id=3, name="n", link="l", description="d")
    assert note.to_dict() == {"id": 3, "name": "n", "link": "l", "description": "d"}


def test_note_is_immutable():
    note = Note(id=1, name="n", link="l", description="d")
    with pytest.raises(dataclasses.FrozenInstanceError):
        note.name = "other"
    assert note.to_dict() == {"id": 1, "name": "n", "link": "l", "description": "d"}


def test_create_dto_defaults_to_empty_strings():
    dto = CreateNoteDto()
    assert (dto.name, dto.link, dto.description) == ("", "", "")


def test_notes_compare_by_value():
    first = Note(1, "a", "b", "c")
    second = Note(1, "a", "b", "c")
    assert first == second
    assert len({first, second}) == 1
    assert first.to_dict() == second.to_dict() == {
        "id": 1,
        "name": "a",
        "link": "b",
        "description": "c",
    }
    assert (Note(2, "a", "b", "c") == first) is False