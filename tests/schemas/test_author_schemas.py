"""Author schemas — required text is stripped and non-empty, patches track set fields."""

from datetime import date

import pytest
from pydantic import ValidationError

from biblioteca.schemas.author import AuthorCreate, AuthorResponse, AuthorUpdate


# --- AuthorCreate -------------------------------------------------------------

def test_create_requires_name_and_nationality():
    with pytest.raises(ValidationError) as exc_info:
        AuthorCreate()
    missing = {e["loc"][0] for e in exc_info.value.errors()}
    assert missing == {"name", "nationality"}


def test_create_birth_date_is_optional():
    author = AuthorCreate(name="Autor", nationality="Argentina")
    assert author.birth_date is None


def test_create_parses_iso_birth_date():
    author = AuthorCreate(name="Autor", nationality="Argentina", birth_date="1899-08-24")
    assert author.birth_date == date(1899, 8, 24)


def test_create_rejects_whitespace_name():
    with pytest.raises(ValidationError):
        AuthorCreate(name="   ", nationality="Argentina")


def test_create_name_max_length_enforced():
    with pytest.raises(ValidationError):
        AuthorCreate(name="x" * 201, nationality="Argentina")


# --- AuthorUpdate -------------------------------------------------------------

def test_update_all_fields_optional():
    patch = AuthorUpdate()
    assert patch.model_fields_set == set()


def test_update_tracks_only_supplied_fields():
    patch = AuthorUpdate(name="Nuevo")
    assert patch.model_fields_set == {"name"}


def test_update_rejects_explicit_null_for_required_column():
    with pytest.raises(ValidationError, match="nationality cannot be null"):
        AuthorUpdate(nationality=None)


def test_update_allows_explicit_null_birth_date():
    patch = AuthorUpdate(birth_date=None)
    assert "birth_date" in patch.model_fields_set


# --- AuthorResponse -----------------------------------------------------------

def test_response_reads_from_attributes():
    class Row:
        id = 4
        name = "Autor"
        birth_date = None
        nationality = "Chile"

    resp = AuthorResponse.model_validate(Row())
    assert resp.id == 4
    assert resp.nationality == "Chile"
