"""Book schemas — required fields, positive author ids, patch semantics."""

import pytest
from pydantic import ValidationError

from biblioteca.schemas.book import BookCreate, BookUpdate


def test_create_requires_title_description_and_author():
    with pytest.raises(ValidationError) as exc_info:
        BookCreate()
    missing = {e["loc"][0] for e in exc_info.value.errors()}
    assert missing == {"title", "description", "author_id"}


def test_create_publication_date_is_optional():
    book = BookCreate(title="t", description="d", author_id=1)
    assert book.publication_date is None


@pytest.mark.parametrize("author_id", [0, -3])
def test_create_rejects_non_positive_author_id(author_id):
    with pytest.raises(ValidationError):
        BookCreate(title="t", description="d", author_id=author_id)


def test_create_strips_title():
    assert BookCreate(title="  Ficciones ", description="d", author_id=1).title == "Ficciones"


def test_update_rejects_explicit_null_author_id():
    with pytest.raises(ValidationError, match="author_id cannot be null"):
        BookUpdate(author_id=None)


def test_update_rejects_blank_description():
    with pytest.raises(ValidationError):
        BookUpdate(description="  ")


def test_update_accepts_id_echo():
    patch = BookUpdate(id=3, title="Nuevo")
    assert patch.id == 3
    assert patch.model_fields_set == {"id", "title"}
