"""Book Schemas — create/patch/response contracts for /libros.

Invariants:
    - BookCreate.title: 1-300 chars, description: 1-5000 chars, both stripped
    - author_id is a positive integer; existence is checked by BookService
    - BookUpdate may omit any field but never null out title, description or author_id
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from biblioteca.schemas.common import reject_explicit_nulls, strip_non_empty


class BookCreate(BaseModel):
    """Book creation payload."""
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=5_000)
    publication_date: date | None = None
    author_id: int = Field(gt=0)

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return strip_non_empty(v)


class BookUpdate(BaseModel):
    """Book patch — unset fields keep their stored value."""
    id: int | None = None
    title: str | None = Field(None, min_length=1, max_length=300)
    description: str | None = Field(None, min_length=1, max_length=5_000)
    publication_date: date | None = None
    author_id: int | None = Field(None, gt=0)

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return strip_non_empty(v)

    @model_validator(mode="after")
    def validate_required_columns(self):
        reject_explicit_nulls(self, ("title", "description", "author_id"))
        return self


class BookResponse(BaseModel):
    """Book as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    publication_date: date | None = None
    author_id: int
