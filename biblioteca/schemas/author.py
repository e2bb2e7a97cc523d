"""Author Schemas — create/patch/response contracts for /autores.

Invariants:
    - AuthorCreate.name: 1-200 chars, stripped, non-empty
    - AuthorCreate.nationality: 1-100 chars, stripped, non-empty
    - AuthorUpdate may omit any field but never null out name or nationality
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from biblioteca.schemas.common import reject_explicit_nulls, strip_non_empty


class AuthorCreate(BaseModel):
    """Author creation payload."""
    name: str = Field(min_length=1, max_length=200)
    birth_date: date | None = None
    nationality: str = Field(min_length=1, max_length=100)

    @field_validator("name", "nationality")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return strip_non_empty(v)


class AuthorUpdate(BaseModel):
    """Author patch — unset fields keep their stored value."""
    id: int | None = None
    name: str | None = Field(None, min_length=1, max_length=200)
    birth_date: date | None = None
    nationality: str | None = Field(None, min_length=1, max_length=100)

    @field_validator("name", "nationality")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return strip_non_empty(v)

    @model_validator(mode="after")
    def validate_required_columns(self):
        reject_explicit_nulls(self, ("name", "nationality"))
        return self


class AuthorResponse(BaseModel):
    """Author as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    birth_date: date | None = None
    nationality: str
