"""Shared schema validators."""

from pydantic import BaseModel


def strip_non_empty(v: str | None) -> str | None:
    """Strip surrounding whitespace; whitespace-only text is rejected."""
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("value cannot be empty or whitespace")
    return v


def reject_explicit_nulls(patch: BaseModel, required: tuple[str, ...]) -> None:
    """A patch may omit a required column but may not set it to null."""
    nulled = [
        name for name in required
        if name in patch.model_fields_set and getattr(patch, name) is None
    ]
    if nulled:
        raise ValueError(f"{', '.join(nulled)} cannot be null")
