"""Partial Update — copies only the fields a caller actually supplied onto an entity.

Invariants:
    - Fields absent from the patch keep their previous value
    - Identifier fields are never written, even when echoed in the patch
"""

from typing import Any

from pydantic import BaseModel

IMMUTABLE_FIELDS = frozenset({"id"})


def changed_fields(patch: BaseModel) -> dict[str, Any]:
    """Fields explicitly set on the patch, minus immutable ones."""
    return {
        name: value
        for name, value in patch.model_dump(exclude_unset=True).items()
        if name not in IMMUTABLE_FIELDS
    }


def apply_patch(entity: Any, patch: BaseModel) -> dict[str, Any]:
    """Apply supplied fields onto entity. Returns what was applied."""
    changes = changed_fields(patch)
    for name, value in changes.items():
        setattr(entity, name, value)
    return changes
