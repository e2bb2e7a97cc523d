"""Library Context — typed entity sets over one AsyncSession (the unit-of-work).

Invariants:
    - One LibraryContext per request; it never outlives its session
    - Mutations are staged with add()/remove() and reach the store only on save_changes()
    - all() returns entities ordered by primary key
    - ids outside the integer column range (1..MAX_ID) are absent, never queried
"""

from typing import Generic, Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from biblioteca.db.base import Base
from biblioteca.models.author import Author
from biblioteca.models.book import Book

T = TypeVar("T", bound=Base)

# Primary keys are 32-bit INTEGER columns
MAX_ID = 2**31 - 1


def in_id_range(entity_id: int) -> bool:
    return 1 <= entity_id <= MAX_ID


class EntitySet(Generic[T]):
    """Collection-style access to one mapped entity type."""

    def __init__(self, session: AsyncSession, model: type[T]):
        self._session = session
        self.model = model

    async def get(self, entity_id: int) -> T | None:
        if not in_id_range(entity_id):
            return None
        result = await self._session.execute(
            select(self.model).where(self.model.id == entity_id),
        )
        return result.scalar_one_or_none()

    async def all(self) -> Sequence[T]:
        result = await self._session.execute(
            select(self.model).order_by(self.model.id),
        )
        return result.scalars().all()

    async def exists(self, entity_id: int) -> bool:
        if not in_id_range(entity_id):
            return False
        result = await self._session.execute(
            select(func.count()).select_from(self.model).where(
                self.model.id == entity_id,
            ),
        )
        return result.scalar_one() > 0

    def add(self, entity: T) -> T:
        self._session.add(entity)
        return entity

    async def remove(self, entity: T) -> None:
        await self._session.delete(entity)


class LibraryContext:
    """Gateway to the catalog store: authors, books, and change flushing."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.authors: EntitySet[Author] = EntitySet(session, Author)
        self.books: EntitySet[Book] = EntitySet(session, Book)

    async def save_changes(self, *refresh: Base) -> None:
        """Commit pending changes, then reload the given entities from the store."""
        await self.session.commit()
        for entity in refresh:
            await self.session.refresh(entity)
