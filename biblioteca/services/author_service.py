"""Author Service — CRUD over authors, including cascade deletion of their books.

Invariants:
    - get/update/delete raise ResourceNotFoundError for unknown ids
    - update applies only the fields present in the patch
    - delete removes the author and every book it owns in one commit
"""

import logging
from typing import Sequence

from biblioteca.core.apply_patch import apply_patch
from biblioteca.core.errors import IdentifierMismatchError, ResourceNotFoundError
from biblioteca.db.context import LibraryContext
from biblioteca.models.author import Author
from biblioteca.schemas.author import AuthorCreate, AuthorUpdate

logger = logging.getLogger(__name__)


class AuthorService:
    """Resource handler for Author entities."""

    def __init__(self, context: LibraryContext):
        self.context = context

    async def get(self, author_id: int) -> Author:
        author = await self.context.authors.get(author_id)
        if author is None:
            raise ResourceNotFoundError("Author", author_id)
        return author

    async def list(self) -> Sequence[Author]:
        return await self.context.authors.all()

    async def create(self, data: AuthorCreate) -> Author:
        author = self.context.authors.add(Author(
            name=data.name,
            birth_date=data.birth_date,
            nationality=data.nationality,
        ))
        await self.context.save_changes(author)
        logger.info(f"Author {author.id} created", extra={"author_id": author.id})
        return author

    async def update(self, author_id: int, patch: AuthorUpdate) -> None:
        author = await self.get(author_id)
        if patch.id is not None and patch.id != author_id:
            raise IdentifierMismatchError(author_id, patch.id)
        changes = apply_patch(author, patch)
        await self.context.save_changes()
        logger.info(
            f"Author {author_id} updated: {sorted(changes)}",
            extra={"author_id": author_id},
        )

    async def delete(self, author_id: int) -> None:
        author = await self.get(author_id)
        await self.context.authors.remove(author)
        await self.context.save_changes()
        logger.info(f"Author {author_id} deleted", extra={"author_id": author_id})
