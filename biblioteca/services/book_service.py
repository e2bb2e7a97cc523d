"""Book Service — CRUD over books with explicit author-reference validation.

Invariants:
    - get/update/delete raise ResourceNotFoundError for unknown ids
    - create/update reject an author_id with no matching author
      (InvalidAuthorReferenceError) before anything is written
    - update applies only the fields present in the patch
"""

import logging
from typing import Sequence

from biblioteca.core.apply_patch import apply_patch, changed_fields
from biblioteca.core.errors import (
    IdentifierMismatchError, InvalidAuthorReferenceError, ResourceNotFoundError,
)
from biblioteca.db.context import LibraryContext
from biblioteca.models.book import Book
from biblioteca.schemas.book import BookCreate, BookUpdate

logger = logging.getLogger(__name__)


class BookService:
    """Resource handler for Book entities."""

    def __init__(self, context: LibraryContext):
        self.context = context

    async def get(self, book_id: int) -> Book:
        book = await self.context.books.get(book_id)
        if book is None:
            raise ResourceNotFoundError("Book", book_id)
        return book

    async def list(self) -> Sequence[Book]:
        return await self.context.books.all()

    async def create(self, data: BookCreate) -> Book:
        await self._ensure_author_exists(data.author_id)
        book = self.context.books.add(Book(
            title=data.title,
            description=data.description,
            publication_date=data.publication_date,
            author_id=data.author_id,
        ))
        await self.context.save_changes(book)
        logger.info(
            f"Book {book.id} created",
            extra={"book_id": book.id, "author_id": book.author_id},
        )
        return book

    async def update(self, book_id: int, patch: BookUpdate) -> None:
        book = await self.get(book_id)
        if patch.id is not None and patch.id != book_id:
            raise IdentifierMismatchError(book_id, patch.id)
        if "author_id" in changed_fields(patch):
            await self._ensure_author_exists(patch.author_id)
        changes = apply_patch(book, patch)
        await self.context.save_changes()
        logger.info(
            f"Book {book_id} updated: {sorted(changes)}",
            extra={"book_id": book_id},
        )

    async def delete(self, book_id: int) -> None:
        book = await self.get(book_id)
        await self.context.books.remove(book)
        await self.context.save_changes()
        logger.info(f"Book {book_id} deleted", extra={"book_id": book_id})

    async def _ensure_author_exists(self, author_id: int) -> None:
        if not await self.context.authors.exists(author_id):
            raise InvalidAuthorReferenceError(author_id)
