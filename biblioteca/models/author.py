"""Author ORM — persists the authors that own books in the catalog.

Invariants:
    - id is an autoincrement integer primary key, never reassigned
    - name and nationality are non-nullable text
    - deleting an Author deletes every Book it owns

Design Decisions:
    - books is never loaded implicitly (lazy="raise"); deleting an author leaves
      the book rows to ON DELETE CASCADE on books.author_id
"""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from biblioteca.db.base import Base


class Author(Base):
    """Author aggregate root — owns zero or more books."""
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    nationality: Mapped[str] = mapped_column(String(100), nullable=False)

    # Relationships
    books: Mapped[list["Book"]] = relationship(
        "Book", back_populates="author",
        cascade="all, delete-orphan", passive_deletes=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id!r}, name={self.name!r})"
