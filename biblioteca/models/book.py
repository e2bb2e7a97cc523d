"""Book ORM — persists books, each owned by a single Author.

Invariants:
    - author_id is non-nullable and references authors.id
    - title and description are non-nullable text
"""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from biblioteca.db.base import Base


class Book(Base):
    """Book entity — belongs to exactly one author."""
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    publication_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("authors.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    author: Mapped["Author"] = relationship(
        "Author", back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, title={self.title!r}, author_id={self.author_id!r})"
