"""ORM Models — SQLAlchemy declarative models for the catalog entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Author is the aggregate root; every Book belongs to exactly one Author

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from biblioteca.models.author import Author  # noqa: F401
from biblioteca.models.book import Book  # noqa: F401
