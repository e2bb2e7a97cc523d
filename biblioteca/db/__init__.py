"""Database Layer — declarative Base and the typed LibraryContext gateway.

Invariants:
    - All sessions are async (AsyncSession)
    - Engine lifecycle lives in infrastructure/database.py, not here
"""
