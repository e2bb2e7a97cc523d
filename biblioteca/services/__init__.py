"""Services — resource handlers for authors and books.

Invariants:
    - Services receive a LibraryContext; they never open sessions themselves
    - NotFound is raised before any mutation is staged
    - Services return ORM entities; routes shape responses
"""
