"""Biblioteca — library catalog service for authors and their books.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
