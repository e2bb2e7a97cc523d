"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - *Update schemas are patches: only fields the caller sends are applied

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
