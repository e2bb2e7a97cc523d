"""Core — error hierarchy and pure helpers shared by services and routes.

Invariants:
    - Nothing in core/ touches the database or FastAPI
"""
