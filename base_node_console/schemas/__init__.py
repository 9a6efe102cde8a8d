"""Schemas: Pydantic models for data crossing the backend boundary.

Invariants:
    - Schemas describe what backends return; they hold no behavior beyond rendering
"""
