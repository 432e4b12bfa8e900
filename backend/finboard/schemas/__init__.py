"""Pydantic Schemas — form and response validation at the API boundary.

Invariants:
    - Schemas validate at system boundary (form input, API responses)
    - Domain types from core/ used for enum fields
"""
