"""Infrastructure Layer — database access, credential checks, logging setup.

Invariants:
    - Implements the Protocols declared in core/repository_protocols.py
    - Never imports from services/ or api/
"""
