"""Services Layer — mutation actions and dashboard queries.

Invariants:
    - Every service function receives its store explicitly (no global client)
    - Backend failures are logged and re-raised as StorageError with a fixed message

Design Decisions:
    - Actions return effects instead of calling the framework (testable ordering)
"""
