"""Storage Guard — maps any backend failure inside a block to StorageError.

Invariants:
    - The backend exception is logged with operation + message, then chained
      as __cause__ of a StorageError carrying the fixed user-facing message
    - FinboardError raised inside the block passes through untouched
    - The backend message is kept in context.debug_info, never in .message

Design Decisions:
    - Context manager instead of per-function try/except: one place decides the
      logging shape and the chaining, every action/query uses it the same way
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from finboard.core.errors import ErrorContext, FinboardError, StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_operation(
    operation: str, message: str, invoice_id: str | None = None,
) -> Iterator[None]:
    """Wrap store calls; on failure raise StorageError(message) from the cause."""
    try:
        yield
    except FinboardError:
        raise
    except Exception as e:
        logger.error(
            f"Store error during {operation}: {e}",
            extra={"operation": operation, "invoice_id": invoice_id},
        )
        raise StorageError(
            message, operation,
            ErrorContext(invoice_id=invoice_id, debug_info={"detail": str(e)}),
        ) from e
