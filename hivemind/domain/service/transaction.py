"""Store error boundaries shared by the domain services."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import SQLAlchemyError

from hivemind.domain.error import DomainError, StorageFailureError
from hivemind.domain.repository import UnitOfWork


def _storage_failure(operation: str, error: Exception) -> StorageFailureError:
    logfire.error(
        "Storage failure",
        operation=operation,
        error=str(error),
        error_type=type(error).__name__,
    )
    return StorageFailureError(operation, type(error).__name__)


@asynccontextmanager
async def atomic(unit_of_work: UnitOfWork, operation: str) -> AsyncIterator[None]:
    """Run the enclosed reads and writes as one all-or-nothing unit.

    Commits once when the block finishes. Any failure rolls back every write
    made inside the block. Store errors, timeouts included, surface as
    ``StorageFailureError`` and are never retried here.

    Args:
        unit_of_work: Transaction boundary of the current request
        operation: Operation name used in logs and errors

    Raises:
        StorageFailureError: If the store fails or times out
    """
    await unit_of_work.begin()
    try:
        yield
        await unit_of_work.commit()
    except DomainError:
        await unit_of_work.rollback()
        raise
    except (SQLAlchemyError, TimeoutError) as e:
        await unit_of_work.rollback()
        raise _storage_failure(operation, e) from e
    except Exception:
        await unit_of_work.rollback()
        raise


@asynccontextmanager
async def guarded_read(operation: str) -> AsyncIterator[None]:
    """Report store errors of a read-only block as ``StorageFailureError``.

    Reads write nothing, so there is nothing to roll back here.

    Args:
        operation: Operation name used in logs and errors

    Raises:
        StorageFailureError: If the store fails or times out
    """
    try:
        yield
    except (SQLAlchemyError, TimeoutError) as e:
        raise _storage_failure(operation, e) from e
