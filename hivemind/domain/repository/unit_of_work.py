"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary shared by the repositories of one request.

    Everything written through the repositories since the last commit
    becomes visible together on ``commit`` or not at all.
    """

    async def begin(self) -> None:
        """Mark the start of an atomic unit.

        Stores that open transactions implicitly need nothing here.
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit all pending writes.

        Raises:
            StorageFailureError: If the store rejects or times out the commit
        """
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all pending writes and release row locks."""
        pass
