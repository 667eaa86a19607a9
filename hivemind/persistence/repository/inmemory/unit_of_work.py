"""In-memory unit of work for testing."""

from hivemind.domain.repository import UnitOfWork

from .store import InMemoryStore


class InMemoryUnitOfWork(UnitOfWork):
    """Unit of work over an in-memory store.

    Writes land in the store immediately; rollback restores the snapshot
    taken when the unit began. Units of different requests on one store run
    one after another, so a rollback never discards another unit's writes.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store
        self._snapshot = store.snapshot()
        self._holds_lock = False
        self.commits = 0
        self.rollbacks = 0

    async def begin(self) -> None:
        await self.store.write_lock.acquire()
        self._holds_lock = True
        self._snapshot = self.store.snapshot()

    async def commit(self) -> None:
        self._snapshot = self.store.snapshot()
        self.commits += 1
        self._release()

    async def rollback(self) -> None:
        self.store.restore(self._snapshot)
        self.rollbacks += 1
        self._release()

    def _release(self) -> None:
        if self._holds_lock:
            self._holds_lock = False
            self.store.write_lock.release()
