"""In-memory hive repository for testing."""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from hivemind.domain.model import Hive
from hivemind.domain.repository import HiveRepository
from hivemind.domain.value import HiveId, HiveName, RollupDelta

from .store import InMemoryStore


class InMemoryHiveRepository(HiveRepository):
    """In-memory implementation of HiveRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_id(
        self, hive_id: HiveId, for_update: bool = False
    ) -> Optional[Hive]:
        """Find a hive by ID (locking is a no-op in memory)."""
        return self.store.hives.get(hive_id)

    async def find_by_name(self, name: HiveName) -> Optional[Hive]:
        """Find a hive by name."""
        for hive in self.store.hives.values():
            if hive.name == name:
                return hive
        return None

    async def find_all(self) -> List[Hive]:
        """Find all hives ordered by creation."""
        return sorted(self.store.hives.values(), key=lambda h: h.created_at)

    async def save(self, hive: Hive) -> Hive:
        """Save a hive, keeping the stored rollups of an existing one.

        Raises:
            IntegrityError: If another hive has the same name
        """
        for other in self.store.hives.values():
            if other.name == hive.name and other.id != hive.id:
                raise IntegrityError("Duplicate hive name", None, Exception())

        existing = self.store.hives.get(hive.id)
        if existing:
            hive = hive.model_copy(
                update={
                    "total_upvotes": existing.total_upvotes,
                    "total_downvotes": existing.total_downvotes,
                    "total_comments": existing.total_comments,
                    "total_content": existing.total_content,
                }
            )
        self.store.hives[hive.id] = hive
        return hive

    async def adjust_rollups(
        self, hive_id: HiveId, delta: RollupDelta
    ) -> Optional[Hive]:
        """Add a delta to the hive's rollups."""
        hive = self.store.hives.get(hive_id)
        if hive is None:
            return None
        updated = hive.model_copy(
            update={
                "total_upvotes": hive.total_upvotes + delta.upvotes,
                "total_downvotes": hive.total_downvotes + delta.downvotes,
                "total_comments": hive.total_comments + delta.comments,
                "total_content": hive.total_content + delta.content,
            }
        )
        self.store.hives[hive_id] = updated
        return updated
