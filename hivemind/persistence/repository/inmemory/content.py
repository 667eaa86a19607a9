"""In-memory content repository for testing."""

from typing import List, Optional

from hivemind.domain.model import Content
from hivemind.domain.repository import ContentRepository
from hivemind.domain.value import ContentId, HiveId, VoteDelta

from .store import InMemoryStore


class InMemoryContentRepository(ContentRepository):
    """In-memory implementation of ContentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_id(
        self, content_id: ContentId, for_update: bool = False
    ) -> Optional[Content]:
        """Find a content item by ID (locking is a no-op in memory)."""
        return self.store.contents.get(content_id)

    async def find_by_hive(self, hive_id: HiveId) -> List[Content]:
        """Find all content in a hive, oldest first."""
        items = [c for c in self.store.contents.values() if c.hive_id == hive_id]
        return sorted(items, key=lambda c: c.created_at)

    async def find_all(self) -> List[Content]:
        """Find all content, oldest first."""
        return sorted(self.store.contents.values(), key=lambda c: c.created_at)

    async def save(self, content: Content) -> Content:
        """Save a content item, keeping the stored counters of an existing one."""
        existing = self.store.contents.get(content.id)
        if existing:
            content = content.model_copy(
                update={
                    "upvotes": existing.upvotes,
                    "downvotes": existing.downvotes,
                    "comment_count": existing.comment_count,
                }
            )
        self.store.contents[content.id] = content
        return content

    async def adjust_counters(
        self,
        content_id: ContentId,
        votes: VoteDelta | None = None,
        comments: int = 0,
    ) -> Optional[Content]:
        """Add deltas to the content's counters."""
        content = self.store.contents.get(content_id)
        if content is None:
            return None
        votes = votes or VoteDelta()
        updated = content.model_copy(
            update={
                "upvotes": content.upvotes + votes.upvotes,
                "downvotes": content.downvotes + votes.downvotes,
                "comment_count": content.comment_count + comments,
            }
        )
        self.store.contents[content_id] = updated
        return updated
