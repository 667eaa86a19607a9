"""In-memory comment repository for testing."""

from typing import List, Optional, Sequence

from hivemind.domain.model import Comment
from hivemind.domain.repository import CommentRepository
from hivemind.domain.value import CommentId, ContentId, VoteDelta

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID (locking is a no-op in memory)."""
        return self.store.comments.get(comment_id)

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once."""
        return [
            self.store.comments[cid] for cid in comment_ids if cid in self.store.comments
        ]

    async def find_by_content(self, content_id: ContentId) -> List[Comment]:
        """Find all comments on a content item, newest first."""
        items = [c for c in self.store.comments.values() if c.content_id == content_id]
        return sorted(items, key=lambda c: c.created_at, reverse=True)

    async def find_replies(self, parent_id: CommentId) -> List[Comment]:
        """Find the replies to a comment, oldest first."""
        items = [c for c in self.store.comments.values() if c.parent_id == parent_id]
        return sorted(items, key=lambda c: c.created_at)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment, keeping the stored tallies of an existing one."""
        existing = self.store.comments.get(comment.id)
        if existing:
            comment = comment.model_copy(
                update={"upvotes": existing.upvotes, "downvotes": existing.downvotes}
            )
        self.store.comments[comment.id] = comment
        return comment

    async def adjust_votes(
        self, comment_id: CommentId, delta: VoteDelta
    ) -> Optional[Comment]:
        """Add a delta to the comment's vote tallies."""
        comment = self.store.comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(
            update={
                "upvotes": comment.upvotes + delta.upvotes,
                "downvotes": comment.downvotes + delta.downvotes,
            }
        )
        self.store.comments[comment_id] = updated
        return updated
