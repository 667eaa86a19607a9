"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from hivemind.domain.model import Comment
from hivemind.domain.value import CommentId, ContentId, VoteDelta


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier
            for_update: Lock the row until the unit of work ends

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once (batch query).

        Args:
            comment_ids: Comment IDs; unknown IDs are skipped

        Returns:
            List of the comments found
        """
        pass

    @abstractmethod
    async def find_by_content(self, content_id: ContentId) -> List[Comment]:
        """Find all comments on a content item, newest first.

        Args:
            content_id: Content ID

        Returns:
            List of comments, replies included
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_id: CommentId) -> List[Comment]:
        """Find the replies to a top-level comment, oldest first.

        Args:
            parent_id: Parent comment ID

        Returns:
            List of replies
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Vote tallies of an existing comment are not overwritten; they only
        change through ``adjust_votes``.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def adjust_votes(
        self, comment_id: CommentId, delta: VoteDelta
    ) -> Optional[Comment]:
        """Atomically add a delta to the comment's vote tallies.

        Args:
            comment_id: Comment ID
            delta: Signed change to the vote tallies

        Returns:
            The updated comment, None if it doesn't exist
        """
        pass
