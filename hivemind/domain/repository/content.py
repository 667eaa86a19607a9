"""Content repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from hivemind.domain.model import Content
from hivemind.domain.value import ContentId, HiveId, VoteDelta


class ContentRepository(ABC):
    """Repository for Content entity."""

    @abstractmethod
    async def find_by_id(
        self, content_id: ContentId, for_update: bool = False
    ) -> Optional[Content]:
        """Find a content item by ID.

        Args:
            content_id: The content's unique identifier
            for_update: Lock the row until the unit of work ends

        Returns:
            The content if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_hive(self, hive_id: HiveId) -> List[Content]:
        """Find all content in a hive, oldest first.

        Deleted items are included; hiding them is a presentation concern.

        Args:
            hive_id: Hive ID

        Returns:
            List of content items
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Content]:
        """Find all content items, oldest first.

        Returns:
            List of content items
        """
        pass

    @abstractmethod
    async def save(self, content: Content) -> Content:
        """Save a content item (create or update).

        Counter columns of an existing item are not overwritten; they only
        change through ``adjust_counters``.

        Args:
            content: The content to save

        Returns:
            The saved content
        """
        pass

    @abstractmethod
    async def adjust_counters(
        self,
        content_id: ContentId,
        votes: VoteDelta | None = None,
        comments: int = 0,
    ) -> Optional[Content]:
        """Atomically add deltas to the content's counters.

        Args:
            content_id: Content ID
            votes: Signed change to the vote tallies
            comments: Signed change to the comment count

        Returns:
            The updated content, None if it doesn't exist
        """
        pass
