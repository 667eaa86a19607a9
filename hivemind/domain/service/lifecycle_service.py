"""Lifecycle manager domain service.

Soft delete and undelete for content items and comments, plus the
creation-time rollup increments they mirror. A deleted item keeps its row,
identifier and vote tallies; only the item counts on its parents change.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import logfire

from hivemind.domain.error import AlreadyDeletedError, NotDeletedError, NotFoundError
from hivemind.domain.model import Comment, Content, Hive, VotableTarget
from hivemind.domain.repository import (
    CommentRepository,
    ContentRepository,
    HiveRepository,
)
from hivemind.domain.value import ContentId, HiveId, RollupDelta

from .base import Service


@dataclass
class LifecycleResult:
    """Rows as they stand after a lifecycle transition."""

    target: VotableTarget
    content: Optional[Content]  # Parent content, set for comment targets
    hive: Hive


class LifecycleManager(Service):
    """Applies Active <-> Deleted transitions and their rollup deltas.

    Deleting a comment decrements its content's comment_count and the hive's
    total_comments; deleting a content item decrements total_content.
    Undelete applies exactly the opposite delta.
    """

    def __init__(
        self,
        hive_repository: HiveRepository,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize lifecycle manager.

        Args:
            hive_repository: Hive repository
            content_repository: Content repository
            comment_repository: Comment repository
        """
        self.hive_repository = hive_repository
        self.content_repository = content_repository
        self.comment_repository = comment_repository

    async def soft_delete(
        self, target: VotableTarget, hive: Hive
    ) -> LifecycleResult:
        """Mark ``target`` deleted and decrement its parents' item counts.

        Args:
            target: Locked content item or comment
            hive: Locked hive owning the target

        Returns:
            Updated target, parent content (for comments) and hive

        Raises:
            AlreadyDeletedError: If the target is already deleted
        """
        resource = target.votable_type.value
        with logfire.span(
            "lifecycle.soft_delete", votable_type=resource, votable_id=str(target.id)
        ):
            if target.deleted:
                logfire.warn("Target already deleted", votable_id=str(target.id))
                raise AlreadyDeletedError(resource.capitalize(), str(target.id))

            return await self._transition(target, hive, deleted=True)

    async def undelete(self, target: VotableTarget, hive: Hive) -> LifecycleResult:
        """Clear the deleted flag of ``target`` and restore its parents' item counts.

        Args:
            target: Locked content item or comment
            hive: Locked hive owning the target

        Returns:
            Updated target, parent content (for comments) and hive

        Raises:
            NotDeletedError: If the target is not deleted
        """
        resource = target.votable_type.value
        with logfire.span(
            "lifecycle.undelete", votable_type=resource, votable_id=str(target.id)
        ):
            if not target.deleted:
                logfire.warn("Target is not deleted", votable_id=str(target.id))
                raise NotDeletedError(resource.capitalize(), str(target.id))

            return await self._transition(target, hive, deleted=False)

    async def record_content_created(self, content: Content) -> Hive:
        """Count a newly created content item on its hive."""
        return await self._adjust_hive(content.hive_id, RollupDelta(content=1))

    async def record_comment_created(
        self, comment: Comment, content: Content
    ) -> tuple[Content, Hive]:
        """Count a newly created comment or reply on its content and hive."""
        updated_content = await self._adjust_content_comments(comment.content_id, 1)
        hive = await self._adjust_hive(content.hive_id, RollupDelta(comments=1))
        return updated_content, hive

    async def _transition(
        self, target: VotableTarget, hive: Hive, deleted: bool
    ) -> LifecycleResult:
        step = -1 if deleted else 1
        stamped = target.model_copy(
            update={"deleted": deleted, "last_edited": datetime.now()}
        )

        if isinstance(target, Comment):
            updated = await self.comment_repository.save(stamped)
            content = await self._adjust_content_comments(target.content_id, step)
            updated_hive = await self._adjust_hive(hive.id, RollupDelta(comments=step))
            logfire.info(
                "Comment lifecycle transition applied",
                deleted=deleted,
                comment_count=content.comment_count,
                hive_total_comments=updated_hive.total_comments,
            )
            return LifecycleResult(target=updated, content=content, hive=updated_hive)

        updated = await self.content_repository.save(stamped)
        updated_hive = await self._adjust_hive(hive.id, RollupDelta(content=step))
        logfire.info(
            "Content lifecycle transition applied",
            deleted=deleted,
            hive_total_content=updated_hive.total_content,
        )
        return LifecycleResult(target=updated, content=None, hive=updated_hive)

    async def _adjust_content_comments(
        self, content_id: ContentId, step: int
    ) -> Content:
        content = await self.content_repository.adjust_counters(
            content_id, comments=step
        )
        if content is None:
            raise NotFoundError("Content", str(content_id))
        return content

    async def _adjust_hive(self, hive_id: HiveId, delta: RollupDelta) -> Hive:
        hive = await self.hive_repository.adjust_rollups(hive_id, delta)
        if hive is None:
            raise NotFoundError("Hive", str(hive_id))
        return hive
