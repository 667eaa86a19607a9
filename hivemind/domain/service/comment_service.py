"""Comment domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import List

import logfire

from hivemind.config import CommentSettings
from hivemind.domain.error import (
    ContentDeletedError,
    NotAuthorizedError,
    NotFoundError,
)
from hivemind.domain.model import Comment, CommentPatch
from hivemind.domain.repository import CommentRepository, UnitOfWork
from hivemind.domain.value import AccountId, CommentId, ContentId

from .base import Service
from .transaction import atomic, guarded_read


@dataclass
class CommentThread:
    """A top-level comment with its replies, oldest reply first."""

    comment: Comment
    replies: List[Comment]


class CommentService(Service):
    """Domain service for comment reads and edits.

    Reads project deleted comments with the configured placeholder; the
    stored message is never overwritten.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        unit_of_work: UnitOfWork,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            unit_of_work: Transaction boundary of the current request
            comment_settings: Comment presentation settings
        """
        self.comment_repository = comment_repository
        self.unit_of_work = unit_of_work
        self.placeholder = comment_settings.deleted_placeholder

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID, masked if deleted.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            async with guarded_read("get_comment"):
                comment = await self._find(comment_id)
            return comment.for_display(self.placeholder)

    async def get_comments_for_content(self, content_id: ContentId) -> List[Comment]:
        """Get all comments on a content item, newest first.

        Args:
            content_id: Content ID

        Returns:
            List of comments, deleted ones masked
        """
        with logfire.span(
            "comment_service.get_comments_for_content", content_id=str(content_id)
        ):
            async with guarded_read("get_comments_for_content"):
                comments = await self.comment_repository.find_by_content(content_id)
            logfire.info("Comments retrieved for content", count=len(comments))
            return [c.for_display(self.placeholder) for c in comments]

    async def get_thread(self, comment_id: CommentId) -> CommentThread:
        """Get a comment together with its replies.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.get_thread", comment_id=str(comment_id)):
            async with guarded_read("get_thread"):
                comment = await self._find(comment_id)
                replies = await self.comment_repository.find_replies(comment_id)
            logfire.info("Comment thread retrieved", replies=len(replies))
            return CommentThread(
                comment=comment.for_display(self.placeholder),
                replies=[r.for_display(self.placeholder) for r in replies],
            )

    async def update_comment(
        self, comment_id: CommentId, editor_id: AccountId, patch: CommentPatch
    ) -> Comment:
        """Apply an author's patch to a comment.

        Args:
            comment_id: Comment ID
            editor_id: Account making the edit
            patch: Fields to change

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the editor isn't the author
            ContentDeletedError: If the comment is deleted
        """
        changes = patch.changes()
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            editor_id=str(editor_id),
        ):
            async with atomic(self.unit_of_work, "update_comment"):
                comment = await self.comment_repository.find_by_id(
                    comment_id, for_update=True
                )
                if comment is None:
                    logfire.warn("Comment not found", comment_id=str(comment_id))
                    raise NotFoundError("Comment", str(comment_id))
                if comment.account_id != editor_id:
                    logfire.warn(
                        "Comment edit by non-author",
                        author_id=str(comment.account_id),
                    )
                    raise NotAuthorizedError(
                        "comment", str(comment_id), str(editor_id)
                    )
                if comment.deleted:
                    logfire.warn("Edit of deleted comment", comment_id=str(comment_id))
                    raise ContentDeletedError("comment", str(comment_id))

                updated = await self.comment_repository.save(
                    comment.model_copy(
                        update={**changes, "last_edited": datetime.now()}
                    )
                )

            logfire.info("Comment updated", comment_id=str(comment_id))
            return updated

    async def _find(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment
