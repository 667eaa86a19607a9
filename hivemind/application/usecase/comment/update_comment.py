"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.items import CommentItem
from hivemind.domain.model import CommentPatch
from hivemind.domain.service import CommentService
from hivemind.domain.value import AccountId, CommentId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    account_id: str  # Current account ID (must be author)
    patch: CommentPatch


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's message."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the caller isn't the author
            ContentDeletedError: If the comment is deleted
        """
        updated = await self.comment_service.update_comment(
            CommentId(UUID(request.comment_id)),
            AccountId(UUID(request.account_id)),
            request.patch,
        )
        return CommentItem.from_domain(updated)
