"""Comment read use cases."""

from uuid import UUID

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.items import CommentItem
from hivemind.domain.service import CommentService, ContentService
from hivemind.domain.value import CommentId, ContentId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    content_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    content_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing the comments on a content item, newest first."""

    def __init__(
        self, comment_service: CommentService, content_service: ContentService
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            content_service: Content domain service
        """
        self.comment_service = comment_service
        self.content_service = content_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Deleted comments are returned with the placeholder message.

        Raises:
            NotFoundError: If the content doesn't exist
        """
        content_id = ContentId(UUID(request.content_id))
        await self.content_service.get_content(content_id)

        comments = await self.comment_service.get_comments_for_content(content_id)
        items = [CommentItem.from_domain(comment) for comment in comments]
        return GetCommentsResponse(
            content_id=request.content_id, comments=items, total=len(items)
        )


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string


class GetCommentUseCase(BaseUseCase):
    """Use case for reading a single comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        comment = await self.comment_service.get_comment(
            CommentId(UUID(request.comment_id))
        )
        return CommentItem.from_domain(comment)


class GetCommentThreadResponse(BaseModel):
    """A comment with its replies."""

    comment: CommentItem
    replies: list[CommentItem]


class GetCommentThreadUseCase(BaseUseCase):
    """Use case for reading a comment together with its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentThreadResponse:
        thread = await self.comment_service.get_thread(
            CommentId(UUID(request.comment_id))
        )
        return GetCommentThreadResponse(
            comment=CommentItem.from_domain(thread.comment),
            replies=[CommentItem.from_domain(reply) for reply in thread.replies],
        )
