"""Create comment use case."""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.items import CommentItem
from hivemind.domain.model import Comment
from hivemind.domain.service import AggregateConsistencyEngine, CreationOutcome
from hivemind.domain.value import AccountId, CommentId, ContentId, Username


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    content_id: str  # UUID string
    message: str
    account_id: str  # Account ID from caller identity
    username: str  # Username from caller identity


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem
    content_comment_count: int
    hive_total_comments: int

    @classmethod
    def from_outcome(cls, outcome: CreationOutcome) -> "CreateCommentResponse":
        return cls(
            comment=CommentItem.from_domain(outcome.created),
            content_comment_count=outcome.content.comment_count,
            hive_total_comments=outcome.hive.total_comments,
        )


def build_comment(
    content_id: str,
    message: str,
    account_id: str,
    username: str,
    parent_id: str | None = None,
) -> Comment:
    """Build a new comment with zeroed tallies."""
    return Comment(
        id=CommentId(uuid4()),
        content_id=ContentId(UUID(content_id)),
        parent_id=CommentId(UUID(parent_id)) if parent_id else None,
        author=Username(username),
        account_id=AccountId(UUID(account_id)),
        message=message,
        created_at=datetime.now(),
    )


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a content item."""

    def __init__(self, engine: AggregateConsistencyEngine) -> None:
        """Initialize create comment use case.

        Args:
            engine: Aggregate consistency engine
        """
        self.engine = engine

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment with the updated content and hive counts

        Raises:
            NotFoundError: If the content doesn't exist
        """
        comment = build_comment(
            content_id=request.content_id,
            message=request.message,
            account_id=request.account_id,
            username=request.username,
        )
        outcome = await self.engine.create_comment(comment)
        return CreateCommentResponse.from_outcome(outcome)
