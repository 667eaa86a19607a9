"""Create reply use case."""

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.comment.create_comment import (
    CreateCommentResponse,
    build_comment,
)
from hivemind.domain.service import AggregateConsistencyEngine


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    content_id: str  # UUID string
    parent_id: str  # UUID string of a top-level comment
    message: str
    account_id: str  # Account ID from caller identity
    username: str  # Username from caller identity


class CreateReplyUseCase(BaseUseCase):
    """Use case for replying to a top-level comment."""

    def __init__(self, engine: AggregateConsistencyEngine) -> None:
        """Initialize create reply use case.

        Args:
            engine: Aggregate consistency engine
        """
        self.engine = engine

    async def execute(self, request: CreateReplyRequest) -> CreateCommentResponse:
        """Execute create reply flow.

        Raises:
            NotFoundError: If the content or parent comment doesn't exist
            CannotReplyToReplyError: If the parent is itself a reply
        """
        reply = build_comment(
            content_id=request.content_id,
            message=request.message,
            account_id=request.account_id,
            username=request.username,
            parent_id=request.parent_id,
        )
        outcome = await self.engine.create_reply(reply)
        return CreateCommentResponse.from_outcome(outcome)
