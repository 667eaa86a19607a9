"""Soft delete use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.items import HiveItem
from hivemind.domain.service import AggregateConsistencyEngine, LifecycleOutcome
from hivemind.domain.value import VotableType


class LifecycleRequest(BaseModel):
    """Soft delete or undelete request."""

    votable_type: VotableType
    votable_id: str  # UUID string


class LifecycleResponse(BaseModel):
    """Target state and parent counts after a soft delete or undelete."""

    votable_type: VotableType
    votable_id: str
    deleted: bool
    upvotes: int
    downvotes: int
    last_edited: datetime | None
    content_comment_count: int | None  # Set for comment targets
    hive: HiveItem

    @classmethod
    def from_outcome(cls, outcome: LifecycleOutcome) -> "LifecycleResponse":
        return cls(
            votable_type=outcome.target.votable_type,
            votable_id=str(outcome.target.id),
            deleted=outcome.target.deleted,
            upvotes=outcome.target.upvotes,
            downvotes=outcome.target.downvotes,
            last_edited=outcome.target.last_edited,
            content_comment_count=(
                outcome.content.comment_count if outcome.content else None
            ),
            hive=HiveItem.from_domain(outcome.hive),
        )


class SoftDeleteUseCase(BaseUseCase):
    """Use case for soft deleting a content item or comment."""

    def __init__(self, engine: AggregateConsistencyEngine) -> None:
        """Initialize soft delete use case.

        Args:
            engine: Aggregate consistency engine
        """
        self.engine = engine

    async def execute(self, request: LifecycleRequest) -> LifecycleResponse:
        """Execute soft delete flow.

        Raises:
            NotFoundError: If the target or a parent doesn't exist
            AlreadyDeletedError: If the target is already deleted
        """
        outcome = await self.engine.soft_delete(
            request.votable_type, UUID(request.votable_id)
        )
        return LifecycleResponse.from_outcome(outcome)
