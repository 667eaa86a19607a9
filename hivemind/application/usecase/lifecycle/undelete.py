"""Undelete use case."""

from uuid import UUID

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.lifecycle.soft_delete import (
    LifecycleRequest,
    LifecycleResponse,
)
from hivemind.domain.service import AggregateConsistencyEngine


class UndeleteUseCase(BaseUseCase):
    """Use case for restoring a soft deleted content item or comment."""

    def __init__(self, engine: AggregateConsistencyEngine) -> None:
        """Initialize undelete use case.

        Args:
            engine: Aggregate consistency engine
        """
        self.engine = engine

    async def execute(self, request: LifecycleRequest) -> LifecycleResponse:
        """Execute undelete flow.

        Raises:
            NotFoundError: If the target or a parent doesn't exist
            NotDeletedError: If the target is not deleted
        """
        outcome = await self.engine.undelete(
            request.votable_type, UUID(request.votable_id)
        )
        return LifecycleResponse.from_outcome(outcome)
