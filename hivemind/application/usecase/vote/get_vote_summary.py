"""Get vote summary use case."""

from uuid import UUID

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.domain.service import AggregateConsistencyEngine
from hivemind.domain.value import AccountId


class VoteSummaryItem(BaseModel):
    """Comments on one content item the voter up/downvotes."""

    content_id: str
    upvotes: list[str]
    downvotes: list[str]


class GetVoteSummaryRequest(BaseModel):
    """Get vote summary request."""

    account_id: str  # Account ID from caller identity


class GetVoteSummaryResponse(BaseModel):
    """Get vote summary response."""

    items: list[VoteSummaryItem]


class GetVoteSummaryUseCase(BaseUseCase):
    """Use case for listing a voter's comment votes grouped by content."""

    def __init__(self, engine: AggregateConsistencyEngine) -> None:
        """Initialize get vote summary use case.

        Args:
            engine: Aggregate consistency engine
        """
        self.engine = engine

    async def execute(self, request: GetVoteSummaryRequest) -> GetVoteSummaryResponse:
        """Execute get vote summary flow.

        Raises:
            NotFoundError: If the voter has no comment votes
        """
        entries = await self.engine.get_vote_summary_for_voter(
            AccountId(UUID(request.account_id))
        )
        return GetVoteSummaryResponse(
            items=[
                VoteSummaryItem(
                    content_id=str(entry.content_id),
                    upvotes=[str(cid) for cid in entry.upvoted],
                    downvotes=[str(cid) for cid in entry.downvoted],
                )
                for entry in entries
            ]
        )
