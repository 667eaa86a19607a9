"""Withdraw vote use case."""

from uuid import UUID

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.vote.cast_vote import VoteResponse
from hivemind.domain.service import AggregateConsistencyEngine
from hivemind.domain.value import AccountId, VotableType, VoteDirection


class WithdrawVoteRequest(BaseModel):
    """Withdraw vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    account_id: str  # Account ID from caller identity
    direction: VoteDirection


class WithdrawVoteUseCase(BaseUseCase):
    """Use case for removing an upvote or downvote."""

    def __init__(self, engine: AggregateConsistencyEngine) -> None:
        """Initialize withdraw vote use case.

        Args:
            engine: Aggregate consistency engine
        """
        self.engine = engine

    async def execute(self, request: WithdrawVoteRequest) -> VoteResponse:
        """Execute withdraw vote flow.

        Args:
            request: Withdraw vote request

        Returns:
            Updated tallies of the target (and hive, for content)

        Raises:
            NotFoundError: If the target doesn't exist
            NoVoteToWithdrawError: If the voter never voted on the target
            VoteDirectionMismatchError: If the vote isn't in that direction
        """
        outcome = await self.engine.withdraw_vote(
            account_id=AccountId(UUID(request.account_id)),
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
            direction=request.direction,
        )
        noun = "upvote" if request.direction == VoteDirection.UP else "downvote"
        return VoteResponse.from_outcome(outcome, f"User {noun} removed successfully!")
