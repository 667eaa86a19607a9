"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.items import HiveItem
from hivemind.domain.service import AggregateConsistencyEngine, VoteOutcome
from hivemind.domain.value import AccountId, VotableType, VoteDirection, VoteState


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    account_id: str  # Account ID from caller identity
    direction: VoteDirection


class VoteResponse(BaseModel):
    """Vote tallies after a cast or withdraw."""

    votable_type: VotableType
    votable_id: str
    state: VoteState
    upvotes: int
    downvotes: int
    hive: HiveItem | None  # Set for content votes
    message: str

    @classmethod
    def from_outcome(cls, outcome: VoteOutcome, message: str) -> "VoteResponse":
        return cls(
            votable_type=outcome.target.votable_type,
            votable_id=str(outcome.target.id),
            state=outcome.record.state,
            upvotes=outcome.target.upvotes,
            downvotes=outcome.target.downvotes,
            hive=HiveItem.from_domain(outcome.hive) if outcome.hive else None,
            message=message,
        )


class CastVoteUseCase(BaseUseCase):
    """Use case for upvoting or downvoting a content item or comment."""

    def __init__(self, engine: AggregateConsistencyEngine) -> None:
        """Initialize cast vote use case.

        Args:
            engine: Aggregate consistency engine
        """
        self.engine = engine

    async def execute(self, request: CastVoteRequest) -> VoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Updated tallies of the target (and hive, for content)

        Raises:
            NotFoundError: If the voter or target doesn't exist
            AlreadyVotedError: If the voter already has an active vote
        """
        outcome = await self.engine.cast_vote(
            account_id=AccountId(UUID(request.account_id)),
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
            direction=request.direction,
        )
        verb = "upvoted" if request.direction == VoteDirection.UP else "downvoted"
        return VoteResponse.from_outcome(outcome, f"User successfully {verb}!")
