"""Vote ledger domain service.

Owns the vote state machine for one (account, votable) pair:

    (no record) --cast(d)--> d          NEUTRAL --cast(d)--> d
    d --withdraw(d)--> NEUTRAL          UPVOTED/DOWNVOTED --cast(*)--> AlreadyVoted

There is no direct switch from one direction to the other; the voter
withdraws first and then casts again.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from hivemind.domain.error import (
    AlreadyVotedError,
    NoVoteToWithdrawError,
    VoteDirectionMismatchError,
)
from hivemind.domain.model import VotableTarget, VoteRecord
from hivemind.domain.repository import VoteRepository
from hivemind.domain.value import (
    AccountId,
    VoteDelta,
    VoteDirection,
    VoteRecordId,
    VoteState,
)

from .base import Service


@dataclass
class LedgerTransition:
    """Outcome of a successful ledger operation."""

    record: VoteRecord
    previous_state: Optional[VoteState]  # None when the record was just created
    delta: VoteDelta


class VoteLedger(Service):
    """Domain service applying cast/withdraw to vote records."""

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote ledger.

        Args:
            vote_repository: Vote record repository
        """
        self.vote_repository = vote_repository

    async def cast(
        self,
        account_id: AccountId,
        target: VotableTarget,
        direction: VoteDirection,
    ) -> LedgerTransition:
        """Cast a vote in ``direction`` on ``target``.

        Args:
            account_id: Voter's account ID
            target: Content item or comment being voted on
            direction: Up or down

        Returns:
            Transition with a +1 delta on the direction's tally

        Raises:
            AlreadyVotedError: If the voter has an active vote in either direction
        """
        resource = target.votable_type.value
        with logfire.span(
            "vote_ledger.cast",
            account_id=str(account_id),
            votable_type=resource,
            votable_id=str(target.id),
            direction=direction.value,
        ):
            record = await self.vote_repository.find_by_account_and_votable(
                account_id, target.votable_type, target.id
            )
            delta = VoteDelta.of(direction, 1)
            now = datetime.now()

            if record is None:
                new_record = VoteRecord(
                    id=VoteRecordId(uuid4()),
                    account_id=account_id,
                    votable_type=target.votable_type,
                    votable_id=target.id,
                    state=direction.active_state,
                    last_edited=now,
                )
                try:
                    saved = await self.vote_repository.save(new_record)
                except IntegrityError:
                    # Another request from the same voter created the record first
                    logfire.warn(
                        "Duplicate vote record",
                        account_id=str(account_id),
                        votable_id=str(target.id),
                    )
                    raise AlreadyVotedError(resource, str(target.id))

                logfire.info("Vote record created", state=saved.state.value)
                return LedgerTransition(record=saved, previous_state=None, delta=delta)

            if record.state.is_active:
                logfire.warn(
                    "Vote cast on item with an active vote",
                    current_state=record.state.value,
                )
                raise AlreadyVotedError(resource, str(target.id))

            updated = await self.vote_repository.update(
                record.model_copy(
                    update={"state": direction.active_state, "last_edited": now}
                )
            )
            logfire.info("Vote recast from neutral", state=updated.state.value)
            return LedgerTransition(
                record=updated, previous_state=record.state, delta=delta
            )

    async def withdraw(
        self,
        account_id: AccountId,
        target: VotableTarget,
        direction: VoteDirection,
    ) -> LedgerTransition:
        """Withdraw the voter's vote in ``direction`` on ``target``.

        Args:
            account_id: Voter's account ID
            target: Content item or comment
            direction: Direction being withdrawn

        Returns:
            Transition with a -1 delta on the direction's tally

        Raises:
            NoVoteToWithdrawError: If the voter never voted on the target
            VoteDirectionMismatchError: If the record isn't in ``direction``
        """
        resource = target.votable_type.value
        with logfire.span(
            "vote_ledger.withdraw",
            account_id=str(account_id),
            votable_type=resource,
            votable_id=str(target.id),
            direction=direction.value,
        ):
            record = await self.vote_repository.find_by_account_and_votable(
                account_id, target.votable_type, target.id
            )

            if record is None:
                logfire.warn("No vote record to withdraw")
                raise NoVoteToWithdrawError(resource, str(target.id))

            if record.state != direction.active_state:
                logfire.warn(
                    "Withdraw direction does not match vote",
                    current_state=record.state.value,
                )
                raise VoteDirectionMismatchError(
                    resource, str(target.id), direction.value
                )

            updated = await self.vote_repository.update(
                record.model_copy(
                    update={"state": VoteState.NEUTRAL, "last_edited": datetime.now()}
                )
            )
            logfire.info("Vote withdrawn")
            return LedgerTransition(
                record=updated,
                previous_state=record.state,
                delta=VoteDelta.of(direction, -1),
            )
