"""Unit tests for VoteLedger."""

from uuid import uuid4

import pytest

from hivemind.domain.error import (
    AlreadyVotedError,
    NoVoteToWithdrawError,
    VoteDirectionMismatchError,
)
from hivemind.domain.repository import VoteRepository
from hivemind.domain.service import VoteLedger
from hivemind.domain.value import (
    AccountId,
    VotableType,
    VoteDelta,
    VoteDirection,
    VoteState,
)
from tests.factories import make_account, make_content, make_hive
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


def _content():
    author = make_account("author")
    return make_content(make_hive(author), author)


class TestCast:
    """Tests for cast method."""

    @pytest.mark.asyncio
    async def test_cast_without_record_creates_record(self, unit_env):
        """First vote should create a record in the direction's state."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        vote_repo = await unit_env.get(VoteRepository)
        target = _content()
        voter = AccountId(uuid4())

        # Act
        transition = await ledger.cast(voter, target, VoteDirection.UP)

        # Assert
        assert transition.previous_state is None
        assert transition.delta == VoteDelta(upvotes=1)
        saved = await vote_repo.find_by_account_and_votable(
            voter, VotableType.CONTENT, target.id
        )
        assert saved is not None
        assert saved.state == VoteState.UPVOTED
        assert transition.record == saved

    @pytest.mark.asyncio
    async def test_cast_down_yields_downvote_delta(self, unit_env):
        """Downvote should only touch the downvote tally."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        target = _content()

        # Act
        transition = await ledger.cast(AccountId(uuid4()), target, VoteDirection.DOWN)

        # Assert
        assert transition.delta == VoteDelta(downvotes=1)
        assert transition.record.state == VoteState.DOWNVOTED

    @pytest.mark.asyncio
    async def test_cast_on_neutral_record_reuses_record(self, unit_env):
        """Casting after a withdrawal should move the same record out of neutral."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        target = _content()
        voter = AccountId(uuid4())
        first = await ledger.cast(voter, target, VoteDirection.UP)
        await ledger.withdraw(voter, target, VoteDirection.UP)

        # Act
        transition = await ledger.cast(voter, target, VoteDirection.DOWN)

        # Assert
        assert transition.previous_state == VoteState.NEUTRAL
        assert transition.record.id == first.record.id
        assert transition.record.state == VoteState.DOWNVOTED
        assert transition.delta == VoteDelta(downvotes=1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("first", [VoteDirection.UP, VoteDirection.DOWN])
    @pytest.mark.parametrize("second", [VoteDirection.UP, VoteDirection.DOWN])
    async def test_cast_with_active_vote_raises_error(self, unit_env, first, second):
        """Any cast on an active vote should fail, whatever the direction."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        vote_repo = await unit_env.get(VoteRepository)
        target = _content()
        voter = AccountId(uuid4())
        await ledger.cast(voter, target, first)

        # Act & Assert
        with pytest.raises(AlreadyVotedError, match="already voted"):
            await ledger.cast(voter, target, second)

        record = await vote_repo.find_by_account_and_votable(
            voter, VotableType.CONTENT, target.id
        )
        assert record.state == first.active_state

    @pytest.mark.asyncio
    async def test_duplicate_insert_raises_already_voted(self, unit_env):
        """A record created concurrently should surface as AlreadyVoted."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        vote_repo = await unit_env.get(VoteRepository)
        target = _content()
        voter = AccountId(uuid4())
        await ledger.cast(voter, target, VoteDirection.UP)

        async def stale_lookup(*args, **kwargs):
            return None

        # Simulate a read that happened before the other insert
        vote_repo.find_by_account_and_votable = stale_lookup

        # Act & Assert
        with pytest.raises(AlreadyVotedError):
            await ledger.cast(voter, target, VoteDirection.UP)


class TestWithdraw:
    """Tests for withdraw method."""

    @pytest.mark.asyncio
    async def test_withdraw_moves_record_to_neutral(self, unit_env):
        """Withdrawing should keep the record and mark it neutral."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        vote_repo = await unit_env.get(VoteRepository)
        target = _content()
        voter = AccountId(uuid4())
        await ledger.cast(voter, target, VoteDirection.UP)

        # Act
        transition = await ledger.withdraw(voter, target, VoteDirection.UP)

        # Assert
        assert transition.delta == VoteDelta(upvotes=-1)
        assert transition.previous_state == VoteState.UPVOTED
        record = await vote_repo.find_by_account_and_votable(
            voter, VotableType.CONTENT, target.id
        )
        assert record is not None
        assert record.state == VoteState.NEUTRAL

    @pytest.mark.asyncio
    async def test_withdraw_without_record_raises_error(self, unit_env):
        """Withdrawing a vote never cast should fail."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)

        # Act & Assert
        with pytest.raises(NoVoteToWithdrawError, match="has not voted"):
            await ledger.withdraw(AccountId(uuid4()), _content(), VoteDirection.UP)

    @pytest.mark.asyncio
    async def test_withdraw_wrong_direction_raises_error(self, unit_env):
        """Withdrawing an upvote from a downvoted record should fail."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        target = _content()
        voter = AccountId(uuid4())
        await ledger.cast(voter, target, VoteDirection.DOWN)

        # Act & Assert
        with pytest.raises(VoteDirectionMismatchError, match="has not upvoted"):
            await ledger.withdraw(voter, target, VoteDirection.UP)

    @pytest.mark.asyncio
    async def test_withdraw_twice_raises_mismatch(self, unit_env):
        """A neutral record matches neither direction."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        target = _content()
        voter = AccountId(uuid4())
        await ledger.cast(voter, target, VoteDirection.UP)
        await ledger.withdraw(voter, target, VoteDirection.UP)

        # Act & Assert
        with pytest.raises(VoteDirectionMismatchError):
            await ledger.withdraw(voter, target, VoteDirection.UP)
