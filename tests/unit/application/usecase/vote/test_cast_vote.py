"""Unit tests for CastVoteUseCase and WithdrawVoteUseCase."""

import pytest

from hivemind.application.usecase.vote.cast_vote import (
    CastVoteRequest,
    CastVoteUseCase,
)
from hivemind.application.usecase.vote.withdraw_vote import (
    WithdrawVoteRequest,
    WithdrawVoteUseCase,
)
from hivemind.domain.error import AlreadyVotedError, VoteDirectionMismatchError
from hivemind.domain.value import VotableType, VoteDirection, VoteState
from tests.factories import make_account, make_comment, make_content, make_hive, persist
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(env):
    author, voter = make_account("author"), make_account("voter")
    hive = make_hive(author)
    content = make_content(hive, author)
    comment = make_comment(content, author)
    await persist(env, author, voter, hive, content, comment)
    return voter, hive, content, comment


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_content_reports_hive_rollups(self, unit_env):
        """Content votes return the target tallies and the hive."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        voter, hive, content, _ = await _seed(unit_env)

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.CONTENT,
                votable_id=str(content.id),
                account_id=str(voter.id),
                direction=VoteDirection.UP,
            )
        )

        # Assert
        assert response.state == VoteState.UPVOTED
        assert (response.upvotes, response.downvotes) == (1, 0)
        assert response.hive is not None
        assert response.hive.hive_id == str(hive.id)
        assert response.hive.total_upvotes == 1
        assert response.message == "User successfully upvoted!"

    @pytest.mark.asyncio
    async def test_downvote_comment_has_no_hive(self, unit_env):
        """Comment votes leave hive rollups alone."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        voter, _, _, comment = await _seed(unit_env)

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.COMMENT,
                votable_id=str(comment.id),
                account_id=str(voter.id),
                direction=VoteDirection.DOWN,
            )
        )

        # Assert
        assert response.state == VoteState.DOWNVOTED
        assert (response.upvotes, response.downvotes) == (0, 1)
        assert response.hive is None
        assert response.message == "User successfully downvoted!"

    @pytest.mark.asyncio
    async def test_second_vote_in_other_direction_is_rejected(self, unit_env):
        """Switching direction requires withdrawing first."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        voter, _, content, _ = await _seed(unit_env)
        request = CastVoteRequest(
            votable_type=VotableType.CONTENT,
            votable_id=str(content.id),
            account_id=str(voter.id),
            direction=VoteDirection.UP,
        )
        await use_case.execute(request)

        # Act & Assert
        with pytest.raises(AlreadyVotedError):
            await use_case.execute(
                request.model_copy(update={"direction": VoteDirection.DOWN})
            )


class TestWithdrawVoteUseCase:
    """Tests for WithdrawVoteUseCase."""

    @pytest.mark.asyncio
    async def test_withdraw_returns_to_neutral(self, unit_env):
        """Withdrawing an upvote leaves a neutral record and zero tallies."""
        # Arrange
        cast = await unit_env.get(CastVoteUseCase)
        withdraw = await unit_env.get(WithdrawVoteUseCase)
        voter, _, content, _ = await _seed(unit_env)
        await cast.execute(
            CastVoteRequest(
                votable_type=VotableType.CONTENT,
                votable_id=str(content.id),
                account_id=str(voter.id),
                direction=VoteDirection.UP,
            )
        )

        # Act
        response = await withdraw.execute(
            WithdrawVoteRequest(
                votable_type=VotableType.CONTENT,
                votable_id=str(content.id),
                account_id=str(voter.id),
                direction=VoteDirection.UP,
            )
        )

        # Assert
        assert response.state == VoteState.NEUTRAL
        assert (response.upvotes, response.downvotes) == (0, 0)
        assert response.hive.total_upvotes == 0

    @pytest.mark.asyncio
    async def test_withdraw_wrong_direction_is_rejected(self, unit_env):
        """An upvote can't be withdrawn as a downvote."""
        # Arrange
        cast = await unit_env.get(CastVoteUseCase)
        withdraw = await unit_env.get(WithdrawVoteUseCase)
        voter, _, _, comment = await _seed(unit_env)
        await cast.execute(
            CastVoteRequest(
                votable_type=VotableType.COMMENT,
                votable_id=str(comment.id),
                account_id=str(voter.id),
                direction=VoteDirection.UP,
            )
        )

        # Act & Assert
        with pytest.raises(VoteDirectionMismatchError):
            await withdraw.execute(
                WithdrawVoteRequest(
                    votable_type=VotableType.COMMENT,
                    votable_id=str(comment.id),
                    account_id=str(voter.id),
                    direction=VoteDirection.DOWN,
                )
            )
