"""Unit tests for all-or-nothing engine operations."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from hivemind.domain.error import (
    AlreadyDeletedError,
    NotFoundError,
    StorageFailureError,
)
from hivemind.domain.repository import (
    CommentRepository,
    ContentRepository,
    HiveRepository,
    UnitOfWork,
    VoteRepository,
)
from hivemind.domain.service import (
    AggregateConsistencyEngine,
    CommentService,
    ContentService,
    HiveService,
)
from hivemind.domain.value import VotableType, VoteDirection
from tests.factories import make_account, make_comment, make_content, make_hive, persist
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _timeout(*args, **kwargs):
    raise OperationalError("UPDATE hives", {}, TimeoutError("lock timeout"))


class TestStorageFailure:
    """A store failure mid-operation leaves no partial write behind."""

    @pytest.mark.asyncio
    async def test_failed_hive_update_rolls_back_vote(self, unit_env, monkeypatch):
        """Content tally and vote record are rolled back with the hive write."""
        # Arrange
        engine = await unit_env.get(AggregateConsistencyEngine)
        hive_repo = await unit_env.get(HiveRepository)
        content_repo = await unit_env.get(ContentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        author, voter = make_account("author"), make_account("voter")
        hive = make_hive(author)
        content = make_content(hive, author)
        await persist(unit_env, author, voter, hive, content)
        monkeypatch.setattr(hive_repo, "adjust_rollups", _timeout)

        # Act & Assert
        with pytest.raises(StorageFailureError) as exc_info:
            await engine.cast_vote(
                voter.id, VotableType.CONTENT, content.id, VoteDirection.UP
            )

        assert exc_info.value.retryable is True
        assert (await content_repo.find_by_id(content.id)).upvotes == 0
        assert (
            await vote_repo.find_by_account_and_votable(
                voter.id, VotableType.CONTENT, content.id
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_failed_comment_creation_leaves_counts(self, unit_env, monkeypatch):
        """Comment row and content count are rolled back with the hive write."""
        # Arrange
        engine = await unit_env.get(AggregateConsistencyEngine)
        hive_repo = await unit_env.get(HiveRepository)
        content_repo = await unit_env.get(ContentRepository)
        unit_of_work = await unit_env.get(UnitOfWork)
        author = make_account()
        hive = make_hive(author, total_comments=5)
        content = make_content(hive, author)
        await persist(unit_env, author, hive, content)
        comment = make_comment(content, author)
        monkeypatch.setattr(hive_repo, "adjust_rollups", _timeout)

        # Act & Assert
        with pytest.raises(StorageFailureError, match="create_comment"):
            await engine.create_comment(comment)

        assert unit_of_work.rollbacks == 1
        assert unit_of_work.commits == 0
        assert (await content_repo.find_by_id(content.id)).comment_count == 0
        assert unit_of_work.store.comments.get(comment.id) is None
        assert (await hive_repo.find_by_id(hive.id)).total_comments == 5

    @pytest.mark.asyncio
    async def test_conflict_commits_nothing(self, unit_env):
        """Expected failures roll back too; the unit of work never commits them."""
        # Arrange
        engine = await unit_env.get(AggregateConsistencyEngine)
        unit_of_work = await unit_env.get(UnitOfWork)
        author = make_account()
        hive = make_hive(author)
        content = make_content(hive, author)
        await persist(unit_env, author, hive, content)
        await engine.soft_delete(VotableType.CONTENT, content.id)

        # Act
        with pytest.raises(AlreadyDeletedError):
            await engine.soft_delete(VotableType.CONTENT, content.id)

        # Assert
        assert unit_of_work.commits == 1
        assert unit_of_work.rollbacks == 1


async def _statement_timeout(*args, **kwargs):
    raise OperationalError("SELECT", {}, TimeoutError("statement timeout"))


class TestReadFailure:
    """Store failures on read paths surface as retryable StorageFailureError."""

    @pytest.mark.asyncio
    async def test_vote_summary_timeout(self, unit_env, monkeypatch):
        # Arrange
        engine = await unit_env.get(AggregateConsistencyEngine)
        vote_repo = await unit_env.get(VoteRepository)
        voter = make_account("voter")
        await persist(unit_env, voter)
        monkeypatch.setattr(vote_repo, "find_by_account", _statement_timeout)

        # Act & Assert
        with pytest.raises(StorageFailureError, match="get_vote_summary") as exc_info:
            await engine.get_vote_summary_for_voter(voter.id)

        assert exc_info.value.retryable is True

    @pytest.mark.asyncio
    async def test_hive_read_timeout(self, unit_env, monkeypatch):
        # Arrange
        hive_service = await unit_env.get(HiveService)
        hive_repo = await unit_env.get(HiveRepository)
        author = make_account()
        hive = make_hive(author)
        await persist(unit_env, author, hive)
        monkeypatch.setattr(hive_repo, "find_by_id", _statement_timeout)
        monkeypatch.setattr(hive_repo, "find_all", _statement_timeout)

        # Act & Assert
        with pytest.raises(StorageFailureError, match="get_hive"):
            await hive_service.get_hive(hive.id)
        with pytest.raises(StorageFailureError, match="list_hives"):
            await hive_service.list_hives()

    @pytest.mark.asyncio
    async def test_content_list_timeout(self, unit_env, monkeypatch):
        # Arrange
        content_service = await unit_env.get(ContentService)
        content_repo = await unit_env.get(ContentRepository)
        author = make_account()
        hive = make_hive(author)
        await persist(unit_env, author, hive)
        monkeypatch.setattr(content_repo, "find_by_hive", _statement_timeout)

        # Act & Assert
        with pytest.raises(StorageFailureError, match="list_content"):
            await content_service.list_content(hive.id)

    @pytest.mark.asyncio
    async def test_comment_thread_timeout(self, unit_env, monkeypatch):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_account()
        hive = make_hive(author)
        content = make_content(hive, author)
        comment = make_comment(content, author)
        await persist(unit_env, author, hive, content, comment)
        monkeypatch.setattr(comment_repo, "find_replies", _statement_timeout)

        # Act & Assert
        with pytest.raises(StorageFailureError, match="get_thread"):
            await comment_service.get_thread(comment.id)

    @pytest.mark.asyncio
    async def test_not_found_is_not_a_storage_failure(self, unit_env):
        """Domain errors raised inside a guarded read pass through unchanged."""
        # Arrange
        content_service = await unit_env.get(ContentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await content_service.get_content(uuid4())
