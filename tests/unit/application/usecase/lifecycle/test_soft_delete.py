"""Unit tests for SoftDeleteUseCase and UndeleteUseCase."""

import pytest

from hivemind.application.usecase.lifecycle.soft_delete import (
    LifecycleRequest,
    SoftDeleteUseCase,
)
from hivemind.application.usecase.lifecycle.undelete import UndeleteUseCase
from hivemind.domain.error import AlreadyDeletedError, NotDeletedError
from hivemind.domain.value import VotableType
from tests.factories import make_account, make_comment, make_content, make_hive, persist
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(env):
    author = make_account()
    hive = make_hive(author, total_comments=1, total_content=1)
    content = make_content(hive, author).model_copy(update={"comment_count": 1})
    comment = make_comment(content, author)
    await persist(env, author, hive, content, comment)
    return hive, content, comment


class TestSoftDeleteUseCase:
    """Tests for SoftDeleteUseCase."""

    @pytest.mark.asyncio
    async def test_delete_comment_reports_parent_counts(self, unit_env):
        """Deleting a comment lowers its content's and hive's counts."""
        # Arrange
        use_case = await unit_env.get(SoftDeleteUseCase)
        _, _, comment = await _seed(unit_env)

        # Act
        response = await use_case.execute(
            LifecycleRequest(
                votable_type=VotableType.COMMENT, votable_id=str(comment.id)
            )
        )

        # Assert
        assert response.deleted is True
        assert response.content_comment_count == 0
        assert response.hive.total_comments == 0
        assert response.last_edited is not None

    @pytest.mark.asyncio
    async def test_delete_content_has_no_comment_count(self, unit_env):
        """Deleting content lowers the hive's content count only."""
        # Arrange
        use_case = await unit_env.get(SoftDeleteUseCase)
        _, content, _ = await _seed(unit_env)

        # Act
        response = await use_case.execute(
            LifecycleRequest(
                votable_type=VotableType.CONTENT, votable_id=str(content.id)
            )
        )

        # Assert
        assert response.content_comment_count is None
        assert response.hive.total_content == 0
        assert response.hive.total_comments == 1

    @pytest.mark.asyncio
    async def test_delete_twice_conflicts(self, unit_env):
        """A deleted item can't be deleted again."""
        # Arrange
        use_case = await unit_env.get(SoftDeleteUseCase)
        _, content, _ = await _seed(unit_env)
        request = LifecycleRequest(
            votable_type=VotableType.CONTENT, votable_id=str(content.id)
        )
        await use_case.execute(request)

        # Act & Assert
        with pytest.raises(AlreadyDeletedError):
            await use_case.execute(request)


class TestUndeleteUseCase:
    """Tests for UndeleteUseCase."""

    @pytest.mark.asyncio
    async def test_undelete_restores_counts(self, unit_env):
        """Undelete applies the opposite delta of delete."""
        # Arrange
        delete = await unit_env.get(SoftDeleteUseCase)
        undelete = await unit_env.get(UndeleteUseCase)
        _, _, comment = await _seed(unit_env)
        request = LifecycleRequest(
            votable_type=VotableType.COMMENT, votable_id=str(comment.id)
        )
        await delete.execute(request)

        # Act
        response = await undelete.execute(request)

        # Assert
        assert response.deleted is False
        assert response.content_comment_count == 1
        assert response.hive.total_comments == 1

    @pytest.mark.asyncio
    async def test_undelete_live_item_conflicts(self, unit_env):
        """Only deleted items can be undeleted."""
        # Arrange
        undelete = await unit_env.get(UndeleteUseCase)
        _, _, comment = await _seed(unit_env)

        # Act & Assert
        with pytest.raises(NotDeletedError):
            await undelete.execute(
                LifecycleRequest(
                    votable_type=VotableType.COMMENT, votable_id=str(comment.id)
                )
            )
