"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from hivemind.config import Settings
from hivemind.domain.error import (
    ContentDeletedError,
    NotAuthorizedError,
    NotFoundError,
)
from hivemind.domain.model import CommentPatch
from hivemind.domain.service import CommentService
from hivemind.domain.value import CommentId
from tests.factories import (
    make_account,
    make_comment,
    make_content,
    make_hive,
    persist,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PLACEHOLDER = Settings().comments.deleted_placeholder


async def _seed(env):
    author = make_account()
    hive = make_hive(author)
    content = make_content(hive, author)
    await persist(env, author, hive, content)
    return author, content


class TestReadComments:
    """Tests for comment reads and the deleted-message projection."""

    @pytest.mark.asyncio
    async def test_deleted_comment_reads_as_placeholder(self, unit_env):
        """A deleted comment keeps its ID and tallies but hides its message."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, content = await _seed(unit_env)
        comment = make_comment(content, author, message="Regrettable").model_copy(
            update={"deleted": True, "upvotes": 2}
        )
        await persist(unit_env, comment)

        # Act
        shown = await comment_service.get_comment(comment.id)

        # Assert
        assert shown.id == comment.id
        assert shown.message == PLACEHOLDER
        assert shown.upvotes == 2

    @pytest.mark.asyncio
    async def test_live_comment_reads_unchanged(self, unit_env):
        """Live comments are returned as stored."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, content = await _seed(unit_env)
        comment = make_comment(content, author, message="Hello")
        await persist(unit_env, comment)

        # Act
        shown = await comment_service.get_comment(comment.id)

        # Assert
        assert shown.message == "Hello"

    @pytest.mark.asyncio
    async def test_get_missing_comment_raises_not_found(self, unit_env):
        """Unknown comment IDs raise NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Comment"):
            await comment_service.get_comment(CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_comments_for_content_mask_deleted(self, unit_env):
        """Listing a content item's comments applies the projection."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, content = await _seed(unit_env)
        live = make_comment(content, author, message="Still here")
        gone = make_comment(content, author, message="Gone").model_copy(
            update={"deleted": True}
        )
        await persist(unit_env, live, gone)

        # Act
        comments = await comment_service.get_comments_for_content(content.id)

        # Assert
        messages = {c.id: c.message for c in comments}
        assert messages == {live.id: "Still here", gone.id: PLACEHOLDER}

    @pytest.mark.asyncio
    async def test_thread_contains_replies(self, unit_env):
        """A thread is the comment plus its replies."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, content = await _seed(unit_env)
        parent = make_comment(content, author)
        first = make_comment(content, author, message="First", parent=parent)
        second = make_comment(content, author, message="Second", parent=parent)
        unrelated = make_comment(content, author)
        await persist(unit_env, parent, first, second, unrelated)

        # Act
        thread = await comment_service.get_thread(parent.id)

        # Assert
        assert thread.comment.id == parent.id
        assert {r.id for r in thread.replies} == {first.id, second.id}


class TestUpdateComment:
    """Tests for update_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_edit_message(self, unit_env):
        """The author's patch replaces the message."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, content = await _seed(unit_env)
        comment = make_comment(content, author)
        await persist(unit_env, comment)

        # Act
        updated = await comment_service.update_comment(
            comment.id, author.id, CommentPatch(message="Edited")
        )

        # Assert
        assert updated.message == "Edited"
        assert updated.last_edited is not None

    @pytest.mark.asyncio
    async def test_non_author_cannot_edit(self, unit_env):
        """Only the author may edit a comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, content = await _seed(unit_env)
        other = make_account("mallory")
        comment = make_comment(content, author)
        await persist(unit_env, other, comment)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.update_comment(
                comment.id, other.id, CommentPatch(message="Hijacked")
            )

    @pytest.mark.asyncio
    async def test_deleted_comment_cannot_be_edited(self, unit_env):
        """Edits to deleted comments are rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, content = await _seed(unit_env)
        comment = make_comment(content, author).model_copy(update={"deleted": True})
        await persist(unit_env, comment)

        # Act & Assert
        with pytest.raises(ContentDeletedError):
            await comment_service.update_comment(
                comment.id, author.id, CommentPatch(message="Too late")
            )
