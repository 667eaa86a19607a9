"""Unit tests for ContentService."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from hivemind.domain.error import (
    ContentDeletedError,
    NotAuthorizedError,
    NotFoundError,
)
from hivemind.domain.model import ContentPatch
from hivemind.domain.service import ContentService
from hivemind.domain.value import ContentId
from tests.factories import make_account, make_content, make_hive, persist
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReadContent:
    """Tests for get_content and list_content."""

    @pytest.mark.asyncio
    async def test_get_missing_content_raises_not_found(self, unit_env):
        """Unknown content IDs raise NotFoundError."""
        content_service = await unit_env.get(ContentService)

        with pytest.raises(NotFoundError, match="Content"):
            await content_service.get_content(ContentId(uuid4()))

    @pytest.mark.asyncio
    async def test_list_content_filters_by_hive(self, unit_env):
        """Listing by hive returns only that hive's items."""
        # Arrange
        content_service = await unit_env.get(ContentService)
        author = make_account()
        science, gardening = make_hive(author), make_hive(author, name="gardening")
        in_science = make_content(science, author)
        in_gardening = make_content(gardening, author)
        await persist(unit_env, author, science, gardening, in_science, in_gardening)

        # Act
        scoped = await content_service.list_content(science.id)
        everything = await content_service.list_content()

        # Assert
        assert [c.id for c in scoped] == [in_science.id]
        assert {c.id for c in everything} == {in_science.id, in_gardening.id}


class TestUpdateContent:
    """Tests for update_content method."""

    @pytest.mark.asyncio
    async def test_author_can_edit_title_and_message(self, unit_env):
        """Patched fields change, counters stay."""
        # Arrange
        content_service = await unit_env.get(ContentService)
        author = make_account()
        hive = make_hive(author)
        content = make_content(hive, author).model_copy(
            update={"upvotes": 3, "comment_count": 2}
        )
        await persist(unit_env, author, hive, content)

        # Act
        updated = await content_service.update_content(
            content.id, author.id, ContentPatch(title="Better title", message="Body")
        )

        # Assert
        assert updated.title == "Better title"
        assert updated.message == "Body"
        assert updated.upvotes == 3
        assert updated.comment_count == 2
        assert updated.last_edited is not None

    @pytest.mark.asyncio
    async def test_non_author_cannot_edit(self, unit_env):
        """Only the author may edit a content item."""
        # Arrange
        content_service = await unit_env.get(ContentService)
        author, other = make_account(), make_account("mallory")
        hive = make_hive(author)
        content = make_content(hive, author)
        await persist(unit_env, author, other, hive, content)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await content_service.update_content(
                content.id, other.id, ContentPatch(title="Hijacked")
            )

    @pytest.mark.asyncio
    async def test_deleted_content_cannot_be_edited(self, unit_env):
        """Edits to deleted content are rejected."""
        # Arrange
        content_service = await unit_env.get(ContentService)
        author = make_account()
        hive = make_hive(author)
        content = make_content(hive, author).model_copy(update={"deleted": True})
        await persist(unit_env, author, hive, content)

        # Act & Assert
        with pytest.raises(ContentDeletedError):
            await content_service.update_content(
                content.id, author.id, ContentPatch(message="Too late")
            )

    @pytest.mark.asyncio
    async def test_null_clears_optional_link(self, unit_env):
        """Sending null for a link removes it; unset fields are left alone."""
        # Arrange
        content_service = await unit_env.get(ContentService)
        author = make_account()
        hive = make_hive(author)
        content = make_content(hive, author).model_copy(
            update={
                "link": "https://example.org",
                "image_link": "https://example.org/a.png",
            }
        )
        await persist(unit_env, author, hive, content)

        # Act
        updated = await content_service.update_content(
            content.id, author.id, ContentPatch(link=None)
        )

        # Assert
        assert updated.link is None
        assert updated.image_link == "https://example.org/a.png"
        assert updated.title == content.title


class TestContentPatch:
    """Validation of content patches."""

    def test_title_cannot_be_cleared(self):
        with pytest.raises(ValidationError, match="title"):
            ContentPatch(title=None)

    def test_message_cannot_be_cleared(self):
        with pytest.raises(ValidationError, match="message"):
            ContentPatch(message=None)

    def test_changes_keep_explicit_nulls_only(self):
        patch = ContentPatch(title="New", image_link=None)

        assert patch.changes() == {"title": "New", "image_link": None}
