"""Unit tests for HiveService."""

from uuid import uuid4

import pytest

from hivemind.domain.error import (
    HiveNameTakenError,
    HiveStatusConflictError,
    NotFoundError,
)
from hivemind.domain.model import HivePatch
from hivemind.domain.repository import HiveRepository
from hivemind.domain.service import HiveService
from hivemind.domain.value import CallerIdentity, HiveId, HiveName, HiveStatusFlag
from tests.factories import make_account, make_hive, persist
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _identity(account) -> CallerIdentity:
    return CallerIdentity(account_id=account.id, username=account.username)


class TestCreateHive:
    """Tests for create_hive method."""

    @pytest.mark.asyncio
    async def test_create_hive_starts_with_zero_rollups(self, unit_env):
        """A new hive has every rollup at zero."""
        # Arrange
        hive_service = await unit_env.get(HiveService)
        owner = make_account()
        await persist(unit_env, owner)

        # Act
        hive = await hive_service.create_hive(
            _identity(owner), HiveName("science"), "All things science"
        )

        # Assert
        assert hive.creator == owner.username
        assert hive.account_id == owner.id
        assert (
            hive.total_upvotes,
            hive.total_downvotes,
            hive.total_comments,
            hive.total_content,
        ) == (0, 0, 0, 0)
        assert not hive.archived and not hive.banned

    @pytest.mark.asyncio
    async def test_create_hive_with_taken_name_fails(self, unit_env):
        """Hive names are unique."""
        # Arrange
        hive_service = await unit_env.get(HiveService)
        owner = make_account()
        await persist(unit_env, owner, make_hive(owner, name="science"))

        # Act & Assert
        with pytest.raises(HiveNameTakenError, match="science"):
            await hive_service.create_hive(
                _identity(owner), HiveName("science"), "Again"
            )

    @pytest.mark.asyncio
    async def test_create_hive_for_unknown_account_fails(self, unit_env):
        """The creator's account must exist."""
        # Arrange
        hive_service = await unit_env.get(HiveService)
        stranger = make_account("stranger")

        # Act & Assert
        with pytest.raises(NotFoundError, match="Account"):
            await hive_service.create_hive(
                _identity(stranger), HiveName("science"), "Nobody home"
            )

    @pytest.mark.asyncio
    async def test_concurrent_name_clash_reported_as_taken(
        self, unit_env, monkeypatch
    ):
        """A unique violation on save surfaces as HiveNameTakenError."""
        # Arrange
        hive_service = await unit_env.get(HiveService)
        hive_repo = await unit_env.get(HiveRepository)
        owner = make_account()
        await persist(unit_env, owner, make_hive(owner, name="science"))

        async def not_yet_visible(name):
            return None

        monkeypatch.setattr(hive_repo, "find_by_name", not_yet_visible)

        # Act & Assert
        with pytest.raises(HiveNameTakenError):
            await hive_service.create_hive(
                _identity(owner), HiveName("science"), "Raced"
            )


class TestReadHives:
    """Tests for get_hive and list_hives."""

    @pytest.mark.asyncio
    async def test_get_missing_hive_raises_not_found(self, unit_env):
        """Unknown hive IDs raise NotFoundError."""
        # Arrange
        hive_service = await unit_env.get(HiveService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Hive"):
            await hive_service.get_hive(HiveId(uuid4()))

    @pytest.mark.asyncio
    async def test_list_hives_returns_all(self, unit_env):
        """All hives are listed."""
        # Arrange
        hive_service = await unit_env.get(HiveService)
        owner = make_account()
        first = make_hive(owner, name="science")
        second = make_hive(owner, name="gardening")
        await persist(unit_env, owner, first, second)

        # Act
        hives = await hive_service.list_hives()

        # Assert
        assert {h.id for h in hives} == {first.id, second.id}


class TestUpdateHive:
    """Tests for update_hive and set_flag."""

    @pytest.mark.asyncio
    async def test_update_description_keeps_rollups(self, unit_env):
        """A patch changes only the patched fields."""
        # Arrange
        hive_service = await unit_env.get(HiveService)
        owner = make_account()
        hive = make_hive(owner, total_comments=4, total_content=2)
        await persist(unit_env, owner, hive)

        # Act
        updated = await hive_service.update_hive(
            hive.id, HivePatch(description="New description")
        )

        # Assert
        assert updated.description == "New description"
        assert updated.total_comments == 4
        assert updated.total_content == 2
        assert updated.last_edited is not None

    @pytest.mark.asyncio
    async def test_archive_then_unarchive(self, unit_env):
        """Flags toggle between set and cleared."""
        # Arrange
        hive_service = await unit_env.get(HiveService)
        owner = make_account()
        hive = make_hive(owner)
        await persist(unit_env, owner, hive)

        # Act
        archived = await hive_service.set_flag(hive.id, HiveStatusFlag.ARCHIVED, True)
        restored = await hive_service.set_flag(hive.id, HiveStatusFlag.ARCHIVED, False)

        # Assert
        assert archived.archived is True
        assert restored.archived is False

    @pytest.mark.asyncio
    async def test_banning_a_banned_hive_conflicts(self, unit_env):
        """Setting a flag to its current value is a conflict."""
        # Arrange
        hive_service = await unit_env.get(HiveService)
        owner = make_account()
        hive = make_hive(owner)
        await persist(unit_env, owner, hive)
        await hive_service.set_flag(hive.id, HiveStatusFlag.BANNED, True)

        # Act & Assert
        with pytest.raises(HiveStatusConflictError, match="already banned"):
            await hive_service.set_flag(hive.id, HiveStatusFlag.BANNED, True)

    @pytest.mark.asyncio
    async def test_unarchive_active_hive_conflicts(self, unit_env):
        """Clearing a flag that isn't set is a conflict."""
        # Arrange
        hive_service = await unit_env.get(HiveService)
        owner = make_account()
        hive = make_hive(owner)
        await persist(unit_env, owner, hive)

        # Act & Assert
        with pytest.raises(HiveStatusConflictError, match="not archived"):
            await hive_service.set_flag(hive.id, HiveStatusFlag.ARCHIVED, False)
