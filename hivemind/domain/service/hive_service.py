"""Hive domain service."""

from datetime import datetime
from typing import List
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from hivemind.domain.error import (
    HiveNameTakenError,
    HiveStatusConflictError,
    NotFoundError,
)
from hivemind.domain.model import Hive, HivePatch
from hivemind.domain.repository import AccountRepository, HiveRepository, UnitOfWork
from hivemind.domain.value import CallerIdentity, HiveId, HiveName, HiveStatusFlag

from .base import Service
from .transaction import atomic, guarded_read


class HiveService(Service):
    """Domain service for hive operations.

    Rollup counters are never written here; they belong to the
    consistency engine.
    """

    def __init__(
        self,
        hive_repository: HiveRepository,
        account_repository: AccountRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize hive service.

        Args:
            hive_repository: Hive repository
            account_repository: Account repository
            unit_of_work: Transaction boundary of the current request
        """
        self.hive_repository = hive_repository
        self.account_repository = account_repository
        self.unit_of_work = unit_of_work

    async def create_hive(
        self, creator: CallerIdentity, name: HiveName, description: str
    ) -> Hive:
        """Create a hive with zeroed rollups.

        Args:
            creator: Identity of the creating account
            name: Unique hive name
            description: Hive description

        Returns:
            Created hive

        Raises:
            NotFoundError: If the creator's account doesn't exist
            HiveNameTakenError: If a hive with this name exists
        """
        with logfire.span("hive_service.create_hive", name=name.root):
            hive = Hive(
                id=HiveId(uuid4()),
                name=name,
                creator=creator.username,
                account_id=creator.account_id,
                description=description,
                created_at=datetime.now(),
            )

            async with atomic(self.unit_of_work, "create_hive"):
                account_id = str(creator.account_id)
                if await self.account_repository.find_by_id(creator.account_id) is None:
                    logfire.warn("Hive creator account not found", account_id=account_id)
                    raise NotFoundError("Account", account_id)
                if await self.hive_repository.find_by_name(name) is not None:
                    logfire.warn("Hive name already taken", name=name.root)
                    raise HiveNameTakenError(name.root)
                try:
                    saved = await self.hive_repository.save(hive)
                except IntegrityError:
                    logfire.warn("Hive name taken concurrently", name=name.root)
                    raise HiveNameTakenError(name.root)

            logfire.info("Hive created", hive_id=str(saved.id), name=name.root)
            return saved

    async def get_hive(self, hive_id: HiveId) -> Hive:
        """Get a hive by ID.

        Raises:
            NotFoundError: If the hive doesn't exist
        """
        with logfire.span("hive_service.get_hive", hive_id=str(hive_id)):
            async with guarded_read("get_hive"):
                hive = await self.hive_repository.find_by_id(hive_id)
            if hive is None:
                logfire.warn("Hive not found", hive_id=str(hive_id))
                raise NotFoundError("Hive", str(hive_id))
            return hive

    async def list_hives(self) -> List[Hive]:
        """List all hives ordered by creation."""
        with logfire.span("hive_service.list_hives"):
            async with guarded_read("list_hives"):
                hives = await self.hive_repository.find_all()
            logfire.info("Hives retrieved", count=len(hives))
            return hives

    async def update_hive(self, hive_id: HiveId, patch: HivePatch) -> Hive:
        """Apply a patch to a hive.

        Args:
            hive_id: Hive ID
            patch: Fields to change

        Returns:
            Updated hive

        Raises:
            NotFoundError: If the hive doesn't exist
        """
        changes = patch.changes()
        with logfire.span(
            "hive_service.update_hive", hive_id=str(hive_id), fields=sorted(changes)
        ):
            async with atomic(self.unit_of_work, "update_hive"):
                hive = await self.hive_repository.find_by_id(hive_id, for_update=True)
                if hive is None:
                    logfire.warn("Hive not found", hive_id=str(hive_id))
                    raise NotFoundError("Hive", str(hive_id))
                updated = await self.hive_repository.save(
                    hive.model_copy(
                        update={**changes, "last_edited": datetime.now()}
                    )
                )

            logfire.info("Hive updated", hive_id=str(hive_id))
            return updated

    async def set_flag(
        self, hive_id: HiveId, flag: HiveStatusFlag, value: bool
    ) -> Hive:
        """Set or clear a moderation flag on a hive.

        Args:
            hive_id: Hive ID
            flag: Archived or banned
            value: New flag value

        Returns:
            Updated hive

        Raises:
            NotFoundError: If the hive doesn't exist
            HiveStatusConflictError: If the flag already has this value
        """
        with logfire.span(
            "hive_service.set_flag",
            hive_id=str(hive_id),
            flag=flag.value,
            value=value,
        ):
            async with atomic(self.unit_of_work, f"set_{flag.value}"):
                hive = await self.hive_repository.find_by_id(hive_id, for_update=True)
                if hive is None:
                    logfire.warn("Hive not found", hive_id=str(hive_id))
                    raise NotFoundError("Hive", str(hive_id))
                if hive.has_flag(flag) == value:
                    logfire.warn("Hive flag unchanged", name=hive.name.root)
                    raise HiveStatusConflictError(hive.name.root, flag.value, value)

                updated = await self.hive_repository.save(
                    hive.model_copy(update={flag.value: value})
                )

            logfire.info("Hive flag set", hive_id=str(hive_id))
            return updated
