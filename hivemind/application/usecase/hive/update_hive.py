"""Hive update use cases."""

from uuid import UUID

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.items import HiveItem
from hivemind.domain.model import HivePatch
from hivemind.domain.service import HiveService
from hivemind.domain.value import HiveId, HiveStatusFlag


class UpdateHiveRequest(BaseModel):
    """Update hive request."""

    hive_id: str  # UUID string
    patch: HivePatch


class UpdateHiveUseCase(BaseUseCase):
    """Use case for editing a hive's description."""

    def __init__(self, hive_service: HiveService) -> None:
        """Initialize update hive use case.

        Args:
            hive_service: Hive domain service
        """
        self.hive_service = hive_service

    async def execute(self, request: UpdateHiveRequest) -> HiveItem:
        """Execute update hive flow.

        Raises:
            NotFoundError: If the hive doesn't exist
        """
        hive = await self.hive_service.update_hive(
            HiveId(UUID(request.hive_id)), request.patch
        )
        return HiveItem.from_domain(hive)


class SetHiveFlagRequest(BaseModel):
    """Archive/unarchive or ban/unban request."""

    hive_id: str  # UUID string
    flag: HiveStatusFlag
    value: bool


class SetHiveFlagUseCase(BaseUseCase):
    """Use case for toggling a hive's archived or banned flag."""

    def __init__(self, hive_service: HiveService) -> None:
        """Initialize set hive flag use case.

        Args:
            hive_service: Hive domain service
        """
        self.hive_service = hive_service

    async def execute(self, request: SetHiveFlagRequest) -> HiveItem:
        """Execute set hive flag flow.

        Raises:
            NotFoundError: If the hive doesn't exist
            HiveStatusConflictError: If the flag already has the value
        """
        hive = await self.hive_service.set_flag(
            HiveId(UUID(request.hive_id)), request.flag, request.value
        )
        return HiveItem.from_domain(hive)
