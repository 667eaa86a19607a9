"""Hive read use cases."""

from uuid import UUID

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.items import HiveItem
from hivemind.domain.service import HiveService
from hivemind.domain.value import HiveId


class GetHiveRequest(BaseModel):
    """Get hive request."""

    hive_id: str  # UUID string


class GetHiveUseCase(BaseUseCase):
    """Use case for reading a hive with its rollups."""

    def __init__(self, hive_service: HiveService) -> None:
        self.hive_service = hive_service

    async def execute(self, request: GetHiveRequest) -> HiveItem:
        hive = await self.hive_service.get_hive(HiveId(UUID(request.hive_id)))
        return HiveItem.from_domain(hive)


class ListHivesResponse(BaseModel):
    """List hives response."""

    items: list[HiveItem]
    total: int


class ListHivesUseCase(BaseUseCase):
    """Use case for listing all hives."""

    def __init__(self, hive_service: HiveService) -> None:
        self.hive_service = hive_service

    async def execute(self, request: None = None) -> ListHivesResponse:
        hives = await self.hive_service.list_hives()
        return ListHivesResponse(
            items=[HiveItem.from_domain(hive) for hive in hives], total=len(hives)
        )
