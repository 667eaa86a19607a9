"""Create hive use case."""

from uuid import UUID

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.items import HiveItem
from hivemind.domain.service import HiveService
from hivemind.domain.value import AccountId, CallerIdentity, HiveName, Username


class CreateHiveRequest(BaseModel):
    """Create hive request."""

    name: HiveName
    description: str
    account_id: str  # Account ID from caller identity
    username: str  # Username from caller identity


class CreateHiveUseCase(BaseUseCase):
    """Use case for creating a hive."""

    def __init__(self, hive_service: HiveService) -> None:
        """Initialize create hive use case.

        Args:
            hive_service: Hive domain service
        """
        self.hive_service = hive_service

    async def execute(self, request: CreateHiveRequest) -> HiveItem:
        """Execute create hive flow.

        Raises:
            HiveNameTakenError: If the name is already in use
        """
        creator = CallerIdentity(
            account_id=AccountId(UUID(request.account_id)),
            username=Username(request.username),
        )
        hive = await self.hive_service.create_hive(
            creator, request.name, request.description
        )
        return HiveItem.from_domain(hive)
