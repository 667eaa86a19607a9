"""List content use case."""

from uuid import UUID

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.items import ContentItem
from hivemind.domain.service import ContentService, HiveService
from hivemind.domain.value import HiveId


class ListContentRequest(BaseModel):
    """List content request."""

    hive_id: str | None = None  # Restrict to one hive


class ListContentResponse(BaseModel):
    """List content response."""

    items: list[ContentItem]
    total: int


class ListContentUseCase(BaseUseCase):
    """Use case for listing content, overall or per hive."""

    def __init__(
        self, content_service: ContentService, hive_service: HiveService
    ) -> None:
        """Initialize list content use case.

        Args:
            content_service: Content domain service
            hive_service: Hive domain service
        """
        self.content_service = content_service
        self.hive_service = hive_service

    async def execute(self, request: ListContentRequest) -> ListContentResponse:
        """Execute list content flow.

        Raises:
            NotFoundError: If a hive is given and doesn't exist
        """
        hive_id = None
        if request.hive_id is not None:
            hive_id = HiveId(UUID(request.hive_id))
            # Unknown hive is reported rather than listed as empty
            await self.hive_service.get_hive(hive_id)

        items = await self.content_service.list_content(hive_id)
        return ListContentResponse(
            items=[ContentItem.from_domain(item) for item in items],
            total=len(items),
        )
