"""Get content use case."""

from uuid import UUID

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.items import ContentItem
from hivemind.domain.service import ContentService
from hivemind.domain.value import ContentId


class GetContentRequest(BaseModel):
    """Get content request."""

    content_id: str  # UUID string


class GetContentUseCase(BaseUseCase):
    """Use case for reading a single content item."""

    def __init__(self, content_service: ContentService) -> None:
        """Initialize get content use case.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def execute(self, request: GetContentRequest) -> ContentItem:
        """Execute get content flow.

        Raises:
            NotFoundError: If the content doesn't exist
        """
        content = await self.content_service.get_content(
            ContentId(UUID(request.content_id))
        )
        return ContentItem.from_domain(content)
