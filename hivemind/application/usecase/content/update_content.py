"""Update content use case."""

from uuid import UUID

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.items import ContentItem
from hivemind.domain.model import ContentPatch
from hivemind.domain.service import ContentService
from hivemind.domain.value import AccountId, ContentId


class UpdateContentRequest(BaseModel):
    """Update content request."""

    content_id: str  # UUID string
    account_id: str  # Current account ID (must be author)
    patch: ContentPatch


class UpdateContentUseCase(BaseUseCase):
    """Use case for editing a content item."""

    def __init__(self, content_service: ContentService) -> None:
        """Initialize update content use case.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def execute(self, request: UpdateContentRequest) -> ContentItem:
        """Execute update content flow.

        Raises:
            NotFoundError: If the content doesn't exist
            NotAuthorizedError: If the caller isn't the author
            ContentDeletedError: If the content is deleted
        """
        updated = await self.content_service.update_content(
            ContentId(UUID(request.content_id)),
            AccountId(UUID(request.account_id)),
            request.patch,
        )
        return ContentItem.from_domain(updated)
