"""Create content use case."""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel

from hivemind.application.usecase.base import BaseUseCase
from hivemind.application.usecase.items import ContentItem, HiveItem
from hivemind.domain.model import Content
from hivemind.domain.service import AggregateConsistencyEngine
from hivemind.domain.value import AccountId, ContentId, HiveId, Username


class CreateContentRequest(BaseModel):
    """Create content request."""

    hive_id: str  # UUID string
    title: str
    message: str = ""
    link: str | None = None
    image_link: str | None = None
    account_id: str  # Account ID from caller identity
    username: str  # Username from caller identity


class CreateContentResponse(BaseModel):
    """Create content response."""

    content: ContentItem
    hive: HiveItem


class CreateContentUseCase(BaseUseCase):
    """Use case for posting a content item into a hive."""

    def __init__(self, engine: AggregateConsistencyEngine) -> None:
        """Initialize create content use case.

        Args:
            engine: Aggregate consistency engine
        """
        self.engine = engine

    async def execute(self, request: CreateContentRequest) -> CreateContentResponse:
        """Execute create content flow.

        Args:
            request: Create content request

        Returns:
            Created content and the hive with its new content count

        Raises:
            NotFoundError: If the hive or author account doesn't exist
        """
        content = Content(
            id=ContentId(uuid4()),
            hive_id=HiveId(UUID(request.hive_id)),
            title=request.title,
            author=Username(request.username),
            account_id=AccountId(UUID(request.account_id)),
            message=request.message,
            link=request.link,
            image_link=request.image_link,
            created_at=datetime.now(),
        )

        outcome = await self.engine.create_content(content)

        return CreateContentResponse(
            content=ContentItem.from_domain(outcome.content),
            hive=HiveItem.from_domain(outcome.hive),
        )
