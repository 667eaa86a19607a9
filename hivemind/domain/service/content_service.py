"""Content domain service."""

from datetime import datetime
from typing import List

import logfire

from hivemind.domain.error import (
    ContentDeletedError,
    NotAuthorizedError,
    NotFoundError,
)
from hivemind.domain.model import Content, ContentPatch
from hivemind.domain.repository import ContentRepository, UnitOfWork
from hivemind.domain.value import AccountId, ContentId, HiveId

from .base import Service
from .transaction import atomic, guarded_read


class ContentService(Service):
    """Domain service for content reads and edits.

    Creation, votes and deletion go through the consistency engine.
    """

    def __init__(
        self, content_repository: ContentRepository, unit_of_work: UnitOfWork
    ) -> None:
        """Initialize content service.

        Args:
            content_repository: Content repository
            unit_of_work: Transaction boundary of the current request
        """
        self.content_repository = content_repository
        self.unit_of_work = unit_of_work

    async def get_content(self, content_id: ContentId) -> Content:
        """Get a content item by ID.

        Raises:
            NotFoundError: If the content doesn't exist
        """
        with logfire.span("content_service.get_content", content_id=str(content_id)):
            async with guarded_read("get_content"):
                content = await self.content_repository.find_by_id(content_id)
            if content is None:
                logfire.warn("Content not found", content_id=str(content_id))
                raise NotFoundError("Content", str(content_id))
            return content

    async def list_content(self, hive_id: HiveId | None = None) -> List[Content]:
        """List content, optionally restricted to one hive.

        Args:
            hive_id: Hive to list content of, all hives if None

        Returns:
            Content items ordered by creation
        """
        with logfire.span(
            "content_service.list_content",
            hive_id=str(hive_id) if hive_id else None,
        ):
            async with guarded_read("list_content"):
                if hive_id is None:
                    items = await self.content_repository.find_all()
                else:
                    items = await self.content_repository.find_by_hive(hive_id)
            logfire.info("Content retrieved", count=len(items))
            return items

    async def update_content(
        self, content_id: ContentId, editor_id: AccountId, patch: ContentPatch
    ) -> Content:
        """Apply an author's patch to a content item.

        Args:
            content_id: Content ID
            editor_id: Account making the edit
            patch: Fields to change

        Returns:
            Updated content

        Raises:
            NotFoundError: If the content doesn't exist
            NotAuthorizedError: If the editor isn't the author
            ContentDeletedError: If the content is deleted
        """
        changes = patch.changes()
        with logfire.span(
            "content_service.update_content",
            content_id=str(content_id),
            editor_id=str(editor_id),
            fields=sorted(changes),
        ):
            async with atomic(self.unit_of_work, "update_content"):
                content = await self.content_repository.find_by_id(
                    content_id, for_update=True
                )
                if content is None:
                    logfire.warn("Content not found", content_id=str(content_id))
                    raise NotFoundError("Content", str(content_id))
                if content.account_id != editor_id:
                    logfire.warn(
                        "Content edit by non-author",
                        author_id=str(content.account_id),
                    )
                    raise NotAuthorizedError(
                        "content", str(content_id), str(editor_id)
                    )
                if content.deleted:
                    logfire.warn("Edit of deleted content", content_id=str(content_id))
                    raise ContentDeletedError("content", str(content_id))

                updated = await self.content_repository.save(
                    content.model_copy(
                        update={**changes, "last_edited": datetime.now()}
                    )
                )

            logfire.info("Content updated", content_id=str(content_id))
            return updated
