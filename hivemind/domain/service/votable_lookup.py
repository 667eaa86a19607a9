"""Votable target lookup domain service."""

from uuid import UUID

import logfire

from hivemind.domain.error import NotFoundError
from hivemind.domain.model import Account, Comment, Content, Hive, VotableTarget
from hivemind.domain.repository import (
    AccountRepository,
    CommentRepository,
    ContentRepository,
    HiveRepository,
)
from hivemind.domain.value import AccountId, CommentId, ContentId, HiveId, VotableType

from .base import Service


class VotableTargetLookup(Service):
    """Resolves the entities an operation touches, raising NotFoundError.

    Callers pass ``for_update=True`` for rows they are about to mutate.
    Rows must be locked in the order comment -> content -> hive.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        hive_repository: HiveRepository,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize lookup service.

        Args:
            account_repository: Account repository
            hive_repository: Hive repository
            content_repository: Content repository
            comment_repository: Comment repository
        """
        self.account_repository = account_repository
        self.hive_repository = hive_repository
        self.content_repository = content_repository
        self.comment_repository = comment_repository

    async def get_account(self, account_id: AccountId) -> Account:
        """Get an account by ID.

        Raises:
            NotFoundError: If the account doesn't exist
        """
        account = await self.account_repository.find_by_id(account_id)
        if account is None:
            logfire.warn("Account not found", account_id=str(account_id))
            raise NotFoundError("Account", str(account_id))
        return account

    async def get_hive(self, hive_id: HiveId, for_update: bool = False) -> Hive:
        """Get a hive by ID.

        Raises:
            NotFoundError: If the hive doesn't exist
        """
        hive = await self.hive_repository.find_by_id(hive_id, for_update=for_update)
        if hive is None:
            logfire.warn("Hive not found", hive_id=str(hive_id))
            raise NotFoundError("Hive", str(hive_id))
        return hive

    async def get_content(
        self, content_id: ContentId, for_update: bool = False
    ) -> Content:
        """Get a content item by ID.

        Raises:
            NotFoundError: If the content doesn't exist
        """
        content = await self.content_repository.find_by_id(
            content_id, for_update=for_update
        )
        if content is None:
            logfire.warn("Content not found", content_id=str(content_id))
            raise NotFoundError("Content", str(content_id))
        return content

    async def get_comment(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.comment_repository.find_by_id(
            comment_id, for_update=for_update
        )
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_target(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        for_update: bool = False,
    ) -> VotableTarget:
        """Get a content item or comment by type and ID.

        Args:
            votable_type: Type of item
            votable_id: ID of the item
            for_update: Lock the row until the unit of work ends

        Returns:
            The content item or comment

        Raises:
            NotFoundError: If the item doesn't exist
        """
        if votable_type == VotableType.CONTENT:
            return await self.get_content(ContentId(votable_id), for_update=for_update)
        return await self.get_comment(CommentId(votable_id), for_update=for_update)
