"""Counter propagator domain service."""

from dataclasses import dataclass
from typing import Optional

import logfire

from hivemind.domain.error import NotFoundError
from hivemind.domain.model import Content, Hive, VotableTarget
from hivemind.domain.repository import (
    CommentRepository,
    ContentRepository,
    HiveRepository,
)
from hivemind.domain.value import RollupDelta, VoteDelta

from .base import Service


@dataclass
class PropagationResult:
    """Rows as they stand after a vote delta was applied."""

    target: VotableTarget
    hive: Optional[Hive]  # Set only when the target is a content item


class CounterPropagator(Service):
    """Applies vote deltas to a target's tallies and its hive's rollups.

    Content votes roll up into the owning hive; comment votes stay on the
    comment. Vote changes never touch ``last_edited``. Writes go through the
    caller's unit of work, so the target and hive updates commit together.
    """

    def __init__(
        self,
        hive_repository: HiveRepository,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize counter propagator.

        Args:
            hive_repository: Hive repository
            content_repository: Content repository
            comment_repository: Comment repository
        """
        self.hive_repository = hive_repository
        self.content_repository = content_repository
        self.comment_repository = comment_repository

    async def apply(
        self, target: VotableTarget, delta: VoteDelta
    ) -> PropagationResult:
        """Apply a vote delta to ``target`` and, for content, to its hive.

        Args:
            target: Content item or comment
            delta: Signed change to the vote tallies

        Returns:
            The updated target, and the updated hive for content targets

        Raises:
            NotFoundError: If a row disappeared since it was resolved
        """
        with logfire.span(
            "counter_propagator.apply",
            votable_type=target.votable_type.value,
            votable_id=str(target.id),
            upvotes=delta.upvotes,
            downvotes=delta.downvotes,
        ):
            if isinstance(target, Content):
                content = await self.content_repository.adjust_counters(
                    target.id, votes=delta
                )
                if content is None:
                    raise NotFoundError("Content", str(target.id))

                hive = await self.hive_repository.adjust_rollups(
                    target.hive_id, RollupDelta.from_votes(delta)
                )
                if hive is None:
                    raise NotFoundError("Hive", str(target.hive_id))

                logfire.info(
                    "Content votes propagated",
                    upvotes=content.upvotes,
                    downvotes=content.downvotes,
                    hive_total_upvotes=hive.total_upvotes,
                    hive_total_downvotes=hive.total_downvotes,
                )
                return PropagationResult(target=content, hive=hive)

            comment = await self.comment_repository.adjust_votes(target.id, delta)
            if comment is None:
                raise NotFoundError("Comment", str(target.id))

            logfire.info(
                "Comment votes updated",
                upvotes=comment.upvotes,
                downvotes=comment.downvotes,
            )
            return PropagationResult(target=comment, hive=None)
