"""Aggregate consistency engine.

Every externally visible mutation that touches a vote tally, an item count or
a hive rollup goes through this service. Each operation locks the rows it
will change (comment -> content -> hive), resolves everything it needs before
the first write, and commits once through the unit of work. Any failure rolls
the whole operation back.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

import logfire

from hivemind.domain.error import (
    CannotReplyToReplyError,
    NotFoundError,
    ValidationError,
)
from hivemind.domain.model import (
    Comment,
    Content,
    Hive,
    VotableTarget,
    VoteRecord,
)
from hivemind.domain.repository import (
    CommentRepository,
    ContentRepository,
    UnitOfWork,
    VoteRepository,
)
from hivemind.domain.value import (
    AccountId,
    CommentId,
    ContentId,
    VotableType,
    VoteDirection,
    VoteState,
)

from .base import Service
from .counter_propagator import CounterPropagator
from .lifecycle_service import LifecycleManager
from .transaction import atomic, guarded_read
from .votable_lookup import VotableTargetLookup
from .vote_ledger import VoteLedger


@dataclass
class VoteOutcome:
    """Result of a cast or withdraw."""

    target: VotableTarget
    hive: Optional[Hive]  # Only content votes touch the hive
    record: VoteRecord


@dataclass
class CreationOutcome:
    """Result of creating a content item, comment or reply."""

    created: VotableTarget
    content: Content  # The created item itself, or the content commented on
    hive: Hive


@dataclass
class LifecycleOutcome:
    """Result of a soft delete or undelete."""

    target: VotableTarget
    content: Optional[Content]  # Parent content for comment targets
    hive: Hive


@dataclass
class VoteSummaryEntry:
    """Comments on one content item that a voter currently votes on."""

    content_id: ContentId
    upvoted: List[CommentId] = field(default_factory=list)
    downvoted: List[CommentId] = field(default_factory=list)


class AggregateConsistencyEngine(Service):
    """Orchestrates lookups, the vote ledger, counter propagation and lifecycle."""

    def __init__(
        self,
        lookup: VotableTargetLookup,
        vote_ledger: VoteLedger,
        counter_propagator: CounterPropagator,
        lifecycle_manager: LifecycleManager,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize the engine.

        Args:
            lookup: Entity lookup service
            vote_ledger: Vote state machine
            counter_propagator: Vote tally and rollup updater
            lifecycle_manager: Soft delete/undelete service
            content_repository: Content repository
            comment_repository: Comment repository
            vote_repository: Vote record repository
            unit_of_work: Transaction boundary of the current request
        """
        self.lookup = lookup
        self.vote_ledger = vote_ledger
        self.counter_propagator = counter_propagator
        self.lifecycle_manager = lifecycle_manager
        self.content_repository = content_repository
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository
        self.unit_of_work = unit_of_work

    async def cast_vote(
        self,
        account_id: AccountId,
        votable_type: VotableType,
        votable_id: UUID,
        direction: VoteDirection,
    ) -> VoteOutcome:
        """Cast an up or down vote on a content item or comment.

        Args:
            account_id: Voter's account ID
            votable_type: Type of the target
            votable_id: Target ID
            direction: Up or down

        Returns:
            The target and, for content, hive with updated tallies

        Raises:
            NotFoundError: If the voter or target doesn't exist
            AlreadyVotedError: If the voter has an active vote on the target
            StorageFailureError: If the store failed; nothing was written
        """
        with logfire.span(
            "engine.cast_vote",
            account_id=str(account_id),
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            direction=direction.value,
        ):
            async with atomic(self.unit_of_work, "cast_vote"):
                await self.lookup.get_account(account_id)
                target, _ = await self._lock_target(votable_type, votable_id)
                transition = await self.vote_ledger.cast(account_id, target, direction)
                result = await self.counter_propagator.apply(target, transition.delta)

            return VoteOutcome(
                target=result.target, hive=result.hive, record=transition.record
            )

    async def withdraw_vote(
        self,
        account_id: AccountId,
        votable_type: VotableType,
        votable_id: UUID,
        direction: VoteDirection,
    ) -> VoteOutcome:
        """Withdraw the voter's vote in ``direction``.

        Args:
            account_id: Voter's account ID
            votable_type: Type of the target
            votable_id: Target ID
            direction: Direction being withdrawn

        Returns:
            The target and, for content, hive with updated tallies

        Raises:
            NotFoundError: If the target doesn't exist
            NoVoteToWithdrawError: If the voter never voted on the target
            VoteDirectionMismatchError: If the vote isn't in ``direction``
            StorageFailureError: If the store failed; nothing was written
        """
        with logfire.span(
            "engine.withdraw_vote",
            account_id=str(account_id),
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            direction=direction.value,
        ):
            async with atomic(self.unit_of_work, "withdraw_vote"):
                target, _ = await self._lock_target(votable_type, votable_id)
                transition = await self.vote_ledger.withdraw(
                    account_id, target, direction
                )
                result = await self.counter_propagator.apply(target, transition.delta)

            return VoteOutcome(
                target=result.target, hive=result.hive, record=transition.record
            )

    async def create_content(self, content: Content) -> CreationOutcome:
        """Persist a new content item and count it on its hive.

        Args:
            content: Validated content item with zeroed counters

        Returns:
            The created content and the updated hive

        Raises:
            NotFoundError: If the author's account or the hive doesn't exist
            StorageFailureError: If the store failed; nothing was written
        """
        with logfire.span(
            "engine.create_content",
            content_id=str(content.id),
            hive_id=str(content.hive_id),
        ):
            async with atomic(self.unit_of_work, "create_content"):
                await self.lookup.get_account(content.account_id)
                await self.lookup.get_hive(content.hive_id, for_update=True)
                saved = await self.content_repository.save(content)
                hive = await self.lifecycle_manager.record_content_created(saved)

            logfire.info("Content created", hive_total_content=hive.total_content)
            return CreationOutcome(created=saved, content=saved, hive=hive)

    async def create_comment(self, comment: Comment) -> CreationOutcome:
        """Persist a new top-level comment and count it on its content and hive.

        Args:
            comment: Validated comment with zeroed tallies and no parent

        Returns:
            The created comment, updated content and updated hive

        Raises:
            NotFoundError: If the content or its hive doesn't exist
            StorageFailureError: If the store failed; nothing was written
        """
        with logfire.span(
            "engine.create_comment",
            comment_id=str(comment.id),
            content_id=str(comment.content_id),
        ):
            async with atomic(self.unit_of_work, "create_comment"):
                outcome = await self._insert_comment(comment)

            logfire.info(
                "Comment created",
                comment_count=outcome.content.comment_count,
                hive_total_comments=outcome.hive.total_comments,
            )
            return outcome

    async def create_reply(self, reply: Comment) -> CreationOutcome:
        """Persist a reply to a top-level comment.

        Replies count towards the content's comment_count and the hive's
        total_comments exactly like top-level comments.

        Args:
            reply: Validated comment whose ``parent_id`` is set

        Returns:
            The created reply, updated content and updated hive

        Raises:
            NotFoundError: If the content, the parent comment (on that
                content) or the hive doesn't exist
            CannotReplyToReplyError: If the parent is itself a reply
            StorageFailureError: If the store failed; nothing was written
        """
        with logfire.span(
            "engine.create_reply",
            comment_id=str(reply.id),
            content_id=str(reply.content_id),
            parent_id=str(reply.parent_id),
        ):
            if reply.parent_id is None:
                raise ValidationError("A reply must reference a parent comment")

            async with atomic(self.unit_of_work, "create_reply"):
                parent = await self.lookup.get_comment(reply.parent_id)
                if parent.content_id != reply.content_id:
                    logfire.warn(
                        "Parent comment belongs to another content item",
                        parent_content_id=str(parent.content_id),
                    )
                    raise NotFoundError("Comment", str(reply.parent_id))
                if parent.is_reply:
                    logfire.warn("Reply to a reply rejected")
                    raise CannotReplyToReplyError(str(parent.id))

                outcome = await self._insert_comment(reply)

            logfire.info(
                "Reply created",
                comment_count=outcome.content.comment_count,
                hive_total_comments=outcome.hive.total_comments,
            )
            return outcome

    async def soft_delete(
        self, votable_type: VotableType, votable_id: UUID
    ) -> LifecycleOutcome:
        """Soft delete a content item or comment.

        Args:
            votable_type: Type of the target
            votable_id: Target ID

        Returns:
            The deleted target, parent content (for comments) and hive

        Raises:
            NotFoundError: If the target or a parent doesn't exist
            AlreadyDeletedError: If the target is already deleted
            StorageFailureError: If the store failed; nothing was written
        """
        with logfire.span(
            "engine.soft_delete",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
        ):
            async with atomic(self.unit_of_work, "soft_delete"):
                target, hive = await self._lock_target_with_hive(
                    votable_type, votable_id
                )
                result = await self.lifecycle_manager.soft_delete(target, hive)

            return LifecycleOutcome(
                target=result.target, content=result.content, hive=result.hive
            )

    async def undelete(
        self, votable_type: VotableType, votable_id: UUID
    ) -> LifecycleOutcome:
        """Reverse a soft delete.

        Args:
            votable_type: Type of the target
            votable_id: Target ID

        Returns:
            The restored target, parent content (for comments) and hive

        Raises:
            NotFoundError: If the target or a parent doesn't exist
            NotDeletedError: If the target is not deleted
            StorageFailureError: If the store failed; nothing was written
        """
        with logfire.span(
            "engine.undelete",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
        ):
            async with atomic(self.unit_of_work, "undelete"):
                target, hive = await self._lock_target_with_hive(
                    votable_type, votable_id
                )
                result = await self.lifecycle_manager.undelete(target, hive)

            return LifecycleOutcome(
                target=result.target, content=result.content, hive=result.hive
            )

    async def get_vote_summary_for_voter(
        self, account_id: AccountId
    ) -> List[VoteSummaryEntry]:
        """Comments the voter currently up/downvotes, grouped by content.

        Content items where the voter has no active comment vote are left out.

        Args:
            account_id: Voter's account ID

        Returns:
            Entries ordered by content ID, comment IDs sorted within each list

        Raises:
            NotFoundError: If the voter has no comment vote records at all
            StorageFailureError: If the store failed or timed out
        """
        with logfire.span("engine.get_vote_summary", account_id=str(account_id)):
            async with guarded_read("get_vote_summary"):
                records = await self.vote_repository.find_by_account(
                    account_id, VotableType.COMMENT
                )
                comments = await self.comment_repository.find_by_ids(
                    [CommentId(record.votable_id) for record in records]
                )
            content_by_comment = {c.id: c.content_id for c in comments}

            # Records whose comment no longer resolves don't count as votes
            records = [r for r in records if r.votable_id in content_by_comment]
            if not records:
                logfire.warn("No comment votes found for account")
                raise NotFoundError("Comment votes for account", str(account_id))

            grouped: dict[ContentId, VoteSummaryEntry] = {}
            for record in records:
                if not record.state.is_active:
                    continue
                content_id = content_by_comment[CommentId(record.votable_id)]
                entry = grouped.setdefault(
                    content_id, VoteSummaryEntry(content_id=content_id)
                )
                bucket = (
                    entry.upvoted
                    if record.state == VoteState.UPVOTED
                    else entry.downvoted
                )
                bucket.append(CommentId(record.votable_id))

            summary = [grouped[key] for key in sorted(grouped, key=str)]
            for entry in summary:
                entry.upvoted.sort(key=str)
                entry.downvoted.sort(key=str)

            logfire.info("Vote summary built", content_items=len(summary))
            return summary

    async def _lock_target(
        self, votable_type: VotableType, votable_id: UUID
    ) -> tuple[VotableTarget, Optional[Hive]]:
        """Lock a vote target and, for content, its hive."""
        target = await self.lookup.get_target(votable_type, votable_id, for_update=True)
        if isinstance(target, Content):
            hive = await self.lookup.get_hive(target.hive_id, for_update=True)
            return target, hive
        return target, None

    async def _lock_target_with_hive(
        self, votable_type: VotableType, votable_id: UUID
    ) -> tuple[VotableTarget, Hive]:
        """Lock a target, its parent content (for comments) and its hive."""
        target = await self.lookup.get_target(votable_type, votable_id, for_update=True)
        if isinstance(target, Comment):
            content = await self.lookup.get_content(target.content_id, for_update=True)
        else:
            content = target
        hive = await self.lookup.get_hive(content.hive_id, for_update=True)
        return target, hive

    async def _insert_comment(self, comment: Comment) -> CreationOutcome:
        content = await self.lookup.get_content(comment.content_id, for_update=True)
        await self.lookup.get_hive(content.hive_id, for_update=True)
        saved = await self.comment_repository.save(comment)
        updated_content, hive = await self.lifecycle_manager.record_comment_created(
            saved, content
        )
        return CreationOutcome(created=saved, content=updated_content, hive=hive)
