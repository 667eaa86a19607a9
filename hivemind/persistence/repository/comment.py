"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hivemind.domain.model import Comment
from hivemind.domain.repository import CommentRepository
from hivemind.domain.value import CommentId, ContentId, VoteDelta
from hivemind.persistence.mappers import (
    COMMENT_COUNTER_COLUMNS,
    comment_to_dict,
    row_to_comment,
    without,
)
from hivemind.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID, optionally locking the row."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once (batch query)."""
        if not comment_ids:
            return []

        stmt = select(comments_table).where(comments_table.c.id.in_(comment_ids))
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_content(self, content_id: ContentId) -> List[Comment]:
        """Find all comments on a content item, newest first."""
        with logfire.span(
            "comment_repository.find_by_content", content_id=str(content_id)
        ):
            stmt = (
                select(comments_table)
                .where(comments_table.c.content_id == content_id)
                .order_by(desc(comments_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies(self, parent_id: CommentId) -> List[Comment]:
        """Find the replies to a comment, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Vote tallies are written on insert only.
        """
        with logfire.span("comment_repository.save", comment_id=str(comment.id)):
            comment_dict = comment_to_dict(comment)
            existing = await self.find_by_id(comment.id)

            if existing:
                stmt = (
                    update(comments_table)
                    .where(comments_table.c.id == comment.id)
                    .values(
                        **without(comment_dict, COMMENT_COUNTER_COLUMNS + ("id",))
                    )
                    .returning(comments_table)
                )
            else:
                stmt = (
                    comments_table.insert()
                    .values(**comment_dict)
                    .returning(comments_table)
                )

            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_comment(row._asdict())

    async def adjust_votes(
        self, comment_id: CommentId, delta: VoteDelta
    ) -> Optional[Comment]:
        """Atomically add a delta to the comment's vote tallies."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                upvotes=comments_table.c.upvotes + delta.upvotes,
                downvotes=comments_table.c.downvotes + delta.downvotes,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None
