"""PostgreSQL implementation of Content repository."""

from typing import List, Optional

import logfire
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hivemind.domain.model import Content
from hivemind.domain.repository import ContentRepository
from hivemind.domain.value import ContentId, HiveId, VoteDelta
from hivemind.persistence.mappers import (
    CONTENT_COUNTER_COLUMNS,
    content_to_dict,
    row_to_content,
    without,
)
from hivemind.persistence.tables import contents_table


class PostgresContentRepository(ContentRepository):
    """PostgreSQL implementation of ContentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, content_id: ContentId, for_update: bool = False
    ) -> Optional[Content]:
        """Find a content item by ID, optionally locking the row."""
        stmt = select(contents_table).where(contents_table.c.id == content_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_content(row._asdict()) if row else None

    async def find_by_hive(self, hive_id: HiveId) -> List[Content]:
        """Find all content in a hive, oldest first."""
        stmt = (
            select(contents_table)
            .where(contents_table.c.hive_id == hive_id)
            .order_by(contents_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_content(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> List[Content]:
        """Find all content items, oldest first."""
        stmt = select(contents_table).order_by(contents_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_content(row._asdict()) for row in result.fetchall()]

    async def save(self, content: Content) -> Content:
        """Save a content item (create or update).

        Counter columns are written on insert only.
        """
        with logfire.span("content_repository.save", content_id=str(content.id)):
            content_dict = content_to_dict(content)
            existing = await self.find_by_id(content.id)

            if existing:
                stmt = (
                    update(contents_table)
                    .where(contents_table.c.id == content.id)
                    .values(
                        **without(content_dict, CONTENT_COUNTER_COLUMNS + ("id",))
                    )
                    .returning(contents_table)
                )
            else:
                stmt = (
                    contents_table.insert()
                    .values(**content_dict)
                    .returning(contents_table)
                )

            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_content(row._asdict())

    async def adjust_counters(
        self,
        content_id: ContentId,
        votes: VoteDelta | None = None,
        comments: int = 0,
    ) -> Optional[Content]:
        """Atomically add deltas to the content's counters."""
        votes = votes or VoteDelta()
        stmt = (
            update(contents_table)
            .where(contents_table.c.id == content_id)
            .values(
                upvotes=contents_table.c.upvotes + votes.upvotes,
                downvotes=contents_table.c.downvotes + votes.downvotes,
                comment_count=contents_table.c.comment_count + comments,
            )
            .returning(contents_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_content(row._asdict()) if row else None
