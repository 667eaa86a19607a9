"""PostgreSQL implementation of Hive repository."""

from typing import List, Optional

import logfire
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hivemind.domain.model import Hive
from hivemind.domain.repository import HiveRepository
from hivemind.domain.value import HiveId, HiveName, RollupDelta
from hivemind.persistence.mappers import (
    HIVE_ROLLUP_COLUMNS,
    hive_to_dict,
    row_to_hive,
    without,
)
from hivemind.persistence.tables import hives_table


class PostgresHiveRepository(HiveRepository):
    """PostgreSQL implementation of HiveRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, hive_id: HiveId, for_update: bool = False
    ) -> Optional[Hive]:
        """Find a hive by ID, optionally locking the row."""
        stmt = select(hives_table).where(hives_table.c.id == hive_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_hive(row._asdict()) if row else None

    async def find_by_name(self, name: HiveName) -> Optional[Hive]:
        """Find a hive by name."""
        stmt = select(hives_table).where(hives_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_hive(row._asdict()) if row else None

    async def find_all(self) -> List[Hive]:
        """Find all hives ordered by creation."""
        stmt = select(hives_table).order_by(hives_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_hive(row._asdict()) for row in result.fetchall()]

    async def save(self, hive: Hive) -> Hive:
        """Save a hive (create or update).

        Rollup columns are written on insert only.
        """
        with logfire.span("hive_repository.save", hive_id=str(hive.id)):
            hive_dict = hive_to_dict(hive)
            existing = await self.find_by_id(hive.id)

            if existing:
                stmt = (
                    update(hives_table)
                    .where(hives_table.c.id == hive.id)
                    .values(**without(hive_dict, HIVE_ROLLUP_COLUMNS + ("id",)))
                    .returning(hives_table)
                )
            else:
                stmt = hives_table.insert().values(**hive_dict).returning(hives_table)

            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_hive(row._asdict())

    async def adjust_rollups(
        self, hive_id: HiveId, delta: RollupDelta
    ) -> Optional[Hive]:
        """Atomically add a delta to the hive's rollups."""
        stmt = (
            update(hives_table)
            .where(hives_table.c.id == hive_id)
            .values(
                total_upvotes=hives_table.c.total_upvotes + delta.upvotes,
                total_downvotes=hives_table.c.total_downvotes + delta.downvotes,
                total_comments=hives_table.c.total_comments + delta.comments,
                total_content=hives_table.c.total_content + delta.content,
            )
            .returning(hives_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_hive(row._asdict()) if row else None
