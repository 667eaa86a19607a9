"""PostgreSQL implementation of Vote record repository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hivemind.domain.model import VoteRecord
from hivemind.domain.repository import VoteRepository
from hivemind.domain.value import AccountId, VotableType
from hivemind.persistence.mappers import row_to_vote_record, vote_record_to_dict
from hivemind.persistence.tables import vote_records_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_account_and_votable(
        self,
        account_id: AccountId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[VoteRecord]:
        """Find an account's vote record on a specific item."""
        stmt = select(vote_records_table).where(
            and_(
                vote_records_table.c.account_id == account_id,
                vote_records_table.c.votable_type == votable_type.value,
                vote_records_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote_record(row._asdict()) if row else None

    async def find_by_account(
        self,
        account_id: AccountId,
        votable_type: VotableType | None = None,
    ) -> List[VoteRecord]:
        """Find all vote records of an account."""
        stmt = select(vote_records_table).where(
            vote_records_table.c.account_id == account_id
        )
        if votable_type is not None:
            stmt = stmt.where(vote_records_table.c.votable_type == votable_type.value)
        result = await self.session.execute(stmt)
        return [row_to_vote_record(row._asdict()) for row in result.fetchall()]

    async def save(self, record: VoteRecord) -> VoteRecord:
        """Save a new vote record.

        The insert is flushed immediately so a duplicate surfaces as
        IntegrityError here rather than at commit.
        """
        stmt = insert(vote_records_table).values(**vote_record_to_dict(record))
        await self.session.execute(stmt)
        await self.session.flush()
        return record

    async def update(self, record: VoteRecord) -> VoteRecord:
        """Persist a state change of an existing vote record."""
        stmt = (
            update(vote_records_table)
            .where(vote_records_table.c.id == record.id)
            .values(state=record.state.value, last_edited=record.last_edited)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return record
