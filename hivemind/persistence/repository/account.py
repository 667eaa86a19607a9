"""PostgreSQL implementation of Account repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from hivemind.domain.model import Account
from hivemind.domain.repository import AccountRepository
from hivemind.domain.value import AccountId
from hivemind.persistence.mappers import account_to_dict, row_to_account
from hivemind.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_account(row._asdict()) if row else None

    async def save(self, account: Account) -> Account:
        """Save an account (create or update username)."""
        existing = await self.find_by_id(account.id)
        if existing:
            stmt = (
                accounts_table.update()
                .where(accounts_table.c.id == account.id)
                .values(username=account.username.root)
            )
        else:
            stmt = insert(accounts_table).values(**account_to_dict(account))
        await self.session.execute(stmt)
        await self.session.flush()
        return account
