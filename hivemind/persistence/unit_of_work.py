"""PostgreSQL unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from hivemind.domain.repository import UnitOfWork


class SessionUnitOfWork(UnitOfWork):
    """Unit of work over the request-scoped SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with database session.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session

    async def commit(self) -> None:
        """Commit the session's transaction.

        SQLAlchemy errors propagate; ``atomic`` turns them into
        StorageFailureError after rolling back.
        """
        await self.session.commit()

    async def rollback(self) -> None:
        """Roll back the session's transaction, releasing row locks."""
        with logfire.span("unit_of_work.rollback"):
            await self.session.rollback()
