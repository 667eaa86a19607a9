"""In-memory vote record repository for testing."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from hivemind.domain.model import VoteRecord
from hivemind.domain.repository import VoteRepository
from hivemind.domain.value import AccountId, VotableType

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_account_and_votable(
        self,
        account_id: AccountId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[VoteRecord]:
        """Find a vote record by account and votable item."""
        return self.store.vote_records.get((account_id, votable_type, votable_id))

    async def find_by_account(
        self,
        account_id: AccountId,
        votable_type: VotableType | None = None,
    ) -> List[VoteRecord]:
        """Find all vote records of an account."""
        return [
            r
            for r in self.store.vote_records.values()
            if r.account_id == account_id
            and (votable_type is None or r.votable_type == votable_type)
        ]

    async def save(self, record: VoteRecord) -> VoteRecord:
        """Save a new vote record.

        Raises:
            IntegrityError: If a record already exists (duplicate)
        """
        key = (record.account_id, record.votable_type, record.votable_id)
        if key in self.store.vote_records:
            raise IntegrityError("Duplicate vote record", None, Exception())

        self.store.vote_records[key] = record
        return record

    async def update(self, record: VoteRecord) -> VoteRecord:
        """Persist a state change of an existing vote record."""
        key = (record.account_id, record.votable_type, record.votable_id)
        self.store.vote_records[key] = record
        return record
