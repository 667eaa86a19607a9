"""Vote record repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from hivemind.domain.model import VoteRecord
from hivemind.domain.value import AccountId, VotableType


class VoteRepository(ABC):
    """Repository for VoteRecord entity.

    Records are created and updated, never deleted.
    """

    @abstractmethod
    async def find_by_account_and_votable(
        self,
        account_id: AccountId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[VoteRecord]:
        """Find an account's vote record on a specific item.

        Args:
            account_id: The voter's account ID
            votable_type: Type of item (content or comment)
            votable_id: ID of the item

        Returns:
            The vote record if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_account(
        self,
        account_id: AccountId,
        votable_type: VotableType | None = None,
    ) -> List[VoteRecord]:
        """Find all vote records of an account.

        Args:
            account_id: The voter's account ID
            votable_type: Restrict to one type of item

        Returns:
            List of vote records, neutral ones included
        """
        pass

    @abstractmethod
    async def save(self, record: VoteRecord) -> VoteRecord:
        """Save a new vote record.

        Args:
            record: The vote record to create

        Returns:
            The saved vote record

        Raises:
            IntegrityError: If a record already exists for this account/votable
        """
        pass

    @abstractmethod
    async def update(self, record: VoteRecord) -> VoteRecord:
        """Persist a state change of an existing vote record.

        Args:
            record: The vote record with its new state

        Returns:
            The updated vote record
        """
        pass
