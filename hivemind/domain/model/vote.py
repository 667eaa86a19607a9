"""Vote record entity.

One record per (account, votable) pair, created on the first vote and never
deleted afterwards.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from hivemind.domain.model.common import DomainModel
from hivemind.domain.value import AccountId, VotableType, VoteRecordId, VoteState


class VoteRecord(DomainModel):
    """Vote ledger entry.

    Business rules:
    - One record per account per item (enforced by database unique constraint)
    - Withdrawing moves the record to NEUTRAL rather than deleting it
    - Polymorphic reference to the votable (content or comment)
    """

    id: VoteRecordId
    account_id: AccountId
    votable_type: VotableType
    votable_id: UUID  # ContentId or CommentId (both are UUIDs)
    state: VoteState
    last_edited: datetime = Field(default_factory=datetime.now)
