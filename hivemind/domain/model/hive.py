"""Hive aggregate.

A hive is a topical group that content is posted into. It carries
denormalized rollups of its children's counters for read efficiency.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hivemind.domain.model.common import DomainModel, PatchModel
from hivemind.domain.value import AccountId, HiveId, HiveName, HiveStatusFlag
from hivemind.domain.value.types import Username


class Hive(DomainModel):
    """Hive aggregate.

    Rollups must always equal the sum of the corresponding child counters:
    - total_upvotes / total_downvotes: vote tallies of all its content,
      deleted content included
    - total_comments: live (non-deleted) comments across its content
    - total_content: live (non-deleted) content items
    """

    id: HiveId
    name: HiveName
    creator: Username
    account_id: AccountId
    description: str = Field(min_length=1, max_length=256)
    member_count: int = 0
    total_upvotes: int = 0
    total_downvotes: int = 0
    total_comments: int = 0
    total_content: int = 0
    archived: bool = False
    banned: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    last_edited: Optional[datetime] = None

    def has_flag(self, flag: HiveStatusFlag) -> bool:
        """Current value of a moderation flag."""
        return self.archived if flag is HiveStatusFlag.ARCHIVED else self.banned


class HivePatch(PatchModel):
    """Fields of a hive a caller may change."""

    required_fields = ("description",)

    description: Optional[str] = Field(default=None, min_length=1, max_length=256)
