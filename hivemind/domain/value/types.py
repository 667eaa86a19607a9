"""Domain value objects for Hivemind.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and the arithmetic of counter deltas.
"""

import re
from enum import Enum
from uuid import UUID

from pydantic import field_validator

from hivemind.domain.value.common import RootValueObject, ValueObject


class VoteDirection(str, Enum):
    """Direction a voter can cast or withdraw."""

    UP = "up"
    DOWN = "down"

    @property
    def active_state(self) -> "VoteState":
        """Vote record state produced by casting in this direction."""
        return VoteState.UPVOTED if self is VoteDirection.UP else VoteState.DOWNVOTED


class VoteState(str, Enum):
    """State of an existing vote record.

    A missing record is the implicit fourth state. NEUTRAL is only reachable
    by withdrawing a vote; records are never deleted.
    """

    NEUTRAL = "neutral"
    UPVOTED = "upvoted"
    DOWNVOTED = "downvoted"

    @property
    def is_active(self) -> bool:
        """Whether the record currently counts towards a tally."""
        return self is not VoteState.NEUTRAL


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    CONTENT = "content"
    COMMENT = "comment"


class HiveStatusFlag(str, Enum):
    """Moderation flags on a hive."""

    ARCHIVED = "archived"
    BANNED = "banned"


class VoteDelta(ValueObject):
    """Signed change to a pair of vote tallies."""

    upvotes: int = 0
    downvotes: int = 0

    @classmethod
    def of(cls, direction: VoteDirection, amount: int) -> "VoteDelta":
        """Delta of ``amount`` applied to the tally for ``direction``."""
        if direction is VoteDirection.UP:
            return cls(upvotes=amount)
        return cls(downvotes=amount)


class RollupDelta(ValueObject):
    """Signed change to a hive's rollup counters."""

    upvotes: int = 0
    downvotes: int = 0
    comments: int = 0
    content: int = 0

    @classmethod
    def from_votes(cls, delta: VoteDelta) -> "RollupDelta":
        return cls(upvotes=delta.upvotes, downvotes=delta.downvotes)


class Username(RootValueObject[str]):
    """Account username as carried by the caller's identity token."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v


class HiveName(RootValueObject[str]):
    """Hive name.

    Must be 1-30 alphabetic characters.
    Examples: 'science', 'Gardening'
    """

    @field_validator("root")
    @classmethod
    def validate_hive_name(cls, v: str) -> str:
        """Validate hive name format."""
        if not re.match(r"^[A-Za-z]{1,30}$", v):
            raise ValueError(
                "Hive name should be between 1 and 30 characters long and contain only alphabetic characters."
            )
        return v


class CallerIdentity(ValueObject):
    """Identity of the account making a request, resolved from its token."""

    account_id: UUID
    username: Username
