"""Domain value objects for Hivemind."""

from hivemind.domain.value.identifiers import (
    AccountId,
    CommentId,
    ContentId,
    HiveId,
    VoteRecordId,
)
from hivemind.domain.value.types import (
    CallerIdentity,
    HiveName,
    HiveStatusFlag,
    RollupDelta,
    Username,
    VotableType,
    VoteDelta,
    VoteDirection,
    VoteState,
)

__all__ = [
    # Identifiers
    "AccountId",
    "HiveId",
    "ContentId",
    "CommentId",
    "VoteRecordId",
    # Types
    "CallerIdentity",
    "HiveName",
    "HiveStatusFlag",
    "RollupDelta",
    "Username",
    "VotableType",
    "VoteDelta",
    "VoteDirection",
    "VoteState",
]
