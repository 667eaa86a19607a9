"""Strongly typed identifiers for Hivemind domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
HiveId = NewType("HiveId", UUID)
ContentId = NewType("ContentId", UUID)
CommentId = NewType("CommentId", UUID)
VoteRecordId = NewType("VoteRecordId", UUID)
