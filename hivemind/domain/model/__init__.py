"""Domain model entities for Hivemind."""

from typing import Union

from hivemind.domain.model.account import Account
from hivemind.domain.model.comment import Comment, CommentPatch
from hivemind.domain.model.content import Content, ContentPatch
from hivemind.domain.model.hive import Hive, HivePatch
from hivemind.domain.model.vote import VoteRecord

# Anything a vote record can point at
VotableTarget = Union[Content, Comment]

__all__ = [
    "Account",
    "Hive",
    "HivePatch",
    "Content",
    "ContentPatch",
    "Comment",
    "CommentPatch",
    "VoteRecord",
    "VotableTarget",
]
