"""Shared state for the in-memory repositories."""

import asyncio
from dataclasses import dataclass, field, replace
from typing import Dict, Tuple
from uuid import UUID

from hivemind.domain.model import Account, Comment, Content, Hive, VoteRecord
from hivemind.domain.value import AccountId, VotableType

VoteKey = Tuple[AccountId, VotableType, UUID]


@dataclass
class InMemoryStore:
    """Tables of the in-memory backend.

    One store is shared by every repository of a container, so data written
    in one request is visible to the next, like a database.
    Models are immutable, so a shallow copy of each table is a full snapshot.

    ``write_lock`` is held by one unit of work at a time, from ``begin`` to
    commit or rollback. It stands in for the row locks of the database.
    """

    accounts: Dict[UUID, Account] = field(default_factory=dict)
    hives: Dict[UUID, Hive] = field(default_factory=dict)
    contents: Dict[UUID, Content] = field(default_factory=dict)
    comments: Dict[UUID, Comment] = field(default_factory=dict)
    vote_records: Dict[VoteKey, VoteRecord] = field(default_factory=dict)
    write_lock: asyncio.Lock = field(
        default_factory=asyncio.Lock, repr=False, compare=False
    )

    def snapshot(self) -> "InMemoryStore":
        return replace(
            self,
            accounts=dict(self.accounts),
            hives=dict(self.hives),
            contents=dict(self.contents),
            comments=dict(self.comments),
            vote_records=dict(self.vote_records),
        )

    def restore(self, snapshot: "InMemoryStore") -> None:
        self.accounts = dict(snapshot.accounts)
        self.hives = dict(snapshot.hives)
        self.contents = dict(snapshot.contents)
        self.comments = dict(snapshot.comments)
        self.vote_records = dict(snapshot.vote_records)
