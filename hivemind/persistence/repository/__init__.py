"""PostgreSQL repository implementations."""

from hivemind.persistence.repository.account import PostgresAccountRepository
from hivemind.persistence.repository.comment import PostgresCommentRepository
from hivemind.persistence.repository.content import PostgresContentRepository
from hivemind.persistence.repository.hive import PostgresHiveRepository
from hivemind.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresCommentRepository",
    "PostgresContentRepository",
    "PostgresHiveRepository",
    "PostgresVoteRepository",
]
