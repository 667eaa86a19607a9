"""Repository interfaces for Hivemind domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from hivemind.domain.repository.account import AccountRepository
from hivemind.domain.repository.comment import CommentRepository
from hivemind.domain.repository.content import ContentRepository
from hivemind.domain.repository.hive import HiveRepository
from hivemind.domain.repository.unit_of_work import UnitOfWork
from hivemind.domain.repository.vote import VoteRepository

__all__ = [
    "AccountRepository",
    "CommentRepository",
    "ContentRepository",
    "HiveRepository",
    "UnitOfWork",
    "VoteRepository",
]
