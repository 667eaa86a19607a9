"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .comment import InMemoryCommentRepository
from .content import InMemoryContentRepository
from .hive import InMemoryHiveRepository
from .store import InMemoryStore
from .unit_of_work import InMemoryUnitOfWork
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryCommentRepository",
    "InMemoryContentRepository",
    "InMemoryHiveRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
    "InMemoryVoteRepository",
]
