"""Mock persistence providers for testing."""

from dishka import Scope, provide

from hivemind.domain.repository import (
    AccountRepository,
    CommentRepository,
    ContentRepository,
    HiveRepository,
    UnitOfWork,
    VoteRepository,
)
from hivemind.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryCommentRepository,
    InMemoryContentRepository,
    InMemoryHiveRepository,
    InMemoryStore,
    InMemoryUnitOfWork,
    InMemoryVoteRepository,
)
from hivemind.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP scoped so every request of one container sees the same
    data, like a database. Each container (and so each test) starts empty.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the in-memory tables shared by all repositories."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, store: InMemoryStore) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork(store)

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, store: InMemoryStore) -> AccountRepository:
        """Provide in-memory account repository."""
        return InMemoryAccountRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_hive_repository(self, store: InMemoryStore) -> HiveRepository:
        """Provide in-memory hive repository."""
        return InMemoryHiveRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_content_repository(self, store: InMemoryStore) -> ContentRepository:
        """Provide in-memory content repository."""
        return InMemoryContentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, store: InMemoryStore) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(store)
