"""Domain layer DI providers."""

from dishka import Scope, provide

from hivemind.config import AuthSettings, CommentSettings
from hivemind.domain.repository import (
    AccountRepository,
    CommentRepository,
    ContentRepository,
    HiveRepository,
    UnitOfWork,
    VoteRepository,
)
from hivemind.domain.service import (
    AggregateConsistencyEngine,
    CommentService,
    ContentService,
    CounterPropagator,
    HiveService,
    JWTService,
    LifecycleManager,
    VotableTargetLookup,
    VoteLedger,
)
from hivemind.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_votable_target_lookup(
        self,
        account_repository: AccountRepository,
        hive_repository: HiveRepository,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
    ) -> VotableTargetLookup:
        """Provide entity lookup service."""
        return VotableTargetLookup(
            account_repository=account_repository,
            hive_repository=hive_repository,
            content_repository=content_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_vote_ledger(self, vote_repository: VoteRepository) -> VoteLedger:
        """Provide vote ledger."""
        return VoteLedger(vote_repository=vote_repository)

    @provide
    def get_counter_propagator(
        self,
        hive_repository: HiveRepository,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
    ) -> CounterPropagator:
        """Provide counter propagator."""
        return CounterPropagator(
            hive_repository=hive_repository,
            content_repository=content_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_lifecycle_manager(
        self,
        hive_repository: HiveRepository,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
    ) -> LifecycleManager:
        """Provide lifecycle manager."""
        return LifecycleManager(
            hive_repository=hive_repository,
            content_repository=content_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_consistency_engine(
        self,
        lookup: VotableTargetLookup,
        vote_ledger: VoteLedger,
        counter_propagator: CounterPropagator,
        lifecycle_manager: LifecycleManager,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        unit_of_work: UnitOfWork,
    ) -> AggregateConsistencyEngine:
        """Provide aggregate consistency engine."""
        return AggregateConsistencyEngine(
            lookup=lookup,
            vote_ledger=vote_ledger,
            counter_propagator=counter_propagator,
            lifecycle_manager=lifecycle_manager,
            content_repository=content_repository,
            comment_repository=comment_repository,
            vote_repository=vote_repository,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_hive_service(
        self,
        hive_repository: HiveRepository,
        account_repository: AccountRepository,
        unit_of_work: UnitOfWork,
    ) -> HiveService:
        """Provide hive domain service."""
        return HiveService(
            hive_repository=hive_repository,
            account_repository=account_repository,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_content_service(
        self, content_repository: ContentRepository, unit_of_work: UnitOfWork
    ) -> ContentService:
        """Provide content domain service."""
        return ContentService(
            content_repository=content_repository, unit_of_work=unit_of_work
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        unit_of_work: UnitOfWork,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            unit_of_work=unit_of_work,
            comment_settings=comment_settings,
        )
