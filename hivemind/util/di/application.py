"""Application layer DI providers."""

from dishka import Scope, provide

from hivemind.application.usecase.comment import (
    CreateCommentUseCase,
    CreateReplyUseCase,
    GetCommentsUseCase,
    GetCommentThreadUseCase,
    GetCommentUseCase,
    UpdateCommentUseCase,
)
from hivemind.application.usecase.content import (
    CreateContentUseCase,
    GetContentUseCase,
    ListContentUseCase,
    UpdateContentUseCase,
)
from hivemind.application.usecase.hive import (
    CreateHiveUseCase,
    GetHiveUseCase,
    ListHivesUseCase,
    SetHiveFlagUseCase,
    UpdateHiveUseCase,
)
from hivemind.application.usecase.lifecycle import SoftDeleteUseCase, UndeleteUseCase
from hivemind.application.usecase.vote import (
    CastVoteUseCase,
    GetVoteSummaryUseCase,
    WithdrawVoteUseCase,
)
from hivemind.domain.service import (
    AggregateConsistencyEngine,
    CommentService,
    ContentService,
    HiveService,
)
from hivemind.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Engine use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, engine: AggregateConsistencyEngine
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(engine=engine)

    @provide(scope=Scope.REQUEST)
    def get_withdraw_vote_use_case(
        self, engine: AggregateConsistencyEngine
    ) -> WithdrawVoteUseCase:
        """Provide withdraw vote use case."""
        return WithdrawVoteUseCase(engine=engine)

    @provide(scope=Scope.REQUEST)
    def get_get_vote_summary_use_case(
        self, engine: AggregateConsistencyEngine
    ) -> GetVoteSummaryUseCase:
        """Provide get vote summary use case."""
        return GetVoteSummaryUseCase(engine=engine)

    @provide(scope=Scope.REQUEST)
    def get_soft_delete_use_case(
        self, engine: AggregateConsistencyEngine
    ) -> SoftDeleteUseCase:
        """Provide soft delete use case."""
        return SoftDeleteUseCase(engine=engine)

    @provide(scope=Scope.REQUEST)
    def get_undelete_use_case(
        self, engine: AggregateConsistencyEngine
    ) -> UndeleteUseCase:
        """Provide undelete use case."""
        return UndeleteUseCase(engine=engine)

    @provide(scope=Scope.REQUEST)
    def get_create_content_use_case(
        self, engine: AggregateConsistencyEngine
    ) -> CreateContentUseCase:
        """Provide create content use case."""
        return CreateContentUseCase(engine=engine)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, engine: AggregateConsistencyEngine
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(engine=engine)

    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self, engine: AggregateConsistencyEngine
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(engine=engine)

    # Content use cases
    @provide(scope=Scope.REQUEST)
    def get_get_content_use_case(
        self, content_service: ContentService
    ) -> GetContentUseCase:
        """Provide get content use case."""
        return GetContentUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_list_content_use_case(
        self, content_service: ContentService, hive_service: HiveService
    ) -> ListContentUseCase:
        """Provide list content use case."""
        return ListContentUseCase(
            content_service=content_service, hive_service=hive_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_content_use_case(
        self, content_service: ContentService
    ) -> UpdateContentUseCase:
        """Provide update content use case."""
        return UpdateContentUseCase(content_service=content_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, content_service: ContentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, content_service=content_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_thread_use_case(
        self, comment_service: CommentService
    ) -> GetCommentThreadUseCase:
        """Provide get comment thread use case."""
        return GetCommentThreadUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    # Hive use cases
    @provide(scope=Scope.REQUEST)
    def get_create_hive_use_case(self, hive_service: HiveService) -> CreateHiveUseCase:
        """Provide create hive use case."""
        return CreateHiveUseCase(hive_service=hive_service)

    @provide(scope=Scope.REQUEST)
    def get_get_hive_use_case(self, hive_service: HiveService) -> GetHiveUseCase:
        """Provide get hive use case."""
        return GetHiveUseCase(hive_service=hive_service)

    @provide(scope=Scope.REQUEST)
    def get_list_hives_use_case(self, hive_service: HiveService) -> ListHivesUseCase:
        """Provide list hives use case."""
        return ListHivesUseCase(hive_service=hive_service)

    @provide(scope=Scope.REQUEST)
    def get_update_hive_use_case(self, hive_service: HiveService) -> UpdateHiveUseCase:
        """Provide update hive use case."""
        return UpdateHiveUseCase(hive_service=hive_service)

    @provide(scope=Scope.REQUEST)
    def get_set_hive_flag_use_case(
        self, hive_service: HiveService
    ) -> SetHiveFlagUseCase:
        """Provide set hive flag use case."""
        return SetHiveFlagUseCase(hive_service=hive_service)
