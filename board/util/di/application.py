"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.idea import (
    DeleteIdeaUseCase,
    GetBoardStatisticsUseCase,
    GetIdeaUseCase,
    ListIdeasUseCase,
    SubmitIdeaUseCase,
)
from board.application.usecase.vote import CastVoteUseCase, GetVoteStatusUseCase
from board.config import BoardSettings
from board.domain.repository import UnitOfWork
from board.domain.service import (
    IdeaService,
    IdentityService,
    RankingService,
    VoteService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Idea use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_idea_use_case(
        self,
        identity_service: IdentityService,
        idea_service: IdeaService,
        board_settings: BoardSettings,
        unit_of_work: UnitOfWork,
    ) -> SubmitIdeaUseCase:
        """Provide submit idea use case."""
        return SubmitIdeaUseCase(
            identity_service=identity_service,
            idea_service=idea_service,
            board_settings=board_settings,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_ideas_use_case(
        self,
        identity_service: IdentityService,
        ranking_service: RankingService,
        vote_service: VoteService,
    ) -> ListIdeasUseCase:
        """Provide list ideas use case."""
        return ListIdeasUseCase(
            identity_service=identity_service,
            ranking_service=ranking_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_idea_use_case(
        self,
        identity_service: IdentityService,
        idea_service: IdeaService,
        vote_service: VoteService,
    ) -> GetIdeaUseCase:
        """Provide get idea use case."""
        return GetIdeaUseCase(
            identity_service=identity_service,
            idea_service=idea_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_board_statistics_use_case(
        self, idea_service: IdeaService
    ) -> GetBoardStatisticsUseCase:
        """Provide board statistics use case."""
        return GetBoardStatisticsUseCase(idea_service=idea_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_idea_use_case(
        self,
        identity_service: IdentityService,
        idea_service: IdeaService,
        vote_service: VoteService,
        unit_of_work: UnitOfWork,
    ) -> DeleteIdeaUseCase:
        """Provide delete idea use case."""
        return DeleteIdeaUseCase(
            identity_service=identity_service,
            idea_service=idea_service,
            vote_service=vote_service,
            unit_of_work=unit_of_work,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        identity_service: IdentityService,
        vote_service: VoteService,
        unit_of_work: UnitOfWork,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            identity_service=identity_service,
            vote_service=vote_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_status_use_case(
        self,
        identity_service: IdentityService,
        idea_service: IdeaService,
        vote_service: VoteService,
    ) -> GetVoteStatusUseCase:
        """Provide vote status use case."""
        return GetVoteStatusUseCase(
            identity_service=identity_service,
            idea_service=idea_service,
            vote_service=vote_service,
        )
