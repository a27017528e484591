"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import AuthSettings, BoardSettings
from board.domain.repository import IdeaRepository, VoteRepository
from board.domain.service import (
    IdeaService,
    IdentityService,
    RankingService,
    VoteService,
)
from board.util.clock import MonotonicClock
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_identity_service(
        self, auth_settings: AuthSettings, board_settings: BoardSettings
    ) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(
            auth_settings=auth_settings, board_settings=board_settings
        )

    @provide
    def get_idea_service(
        self, idea_repository: IdeaRepository, clock: MonotonicClock
    ) -> IdeaService:
        """Provide idea domain service."""
        return IdeaService(idea_repository=idea_repository, clock=clock)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        idea_repository: IdeaRepository,
        clock: MonotonicClock,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            idea_repository=idea_repository,
            clock=clock,
        )

    @provide
    def get_ranking_service(self, idea_repository: IdeaRepository) -> RankingService:
        """Provide ranking domain service."""
        return RankingService(idea_repository=idea_repository)
