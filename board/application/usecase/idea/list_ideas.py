"""List ideas use case."""

import logfire
from pydantic import BaseModel

from board.application.context import RequestContext
from board.domain.service import IdentityService, RankingService, VoteService
from board.domain.value import RankingMode

from .view import IdeaView


class ListIdeasRequest(BaseModel):
    """List ideas request."""

    sort: RankingMode = RankingMode.POPULAR  # The board opens on the Popular tab
    query: str | None = None
    context: RequestContext


class ListIdeasResponse(BaseModel):
    """List ideas response."""

    ideas: list[IdeaView]
    total: int
    sort: RankingMode
    query: str | None


class ListIdeasUseCase:
    """Use case for listing ranked ideas, optionally filtered by search text."""

    def __init__(
        self,
        identity_service: IdentityService,
        ranking_service: RankingService,
        vote_service: VoteService,
    ) -> None:
        """Initialize list ideas use case.

        Args:
            identity_service: Identity domain service
            ranking_service: Ranking domain service
            vote_service: Vote domain service
        """
        self.identity_service = identity_service
        self.ranking_service = ranking_service
        self.vote_service = vote_service

    async def execute(self, request: ListIdeasRequest) -> ListIdeasResponse:
        """Execute list ideas flow.

        Args:
            request: List ideas request with sort mode and search text

        Returns:
            Ranked ideas, each marked with whether the caller voted on it
        """
        with logfire.span(
            "list_ideas.execute", sort=request.sort.value, query=request.query
        ):
            ideas = await self.ranking_service.ranked(request.sort, request.query)

            voter = self.identity_service.resolve(
                request.context.auth_token, request.context.fingerprint_store
            )
            # Batch query to avoid N+1
            voted = await self.vote_service.voted_idea_ids(
                voter, [idea.id for idea in ideas]
            )

            items = [IdeaView.from_idea(idea, idea.id in voted) for idea in ideas]

            logfire.info("Ideas listed", count=len(items))

            return ListIdeasResponse(
                ideas=items,
                total=len(items),
                sort=request.sort,
                query=request.query,
            )
