"""Get idea use case."""

from pydantic import BaseModel

from board.application.context import RequestContext
from board.domain.service import IdeaService, IdentityService, VoteService
from board.domain.value import IdeaId

from .view import IdeaView


class GetIdeaRequest(BaseModel):
    """Get idea request."""

    idea_id: int
    context: RequestContext


class GetIdeaResponse(BaseModel):
    """Get idea response."""

    idea: IdeaView


class GetIdeaUseCase:
    """Use case for fetching a single idea."""

    def __init__(
        self,
        identity_service: IdentityService,
        idea_service: IdeaService,
        vote_service: VoteService,
    ) -> None:
        self.identity_service = identity_service
        self.idea_service = idea_service
        self.vote_service = vote_service

    async def execute(self, request: GetIdeaRequest) -> GetIdeaResponse:
        """Execute get idea flow.

        Raises:
            IdeaNotFoundError: If the idea does not exist
        """
        idea = await self.idea_service.require_idea(IdeaId(request.idea_id))

        voter = self.identity_service.resolve(
            request.context.auth_token, request.context.fingerprint_store
        )
        has_voted = await self.vote_service.has_voted(idea.id, voter)

        return GetIdeaResponse(idea=IdeaView.from_idea(idea, has_voted))
