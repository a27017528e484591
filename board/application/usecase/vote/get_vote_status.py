"""Get vote status use case."""

from pydantic import BaseModel

from board.application.context import RequestContext
from board.domain.service import IdeaService, IdentityService, VoteService
from board.domain.value import IdeaId


class GetVoteStatusRequest(BaseModel):
    """Get vote status request."""

    idea_id: int
    context: RequestContext


class GetVoteStatusResponse(BaseModel):
    """Get vote status response."""

    idea_id: int
    has_voted: bool


class GetVoteStatusUseCase:
    """Use case for checking whether the caller already voted on an idea."""

    def __init__(
        self,
        identity_service: IdentityService,
        idea_service: IdeaService,
        vote_service: VoteService,
    ) -> None:
        self.identity_service = identity_service
        self.idea_service = idea_service
        self.vote_service = vote_service

    async def execute(self, request: GetVoteStatusRequest) -> GetVoteStatusResponse:
        """Execute get vote status flow.

        Raises:
            IdeaNotFoundError: If the idea does not exist
        """
        idea = await self.idea_service.require_idea(IdeaId(request.idea_id))

        voter = self.identity_service.resolve(
            request.context.auth_token, request.context.fingerprint_store
        )

        return GetVoteStatusResponse(
            idea_id=idea.id,
            has_voted=await self.vote_service.has_voted(idea.id, voter),
        )
