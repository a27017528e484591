"""Cast vote use case."""

import logfire
from pydantic import BaseModel

from board.application.context import RequestContext
from board.domain.repository import UnitOfWork
from board.domain.service import IdentityService, VoteService
from board.domain.value import IdeaId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    idea_id: int
    context: RequestContext


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    idea_id: int
    accepted: bool  # False when the caller had already voted
    new_count: int


class CastVoteUseCase:
    """Use case for voting on an idea."""

    def __init__(
        self,
        identity_service: IdentityService,
        vote_service: VoteService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            identity_service: Identity domain service
            vote_service: Vote domain service
            unit_of_work: Commit boundary of the request
        """
        self.identity_service = identity_service
        self.vote_service = vote_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Whether the vote counted and the idea's resulting vote count

        Raises:
            IdeaNotFoundError: If the idea does not exist
        """
        voter = self.identity_service.resolve(
            request.context.auth_token, request.context.fingerprint_store
        )

        idea_id = IdeaId(request.idea_id)
        outcome = await self.vote_service.cast_vote(idea_id, voter)
        # The reported count must already be durable
        await self.unit_of_work.commit()

        if not outcome.accepted:
            logfire.info("Vote not counted, already voted", idea_id=idea_id)

        return CastVoteResponse(
            idea_id=idea_id,
            accepted=outcome.accepted,
            new_count=outcome.new_count,
        )
