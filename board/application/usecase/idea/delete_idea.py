"""Delete idea use case."""

import logfire
from pydantic import BaseModel

from board.application.context import RequestContext
from board.domain.error import NotAuthorizedError
from board.domain.repository import UnitOfWork
from board.domain.service import IdeaService, IdentityService, VoteService
from board.domain.value import IdeaId


class DeleteIdeaRequest(BaseModel):
    """Delete idea request."""

    idea_id: int
    context: RequestContext


class DeleteIdeaUseCase:
    """Use case for an admin removing an idea from the board."""

    def __init__(
        self,
        identity_service: IdentityService,
        idea_service: IdeaService,
        vote_service: VoteService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize delete idea use case.

        Args:
            identity_service: Identity domain service
            idea_service: Idea domain service
            vote_service: Vote domain service
            unit_of_work: Commit boundary of the request
        """
        self.identity_service = identity_service
        self.idea_service = idea_service
        self.vote_service = vote_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: DeleteIdeaRequest) -> None:
        """Execute delete idea flow.

        The idea's votes are removed along with it.

        Args:
            request: Delete idea request

        Raises:
            NotAuthorizedError: If the caller is not an admin
            IdeaNotFoundError: If the idea does not exist
        """
        caller = self.identity_service.resolve(
            request.context.auth_token, request.context.fingerprint_store
        )
        if not self.identity_service.is_admin(caller):
            logfire.warn("Non-admin attempted idea deletion", caller=str(caller))
            raise NotAuthorizedError("delete ideas", str(caller))

        idea_id = IdeaId(request.idea_id)
        with logfire.span("delete_idea.execute", idea_id=idea_id, admin=str(caller)):
            await self.idea_service.require_idea(idea_id)
            await self.vote_service.purge_votes(idea_id)
            await self.idea_service.delete_idea(idea_id)
            await self.unit_of_work.commit()
